from sqlalchemy import Column, Integer, DateTime, JSON
from pollverify.database import Base


class PredictiveAnalytic(Base):
    __tablename__ = "predictive_analytics"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False)
    hour_of_day = Column(Integer, nullable=False)
    day_of_week = Column(Integer, nullable=False)  # 0 = Sunday
    predicted_voter_volume = Column(Integer, nullable=True)
    actual_voter_volume = Column(Integer, nullable=True)
    predicted_wait_time = Column(Integer, nullable=True)  # in minutes
    actual_wait_time = Column(Integer, nullable=True)  # in minutes
    factors_considered = Column(JSON, nullable=True)
    accuracy_percentage = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False)
