from sqlalchemy import Column, Integer, DateTime
from pollverify.database import Base


class Stat(Base):
    __tablename__ = "stats"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False, index=True)
    hour = Column(Integer, nullable=False)
    voters_processed = Column(Integer, nullable=False, default=0)
    average_processing_time = Column(Integer, nullable=True)  # in seconds
    wait_time = Column(Integer, nullable=True)  # in minutes
    throughput = Column(Integer, nullable=True)  # voters per hour
