from sqlalchemy import Column, Integer, String, ForeignKey
import enum
from pollverify.database import Base


class StationStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Station(Base):
    __tablename__ = "stations"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    number = Column(Integer, unique=True, nullable=False)
    status = Column(String, nullable=False, default=StationStatus.INACTIVE.value)
    operator_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    voters_processed = Column(Integer, nullable=False, default=0)
