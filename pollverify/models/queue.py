from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
import enum
from pollverify.database import Base


class QueueStatus(str, enum.Enum):
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ISSUE = "issue"
    SPECIAL_ASSISTANCE = "special_assistance"


class QueueType(str, enum.Enum):
    STANDARD = "standard"
    PROVISIONAL = "provisional"
    SPECIAL_ASSISTANCE = "special_assistance"


# Statuses that close out a queue entry and stamp who processed it
PROCESSED_STATUSES = (QueueStatus.COMPLETED.value, QueueStatus.ISSUE.value)


class QueueItem(Base):
    __tablename__ = "queue"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    voter_id = Column(Integer, ForeignKey("voters.id"), nullable=True, index=True)
    number = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default=QueueStatus.WAITING.value)
    type = Column(String, nullable=False, default=QueueType.STANDARD.value)
    wait_time_minutes = Column(Integer, nullable=True)
    entered_at = Column(DateTime, nullable=False)
    processed_at = Column(DateTime, nullable=True)
    processed_by = Column(Integer, ForeignKey("users.id"), nullable=True)
