from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
import enum
from pollverify.database import Base


class NotificationType(str, enum.Enum):
    SMS = "sms"
    EMAIL = "email"


class MobileNotification(Base):
    __tablename__ = "mobile_notifications"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    voter_id = Column(Integer, ForeignKey("voters.id"), nullable=False, index=True)
    phone_number = Column(String, nullable=True)
    email = Column(String, nullable=True)
    opted_in = Column(Boolean, nullable=False, default=False)
    verification_code = Column(String, nullable=True)
    verified = Column(Boolean, nullable=False, default=False)
    notification_type = Column(String, nullable=False, default=NotificationType.SMS.value)
    last_notified = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False)
