from pydantic import EmailStr
from typing import Optional
from datetime import datetime
from pollverify.models.notification import NotificationType
from pollverify.schemas.base import CamelModel, StoreInt


class MobileNotificationCreate(CamelModel):
    voter_id: StoreInt
    phone_number: Optional[str] = None
    email: Optional[EmailStr] = None
    opted_in: bool = False
    notification_type: NotificationType = NotificationType.SMS


class MobileNotificationResponse(CamelModel):
    id: int
    voter_id: int
    phone_number: Optional[str]
    email: Optional[str]
    opted_in: bool
    verification_code: Optional[str]
    verified: bool
    notification_type: str
    last_notified: Optional[datetime]
    created_at: datetime


class VerificationRequest(CamelModel):
    verification_code: str


class SendNotificationRequest(CamelModel):
    message: str


class SendNotificationResponse(CamelModel):
    success: bool
    message: str
