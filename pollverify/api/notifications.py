from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.notification import (
    MobileNotificationCreate, MobileNotificationResponse,
    VerificationRequest, SendNotificationRequest, SendNotificationResponse
)

router = APIRouter()


@router.get("/mobile-notifications/voter/{voter_id}", response_model=MobileNotificationResponse)
async def get_voter_notification_settings(voter_id: int, store: CheckInStore = Depends(get_store)):
    notification = store.get_mobile_notification_by_voter_id(voter_id)
    if notification is None:
        raise NotFoundError(
            "Mobile notification", voter_id, field="voterId",
            message="Mobile notification settings not found for voter"
        )
    return notification


@router.post("/mobile-notifications", response_model=MobileNotificationResponse, status_code=status.HTTP_201_CREATED)
async def register_notification_contact(
    notification_data: MobileNotificationCreate,
    store: CheckInStore = Depends(get_store)
):
    """Register a contact; a six digit verification code is generated"""
    return store.create_mobile_notification(notification_data)


@router.post("/mobile-notifications/{notification_id}/verify", response_model=MobileNotificationResponse)
async def verify_notification_contact(
    notification_id: int,
    request_data: VerificationRequest,
    store: CheckInStore = Depends(get_store)
):
    return store.verify_mobile_notification(notification_id, request_data.verification_code)


@router.post("/mobile-notifications/{notification_id}/send", response_model=SendNotificationResponse)
async def send_notification(
    notification_id: int,
    request_data: SendNotificationRequest,
    store: CheckInStore = Depends(get_store)
):
    """Send a message to a verified contact (delivery is simulated)"""
    store.send_notification(notification_id, request_data.message)
    return SendNotificationResponse(success=True, message="Notification sent successfully")
