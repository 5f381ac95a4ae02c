from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.accessibility import (
    AccessibilityPreferenceCreate, AccessibilityPreferenceUpdate, AccessibilityPreferenceResponse
)

router = APIRouter()


@router.get("/accessibility/voter/{voter_id}", response_model=AccessibilityPreferenceResponse)
async def get_voter_accessibility(voter_id: int, store: CheckInStore = Depends(get_store)):
    preference = store.get_accessibility_preference_by_voter_id(voter_id)
    if preference is None:
        raise NotFoundError(
            "Accessibility preference", voter_id, field="voterId",
            message="Accessibility preferences not found for voter"
        )
    return preference


@router.post("/accessibility", response_model=AccessibilityPreferenceResponse, status_code=status.HTTP_201_CREATED)
async def create_accessibility_preference(
    preference_data: AccessibilityPreferenceCreate,
    store: CheckInStore = Depends(get_store)
):
    return store.create_accessibility_preference(preference_data)


@router.put("/accessibility/{preference_id}", response_model=AccessibilityPreferenceResponse)
async def update_accessibility_preference(
    preference_id: int,
    changes: AccessibilityPreferenceUpdate,
    store: CheckInStore = Depends(get_store)
):
    """Partial update: fields left out of the body keep their values"""
    return store.update_accessibility_preference(preference_id, changes)
