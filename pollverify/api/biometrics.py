from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store, get_app_settings
from pollverify.config import Settings
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.biometric import BiometricCreate, BiometricResponse

router = APIRouter()


@router.get("/biometrics/voter/{voter_id}", response_model=BiometricResponse)
async def get_voter_biometric(voter_id: int, store: CheckInStore = Depends(get_store)):
    biometric = store.get_biometric_by_voter_id(voter_id)
    if biometric is None:
        raise NotFoundError("Biometric", voter_id, field="voterId", message="Biometric data not found for voter")
    return biometric


@router.post("/biometrics", response_model=BiometricResponse, status_code=status.HTTP_201_CREATED)
async def enroll_biometric(biometric_data: BiometricCreate, store: CheckInStore = Depends(get_store)):
    """Store a reference to a voter's biometric template (no biometric data is kept)"""
    return store.create_biometric(biometric_data)


@router.put("/biometrics/{biometric_id}/verify", response_model=BiometricResponse)
async def verify_biometric(
    biometric_id: int,
    store: CheckInStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
):
    """Mark a biometric match as confirmed by the demo poll worker"""
    return store.verify_biometric(biometric_id, settings.DEMO_OPERATOR_ID)
