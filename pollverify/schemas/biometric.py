from typing import Optional
from datetime import datetime
from pollverify.models.biometric import BiometricType
from pollverify.schemas.base import CamelModel, StoreInt


class BiometricCreate(CamelModel):
    voter_id: StoreInt
    type: BiometricType
    data_reference: Optional[str] = None


class BiometricResponse(CamelModel):
    id: int
    voter_id: int
    type: str
    data_reference: Optional[str]
    verified: bool
    verified_at: Optional[datetime]
    verified_by: Optional[int]
    created_at: datetime
    updated_at: datetime
