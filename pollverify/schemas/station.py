from typing import Optional
from pollverify.models.station import StationStatus
from pollverify.schemas.base import CamelModel, StoreInt
from pollverify.schemas.user import UserResponse


class StationCreate(CamelModel):
    number: StoreInt
    status: StationStatus = StationStatus.INACTIVE
    operator_id: Optional[StoreInt] = None


class StationResponse(CamelModel):
    id: int
    number: int
    status: str
    operator_id: Optional[int]
    voters_processed: int


class StationWithOperator(StationResponse):
    operator: Optional[UserResponse] = None


class StationStatusUpdate(CamelModel):
    status: StationStatus
    operator_id: Optional[StoreInt] = None
