from pydantic import Field
from typing import Optional, List
from datetime import datetime
from pollverify.schemas.base import CamelModel, StoreInt


class PredictiveAnalyticCreate(CamelModel):
    hour_of_day: int = Field(..., ge=0, le=23)
    day_of_week: int = Field(..., ge=0, le=6)  # 0 = Sunday
    predicted_voter_volume: Optional[StoreInt] = None
    predicted_wait_time: Optional[StoreInt] = None
    factors_considered: Optional[List[str]] = None


class PredictiveAnalyticResponse(CamelModel):
    id: int
    date: datetime
    hour_of_day: int
    day_of_week: int
    predicted_voter_volume: Optional[int]
    actual_voter_volume: Optional[int]
    predicted_wait_time: Optional[int]
    actual_wait_time: Optional[int]
    factors_considered: Optional[List[str]]
    accuracy_percentage: Optional[int]
    created_at: datetime


class ActualsUpdate(CamelModel):
    actual_voter_volume: StoreInt
    actual_wait_time: StoreInt
