from pydantic import Field
from typing import Optional
from datetime import datetime
from pollverify.schemas.base import SQLITE_INTEGER_MAX, CamelModel, StoreInt


class StatCreate(CamelModel):
    hour: int = Field(..., ge=0, le=23)
    voters_processed: int = Field(0, ge=0, le=SQLITE_INTEGER_MAX)
    average_processing_time: Optional[StoreInt] = None  # seconds
    wait_time: Optional[StoreInt] = None  # minutes
    throughput: Optional[StoreInt] = None  # voters per hour


class StatResponse(CamelModel):
    id: int
    date: datetime
    hour: int
    voters_processed: int
    average_processing_time: Optional[int]
    wait_time: Optional[int]
    throughput: Optional[int]


class StatsSummary(CamelModel):
    total_voters_processed: int
    avg_processing_time: float  # minutes, one decimal
    current_wait_time: int
    current_throughput: int
    peak_hour: str
    special_cases: int
