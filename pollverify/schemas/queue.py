from typing import Optional
from datetime import datetime
from pollverify.models.queue import QueueStatus, QueueType
from pollverify.schemas.base import CamelModel, StoreInt
from pollverify.schemas.voter import VoterResponse


class QueueItemCreate(CamelModel):
    voter_id: Optional[StoreInt] = None
    number: StoreInt
    status: QueueStatus = QueueStatus.WAITING
    type: QueueType = QueueType.STANDARD
    wait_time_minutes: Optional[StoreInt] = None


class QueueItemResponse(CamelModel):
    id: int
    voter_id: Optional[int]
    number: int
    status: str
    type: str
    wait_time_minutes: Optional[int]
    entered_at: datetime
    processed_at: Optional[datetime]
    processed_by: Optional[int]


class QueueItemWithVoter(QueueItemResponse):
    voter: Optional[VoterResponse] = None


class QueueStatusUpdate(CamelModel):
    status: QueueStatus
    user_id: Optional[StoreInt] = None


class QueueStats(CamelModel):
    waiting: int
    in_progress: int
    completed: int
