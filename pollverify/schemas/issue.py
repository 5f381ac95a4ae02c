from typing import Optional
from datetime import datetime
from pollverify.schemas.base import CamelModel, StoreInt


class IssueCreate(CamelModel):
    type: str
    description: Optional[str] = None
    reported_by: Optional[StoreInt] = None


class IssueResponse(CamelModel):
    id: int
    type: str
    description: Optional[str]
    status: str
    reported_at: datetime
    reported_by: Optional[int]
    resolved_at: Optional[datetime]
    resolved_by: Optional[int]
    resolution_time: Optional[int]


class IssueResolve(CamelModel):
    user_id: StoreInt
