from pydantic import Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from pollverify.models.anomaly import AnomalyType, AnomalySeverity
from pollverify.schemas.base import CamelModel, StoreInt


class AnomalyCreate(CamelModel):
    type: AnomalyType
    description: str
    severity: AnomalySeverity = AnomalySeverity.LOW
    metadata: Optional[Dict[str, Any]] = None


class AnomalyResponse(CamelModel):
    id: int
    type: str
    description: str
    severity: str
    status: str
    detected_at: datetime
    resolved_at: Optional[datetime]
    resolved_by: Optional[int]
    metadata: Optional[Dict[str, Any]]
    actions: List[str]


class AnomalyResolve(CamelModel):
    user_id: StoreInt
    resolution: str = Field(..., min_length=1)
