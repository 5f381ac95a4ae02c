from typing import Optional
from datetime import datetime
from pollverify.models.system import ComponentStatus, AlertType
from pollverify.schemas.base import CamelModel


# System status
class SystemStatusCreate(CamelModel):
    component: str
    status: ComponentStatus = ComponentStatus.OPERATIONAL
    notes: Optional[str] = None


class SystemStatusResponse(CamelModel):
    id: int
    component: str
    status: str
    last_checked: datetime
    notes: Optional[str]


class SystemStatusUpdate(CamelModel):
    status: ComponentStatus
    notes: Optional[str] = None


# Alerts
class AlertCreate(CamelModel):
    type: AlertType
    title: str
    message: str


class AlertResponse(CamelModel):
    id: int
    type: str
    title: str
    message: str
    timestamp: datetime


# Messages
class MessageCreate(CamelModel):
    sender: str
    message: str


class MessageResponse(CamelModel):
    id: int
    sender: str
    message: str
    timestamp: datetime


class ConnectionStatus(CamelModel):
    connected: bool
