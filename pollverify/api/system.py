from typing import List
from fastapi import APIRouter, Depends, Request, status
from pollverify.api.deps import get_store, get_app_settings, get_manager
from pollverify.config import Settings
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.user import UserResponse
from pollverify.schemas.system import (
    SystemStatusResponse, SystemStatusUpdate,
    AlertCreate, AlertResponse,
    MessageCreate, MessageResponse,
    ConnectionStatus
)
from pollverify.websocket.events import create_alert_event
from pollverify.websocket.manager import ConnectionManager

router = APIRouter()


# Users
@router.get("/users/current", response_model=UserResponse)
async def get_current_user(
    store: CheckInStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
):
    """
    The poll worker operating this terminal.

    There is no login in the demo, so this is the configured user.
    """
    user = store.get_user_by_username(settings.DEMO_CURRENT_USERNAME)
    if user is None:
        raise NotFoundError("User", settings.DEMO_CURRENT_USERNAME, field="username", message="User not found")
    return user


# System status
@router.get("/system-status", response_model=List[SystemStatusResponse])
async def list_system_statuses(store: CheckInStore = Depends(get_store)):
    return store.list_system_statuses()


@router.get("/system-status/{status_id}", response_model=SystemStatusResponse)
async def get_system_status(status_id: int, store: CheckInStore = Depends(get_store)):
    system_status = store.get_system_status(status_id)
    if system_status is None:
        raise NotFoundError("System status", status_id, message="System status not found")
    return system_status


@router.put("/system-status/{status_id}", response_model=SystemStatusResponse)
async def update_system_status(
    status_id: int,
    update: SystemStatusUpdate,
    store: CheckInStore = Depends(get_store)
):
    """Report a component's health; notes are only replaced when given"""
    return store.update_system_status(status_id, update.status, update.notes)


# Alerts
@router.get("/alerts", response_model=List[AlertResponse])
async def list_alerts(store: CheckInStore = Depends(get_store)):
    return store.list_alerts()


@router.post("/alerts", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
async def create_alert(
    alert_data: AlertCreate,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    alert = store.create_alert(alert_data)
    await manager.publish(create_alert_event(alert))
    return alert


# Messages
@router.get("/messages", response_model=List[MessageResponse])
async def list_messages(store: CheckInStore = Depends(get_store)):
    return store.list_messages()


@router.post("/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(message_data: MessageCreate, store: CheckInStore = Depends(get_store)):
    return store.create_message(message_data)


# Offline mode toggle
@router.get("/connection-status", response_model=ConnectionStatus)
async def get_connection_status(request: Request):
    return ConnectionStatus(connected=request.app.state.connected)


@router.post("/connection-status/toggle", response_model=ConnectionStatus)
async def toggle_connection_status(request: Request, body: ConnectionStatus = None):
    """Set the offline-mode flag, or flip it when no value is sent"""
    if body is None:
        request.app.state.connected = not request.app.state.connected
    else:
        request.app.state.connected = body.connected
    return ConnectionStatus(connected=request.app.state.connected)
