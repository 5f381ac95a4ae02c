from typing import List
from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store, get_manager
from pollverify.core.store import CheckInStore
from pollverify.schemas.queue import (
    QueueItemCreate, QueueItemResponse, QueueItemWithVoter, QueueStatusUpdate, QueueStats
)
from pollverify.websocket.events import create_queue_update_event
from pollverify.websocket.manager import ConnectionManager

router = APIRouter()


@router.get("/queue", response_model=List[QueueItemWithVoter])
async def list_queue(store: CheckInStore = Depends(get_store)):
    """Queue entries joined with their voter"""
    return store.list_queue_with_voters()


@router.get("/queue/stats", response_model=QueueStats)
async def get_queue_stats(store: CheckInStore = Depends(get_store)):
    return store.get_queue_stats()


@router.post("/queue", response_model=QueueItemResponse, status_code=status.HTTP_201_CREATED)
async def create_queue_item(
    item_data: QueueItemCreate,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    """Add a voter to the queue"""
    item = store.create_queue_item(item_data)
    await manager.publish(create_queue_update_event(item, store.get_queue_stats()))
    return item


@router.put("/queue/{item_id}/status", response_model=QueueItemResponse)
async def update_queue_item_status(
    item_id: int,
    update: QueueStatusUpdate,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    """Move a queue entry to a new status"""
    item = store.update_queue_item_status(item_id, update.status, update.user_id)
    await manager.publish(create_queue_update_event(item, store.get_queue_stats()))
    return item
