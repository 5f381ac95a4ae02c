from typing import List
from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store, get_manager
from pollverify.core.store import CheckInStore
from pollverify.schemas.anomaly import AnomalyCreate, AnomalyResponse, AnomalyResolve
from pollverify.websocket.events import create_anomaly_event
from pollverify.websocket.manager import ConnectionManager

router = APIRouter()


@router.get("/anomalies", response_model=List[AnomalyResponse])
async def list_anomalies(store: CheckInStore = Depends(get_store)):
    return store.list_anomalies()


@router.post("/anomalies", response_model=AnomalyResponse, status_code=status.HTTP_201_CREATED)
async def report_anomaly(
    anomaly_data: AnomalyCreate,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    anomaly = store.create_anomaly(anomaly_data)
    await manager.publish(create_anomaly_event(anomaly))
    return anomaly


@router.post("/anomalies/test", response_model=AnomalyResponse, status_code=status.HTTP_201_CREATED)
async def create_test_anomaly(
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    """Raise a random demo anomaly to exercise the dashboard"""
    anomaly = store.create_test_anomaly()
    await manager.publish(create_anomaly_event(anomaly))
    return anomaly


@router.put("/anomalies/{anomaly_id}/resolve", response_model=AnomalyResponse)
async def resolve_anomaly(
    anomaly_id: int,
    resolve: AnomalyResolve,
    store: CheckInStore = Depends(get_store),
    manager: ConnectionManager = Depends(get_manager)
):
    """Resolve an anomaly; the resolution is appended to its actions"""
    anomaly = store.resolve_anomaly(anomaly_id, resolve.user_id, resolve.resolution)
    await manager.publish(create_anomaly_event(anomaly))
    return anomaly
