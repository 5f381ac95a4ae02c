from typing import List
from fastapi import APIRouter, Depends
from pollverify.api.deps import get_store
from pollverify.core.store import CheckInStore
from pollverify.schemas.station import StationResponse, StationWithOperator, StationStatusUpdate

router = APIRouter()


@router.get("/stations", response_model=List[StationWithOperator])
async def list_stations(store: CheckInStore = Depends(get_store)):
    """Stations with their operator (password never included)"""
    return store.list_stations_with_operators()


@router.put("/stations/{station_id}/status", response_model=StationResponse)
async def update_station_status(
    station_id: int,
    update: StationStatusUpdate,
    store: CheckInStore = Depends(get_store)
):
    return store.update_station_status(station_id, update.status, update.operator_id)
