from typing import List
from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store
from pollverify.core.store import CheckInStore
from pollverify.schemas.stat import StatCreate, StatResponse, StatsSummary

router = APIRouter()


@router.get("/stats", response_model=List[StatResponse])
async def get_today_stats(store: CheckInStore = Depends(get_store)):
    """Hourly rows recorded since midnight"""
    return store.get_today_stats()


@router.post("/stats", response_model=StatResponse, status_code=status.HTTP_201_CREATED)
async def record_stat(stat_data: StatCreate, store: CheckInStore = Depends(get_store)):
    return store.create_stat(stat_data)


@router.get("/stats/summary", response_model=StatsSummary)
async def get_stats_summary(store: CheckInStore = Depends(get_store)):
    """Today's totals, averages and peak hour"""
    return store.get_stats_summary()
