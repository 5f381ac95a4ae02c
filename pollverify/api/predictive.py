from typing import List
from fastapi import APIRouter, Depends, Query, status
from pollverify.api.deps import get_store
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.predictive import PredictiveAnalyticCreate, PredictiveAnalyticResponse, ActualsUpdate

router = APIRouter()


@router.get("/predictive-analytics", response_model=List[PredictiveAnalyticResponse])
async def list_predictions(store: CheckInStore = Depends(get_store)):
    return store.list_predictive_analytics()


@router.post("/predictive-analytics", response_model=PredictiveAnalyticResponse, status_code=status.HTTP_201_CREATED)
async def create_prediction(analytic_data: PredictiveAnalyticCreate, store: CheckInStore = Depends(get_store)):
    return store.create_predictive_analytic(analytic_data)


@router.get("/predictive-analytics/time-slot", response_model=PredictiveAnalyticResponse)
async def get_prediction_for_time_slot(
    hour_of_day: int = Query(..., alias="hourOfDay", ge=0, le=23),
    day_of_week: int = Query(..., alias="dayOfWeek", ge=0, le=6),
    store: CheckInStore = Depends(get_store)
):
    """First prediction for an hour of a weekday (Sunday = 0)"""
    analytic = store.get_prediction_for_time_slot(hour_of_day, day_of_week)
    if analytic is None:
        raise NotFoundError(
            "Prediction", f"{hour_of_day}/{day_of_week}", field="time slot",
            message="No prediction found for the specified time slot"
        )
    return analytic


@router.put("/predictive-analytics/{analytic_id}/update-actuals", response_model=PredictiveAnalyticResponse)
async def update_actuals(
    analytic_id: int,
    actuals: ActualsUpdate,
    store: CheckInStore = Depends(get_store)
):
    """Record observed volume and wait time; accuracy is recomputed"""
    return store.update_predictive_analytic_with_actual(
        analytic_id,
        actuals.actual_voter_volume,
        actuals.actual_wait_time
    )
