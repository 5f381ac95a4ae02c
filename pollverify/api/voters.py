from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, status
from pollverify.api.deps import get_store, get_app_settings, get_manager
from pollverify.config import Settings
from pollverify.core.exceptions import NotFoundError
from pollverify.core.store import CheckInStore
from pollverify.schemas.voter import VoterCreate, VoterResponse, CheckInResponse
from pollverify.websocket.events import create_check_in_event
from pollverify.websocket.manager import ConnectionManager

router = APIRouter()


def format_clock_time(moment: datetime) -> str:
    """Wall-clock time as shown at the check-in desk, e.g. 2:30:05 PM"""
    return moment.strftime("%I:%M:%S %p").lstrip("0")


@router.get("/voters", response_model=List[VoterResponse])
async def list_voters(store: CheckInStore = Depends(get_store)):
    """List registered voters"""
    return store.list_voters()


@router.post("/voters", response_model=VoterResponse, status_code=status.HTTP_201_CREATED)
async def create_voter(voter_data: VoterCreate, store: CheckInStore = Depends(get_store)):
    """Register a voter"""
    return store.create_voter(voter_data)


@router.get("/voters/{voter_id}", response_model=VoterResponse)
async def get_voter(voter_id: str, store: CheckInStore = Depends(get_store)):
    """Look up a voter by the number on their voter card"""
    voter = store.get_voter_by_voter_id(voter_id)
    if voter is None:
        raise NotFoundError("Voter", voter_id, field="voterId", message="Voter not found")
    return voter


@router.post("/voters/{voter_pk}/check-in", response_model=CheckInResponse)
async def check_in_voter(
    voter_pk: int,
    store: CheckInStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
    manager: ConnectionManager = Depends(get_manager)
):
    """Check a voter in at the demo station on behalf of the demo poll worker"""
    voter = store.check_in_voter(voter_pk, settings.DEMO_OPERATOR_ID, station_id=settings.DEMO_STATION_ID)

    await manager.publish(
        create_check_in_event(voter, settings.DEMO_OPERATOR_ID, settings.DEMO_STATION_ID),
        station_id=settings.DEMO_STATION_ID
    )

    return CheckInResponse(
        success=True,
        voter=voter,
        check_in_time=format_clock_time(voter.checked_in_at)
    )
