from pydantic import Field
from typing import Optional
from datetime import datetime
from pollverify.schemas.base import CamelModel


class VoterCreate(CamelModel):
    voter_id: str = Field(..., min_length=1)
    name: str
    date_of_birth: str
    address: str
    precinct: str


class VoterResponse(CamelModel):
    id: int
    voter_id: str
    name: str
    date_of_birth: str
    address: str
    precinct: str
    checked_in: bool
    checked_in_at: Optional[datetime]
    checked_in_by: Optional[int]


class CheckInResponse(CamelModel):
    success: bool
    voter: VoterResponse
    check_in_time: str
