from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.services.location_feed import AuthorizationStatus
from app.services.run_session import SessionState


class CompletedRunRead(BaseModel):
    timestamp: datetime
    distance_km: float
    duration_s: float
    average_pace: float
    calories: float

    model_config = ConfigDict(from_attributes=True)


class SessionRead(BaseModel):
    """Live view of the current run, refreshed by the 1 Hz tick."""

    state: SessionState
    started_at: Optional[datetime] = None
    duration_s: float = 0.0
    distance_km: float = 0.0
    paused_s: float = 0.0
    pace_min_per_km: float = 0.0
    speed_km_per_h: float = 0.0
    calories: float = 0.0

    # Display strings, e.g. "12:34", "2.41", "11.5"
    duration: str = "0:00"
    distance: str = "0.00"
    speed: str = "0.0"

    # Set once, when a stop produced a stored run
    completed: Optional[CompletedRunRead] = None

    model_config = ConfigDict(from_attributes=True)


class PositionIn(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    timestamp: Optional[datetime] = None


class LocationBatch(BaseModel):
    positions: list[PositionIn]


class LocationBatchResult(BaseModel):
    accepted: int
    points: int
    distance_km: float


class LocationStatus(BaseModel):
    authorization: AuthorizationStatus
    is_tracking: bool
    updating: bool
    points: int
    last_latitude: Optional[float] = None
    last_longitude: Optional[float] = None


class AuthorizationIn(BaseModel):
    status: AuthorizationStatus

