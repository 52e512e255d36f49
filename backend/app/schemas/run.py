from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RunRead(BaseModel):
    """A stored run as listed in the history."""

    id: int
    timestamp: datetime
    distance_km: float
    duration_s: float
    average_pace: float  # minutes per km
    calories: float

    # Display strings, e.g. "5.00" and "31:05"
    distance: str
    duration: str

    model_config = ConfigDict(from_attributes=True)


class MapRegion(BaseModel):
    center_lat: float
    center_lon: float
    lat_delta: float
    lon_delta: float


class RunDetail(RunRead):
    """A single run with its decoded trail."""

    coordinates: list[list[float]]
    region: Optional[MapRegion] = None


class RunStats(BaseModel):
    total_runs: int
    total_distance_km: float
    total_duration_s: float
    total_time: str  # "Xh Ym"
    average_pace: float


class DayStatRead(BaseModel):
    date: datetime
    distance_km: float
    duration_s: float
    count: int

    model_config = ConfigDict(from_attributes=True)


class AchievementRead(BaseModel):
    key: str
    title: str
    description: str
    unlocked: bool

    model_config = ConfigDict(from_attributes=True)


class HomeSummary(BaseModel):
    is_running: bool
    current_distance_km: float
    last_run_distance_km: float
    run_progress: float  # 0..1 toward the single-run target
    message: str
    # Map points: live trail, else the latest run, else the last known fix
    coordinates: list[list[float]] = []
