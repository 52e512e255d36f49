"""Aggregates over stored runs: totals, last seven days, home summary, goal."""

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.core.constants import (
    COMPLETED_RUNS_MESSAGE,
    CURRENT_RUN_MESSAGE,
    MOTIVATIONAL_MESSAGES,
    RUN_TARGET_KM,
)
from app.core.time_utils import compute_pace, to_local_datetime


@dataclass
class OverallStats:
    total_runs: int
    total_distance_km: float
    total_duration_s: float
    average_pace: float


@dataclass
class DayStat:
    date: datetime
    distance_km: float
    duration_s: float
    count: int


def local_now(tz_name: str | None, now: Optional[datetime] = None) -> datetime:
    return to_local_datetime(now or datetime.now(timezone.utc), tz_name)


def overall_stats(runs) -> OverallStats:
    total_km = sum(r.distance_km for r in runs)
    total_s = sum(r.duration_s for r in runs)
    return OverallStats(
        total_runs=len(runs),
        total_distance_km=total_km,
        total_duration_s=total_s,
        average_pace=compute_pace(total_s, total_km),
    )


def start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def last_7_days(runs, tz_name: str | None = None, now: Optional[datetime] = None) -> list[DayStat]:
    """Per-day totals for today and the six days before it, newest first."""
    now_local = local_now(tz_name, now)
    stamped = [(to_local_datetime(r.timestamp, tz_name), r) for r in runs]

    days: list[DayStat] = []
    for i in range(7):
        day = now_local - timedelta(days=i)
        start = start_of_day(day)
        end = start + timedelta(days=1)
        day_runs = [r for ts, r in stamped if start <= ts < end]
        days.append(
            DayStat(
                date=start,
                distance_km=sum(r.distance_km for r in day_runs),
                duration_s=sum(r.duration_s for r in day_runs),
                count=len(day_runs),
            )
        )
    return sorted(days, key=lambda d: d.date, reverse=True)


def run_progress(distance_km: float, target_km: float = RUN_TARGET_KM) -> float:
    """Fraction of the single-run target covered, capped at 1."""
    if target_km <= 0:
        return 0.0
    return min(distance_km / target_km, 1.0)


def motivational_message(
    run_count: int, rng: Optional[random.Random] = None, running: bool = False
) -> str:
    if running:
        return CURRENT_RUN_MESSAGE
    if run_count == 0:
        return (rng or random).choice(MOTIVATIONAL_MESSAGES)
    return COMPLETED_RUNS_MESSAGE


def month_distance(runs, tz_name: str | None = None, now: Optional[datetime] = None) -> float:
    """Kilometers run in the current local calendar month."""
    now_local = local_now(tz_name, now)
    total = 0.0
    for r in runs:
        ts = to_local_datetime(r.timestamp, tz_name)
        if ts.year == now_local.year and ts.month == now_local.month and ts <= now_local:
            total += r.distance_km
    return total
