"""Ranks and achievements unlocked by the run history.

Streak checks look at how long ago each run started, in whole elapsed days
or whole calendar months, and count distinct buckets.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.core.constants import DISTANCE_BADGES_KM
from app.core.time_utils import to_local_datetime
from app.services.stats import local_now


@dataclass
class _Localized:
    timestamp: datetime
    distance_km: float


@dataclass
class Achievement:
    key: str
    title: str
    description: str
    unlocked: bool


def days_ago(ts: datetime, now: datetime) -> int:
    return int((now - ts).total_seconds() // 86400)


def months_ago(ts: datetime, now: datetime) -> int:
    months = (now.year - ts.year) * 12 + (now.month - ts.month)
    # Not a full month yet if the day/time of month hasn't come round again
    if (now.day, now.time()) < (ts.day, ts.time()):
        months -= 1
    return months


def has_week_streak(runs, now: datetime) -> bool:
    """A run on each of the last 7 days, looking at the 30 newest runs."""
    if len(runs) < 7:
        return False
    days = set()
    for r in runs[:30]:
        d = days_ago(r.timestamp, now)
        if 0 <= d < 7:
            days.add(d)
    return len(days) >= 7


def has_month_streak(runs, now: datetime) -> bool:
    """Runs in 4 different weeks of the last 30 days, from the 50 newest runs."""
    if len(runs) < 12:
        return False
    weeks = set()
    for r in runs[:50]:
        d = days_ago(r.timestamp, now)
        if 0 <= d < 30:
            weeks.add(d // 7)
    return len(weeks) >= 4


def has_year_streak(runs, now: datetime) -> bool:
    """A run in each of the last 12 months."""
    if len(runs) < 52:
        return False
    months = set()
    for r in runs:
        m = months_ago(r.timestamp, now)
        if 0 <= m < 12:
            months.add(m)
    return len(months) >= 12


def compute_achievements(runs, tz_name: str | None = None, now: Optional[datetime] = None) -> list[Achievement]:
    """Evaluate every achievement. `runs` must be ordered newest first."""
    now_local = local_now(tz_name, now)
    localized = [_Localized(to_local_datetime(r.timestamp, tz_name), r.distance_km) for r in runs]
    total_km = sum(r.distance_km for r in localized)

    achievements = [
        Achievement("first_run", "First Run", "Complete your first run", len(localized) >= 1),
        Achievement("week_streak", "Week of Running", "Run every day for a week", has_week_streak(localized, now_local)),
        Achievement("month_streak", "Month of Running", "Run regularly for a month", has_month_streak(localized, now_local)),
        Achievement("year_streak", "Year of Running", "Run all year", has_year_streak(localized, now_local)),
    ]
    for km in DISTANCE_BADGES_KM:
        achievements.append(
            Achievement(f"distance_{int(km)}", f"{int(km)} km", f"Run {int(km)} kilometers", total_km >= km)
        )
    return achievements
