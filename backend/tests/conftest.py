import os
from datetime import datetime, timedelta, timezone

import pytest

# Use in-memory sqlite for tests; must be set before the app modules load
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("TIMEZONE", "UTC")

from app.services.location_feed import (  # noqa: E402
    AuthorizationStatus,
    ClientLocationProvider,
    LocationFeed,
    Position,
)


class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 4, 7, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class ManualTask:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose repeating tasks fire only when the test says so."""

    def __init__(self):
        self.tasks: list[ManualTask] = []

    def every(self, interval, callback):
        task = ManualTask(interval, callback)
        self.tasks.append(task)
        return task

    def fire(self, times: int = 1) -> int:
        fired = 0
        for _ in range(times):
            for task in self.tasks:
                if not task.cancelled:
                    task.callback()
                    fired += 1
        return fired


class FakeStore:
    def __init__(self):
        self.saved = []

    def save(self, run):
        self.saved.append(run)
        return len(self.saved)


def pos(lat, lon, seconds=0):
    return Position(lat, lon, datetime(2026, 1, 4, 7, 0, tzinfo=timezone.utc) + timedelta(seconds=seconds))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def provider():
    return ClientLocationProvider(status=AuthorizationStatus.granted)


@pytest.fixture
def feed(provider):
    return LocationFeed(provider, distance_filter_m=10.0)
