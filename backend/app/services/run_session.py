"""Live run session: state machine, 1 Hz tick and derived metrics.

States move Idle -> Running -> (Paused <-> Running) -> Stopped. Stopped is
terminal; a new run needs a new RunSession. All commands and ticks are
expected on one event loop, never concurrently.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional, Protocol

from app.core.constants import CALORIES_PER_KM
from app.core.time_utils import compute_pace, compute_speed
from app.services.location_feed import LocationFeed
from app.services.scheduler import AsyncioScheduler

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    idle = "idle"
    running = "running"
    paused = "paused"
    stopped = "stopped"


class SessionStateError(ValueError):
    """A command was issued in a state that doesn't allow it."""


def estimate_calories(distance_km: float) -> float:
    # Flat per-km model: pace, body weight and elevation are ignored
    return distance_km * CALORIES_PER_KM


@dataclass(frozen=True)
class CompletedRun:
    timestamp: datetime
    distance_km: float
    duration_s: float
    average_pace: float
    calories: float
    coordinates: Optional[str]


@dataclass(frozen=True)
class RunSnapshot:
    state: SessionState
    started_at: Optional[datetime]
    duration_s: float
    distance_km: float
    paused_s: float
    pace_min_per_km: float
    speed_km_per_h: float
    calories: float


class RunStore(Protocol):
    def save(self, run: CompletedRun): ...


class Scheduler(Protocol):
    def every(self, interval: float, callback: Callable[[], None]): ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RunSession:
    def __init__(
        self,
        feed: LocationFeed,
        store: Optional[RunStore] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], datetime] = _utcnow,
        on_change: Optional[Callable[[RunSnapshot], None]] = None,
        tick_interval_s: float = 1.0,
    ):
        self.feed = feed
        self.store = store
        self.scheduler = scheduler or AsyncioScheduler()
        self.clock = clock
        self.on_change = on_change
        self.tick_interval_s = tick_interval_s

        self.state = SessionState.idle
        self.start_time: Optional[datetime] = None
        self.paused_time = 0.0  # seconds spent paused, all intervals
        self.pause_start_time: Optional[datetime] = None
        self.duration = 0.0
        self.distance = 0.0
        self.completed_run: Optional[CompletedRun] = None
        self._timer = None

    # ---- derived values ---- #

    @property
    def pace_min_per_km(self) -> float:
        return compute_pace(self.duration, self.distance)

    @property
    def speed_km_per_h(self) -> float:
        return compute_speed(self.duration, self.distance)

    @property
    def calories(self) -> float:
        return estimate_calories(self.distance)

    def snapshot(self) -> RunSnapshot:
        return RunSnapshot(
            state=self.state,
            started_at=self.start_time,
            duration_s=self.duration,
            distance_km=self.distance,
            paused_s=self.paused_time,
            pace_min_per_km=self.pace_min_per_km,
            speed_km_per_h=self.speed_km_per_h,
            calories=self.calories,
        )

    # ---- commands ---- #

    def start(self):
        self._require(SessionState.idle, action="start")
        self.state = SessionState.running
        self.start_time = self.clock()
        self.duration = 0.0
        self.distance = 0.0
        self.paused_time = 0.0
        self.pause_start_time = None
        self.feed.start_tracking()
        self._timer = self.scheduler.every(self.tick_interval_s, self.tick)
        logger.info("Run started at %s", self.start_time.isoformat())
        self._notify()

    def pause(self):
        self._require(SessionState.running, action="pause")
        self.state = SessionState.paused
        self.pause_start_time = self.clock()
        self.feed.stop_tracking(keep_trail=True)
        logger.info("Run paused at %.1fs", self.duration)
        self._notify()

    def resume(self):
        self._require(SessionState.paused, action="resume")
        if self.pause_start_time is None:
            raise SessionStateError("Cannot resume: pause start time is missing")
        self.paused_time += (self.clock() - self.pause_start_time).total_seconds()
        self.pause_start_time = None
        self.state = SessionState.running
        self.feed.start_tracking(clear=False)
        logger.info("Run resumed after %.1fs paused in total", self.paused_time)
        self._notify()

    def stop(self) -> Optional[CompletedRun]:
        self._require(SessionState.running, SessionState.paused, action="stop")
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.feed.stop_tracking()
        self.state = SessionState.stopped
        self.completed_run = self._finish()
        self._notify()
        return self.completed_run

    def tick(self):
        """Recompute duration and distance; only does work while running."""
        if self.state != SessionState.running or self.start_time is None:
            return
        elapsed = (self.clock() - self.start_time).total_seconds() - self.paused_time
        self.duration = max(0.0, elapsed)
        self.distance = self.feed.calculate_distance()
        self._notify()

    # ---- internals ---- #

    def _finish(self) -> Optional[CompletedRun]:
        # Duration alone decides whether a run is kept; distance may be 0
        if self.start_time is None or self.duration <= 0:
            logger.info("Run discarded: no active duration recorded")
            return None

        run = CompletedRun(
            timestamp=self.start_time,
            distance_km=self.distance,
            duration_s=self.duration,
            average_pace=self.pace_min_per_km,
            calories=self.calories,
            coordinates=self.feed.export_trail(),
        )
        if self.store is not None:
            self.store.save(run)
        logger.info("Run finished: distance=%.3f km, duration=%.1f s", run.distance_km, run.duration_s)
        return run

    def _require(self, *states: SessionState, action: str):
        if self.state not in states:
            allowed = " or ".join(s.value for s in states)
            raise SessionStateError(f"Cannot {action} a {self.state.value} run (must be {allowed})")

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self.snapshot())
