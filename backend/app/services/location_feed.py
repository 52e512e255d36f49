"""Location sensing for live runs.

``LocationFeed`` records the trail of the active run and otherwise caches
the last known fix. It never talks to a sensor itself: a provider delivers
batches of positions and authorization changes to it.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional, Protocol

from app.core.geo import haversine, path_length_m
from app.core.trail import encode_trail

logger = logging.getLogger(__name__)


class AuthorizationStatus(str, Enum):
    not_determined = "not_determined"
    granted = "granted"
    denied = "denied"


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


LocationsCallback = Callable[[list[Position]], None]
AuthorizationCallback = Callable[[AuthorizationStatus], None]


class LocationProvider(Protocol):
    """What LocationFeed needs from a platform location service."""

    @property
    def authorization_status(self) -> AuthorizationStatus: ...

    def attach(self, on_locations: LocationsCallback, on_authorization: AuthorizationCallback) -> None: ...

    def request_authorization(self) -> None: ...

    def start_updates(self, distance_filter_m: float) -> None: ...

    def stop_updates(self) -> None: ...


class ClientLocationProvider:
    """Provider fed by the app's client, which pushes fixes over HTTP.

    While updates are running, a fix closer than the distance filter to the
    last accepted fix is dropped. Pushes arriving while stopped are ignored.
    """

    def __init__(self, auto_grant: bool = True, status: AuthorizationStatus = AuthorizationStatus.not_determined):
        self.auto_grant = auto_grant
        self._status = status
        self._on_locations: Optional[LocationsCallback] = None
        self._on_authorization: Optional[AuthorizationCallback] = None
        self._updating = False
        self._distance_filter_m = 0.0
        self._last_accepted: Optional[Position] = None

    @property
    def authorization_status(self) -> AuthorizationStatus:
        return self._status

    @property
    def updating(self) -> bool:
        return self._updating

    def attach(self, on_locations, on_authorization):
        self._on_locations = on_locations
        self._on_authorization = on_authorization

    def request_authorization(self):
        # Like an OS prompt, only the first request gets an answer
        if self._status != AuthorizationStatus.not_determined:
            return
        granted = AuthorizationStatus.granted if self.auto_grant else AuthorizationStatus.denied
        self.set_authorization(granted)

    def set_authorization(self, status: AuthorizationStatus):
        self._status = status
        logger.info("Location authorization is now %s", status.value)
        if status == AuthorizationStatus.denied:
            self._updating = False
        if self._on_authorization is not None:
            self._on_authorization(status)

    def start_updates(self, distance_filter_m: float):
        self._updating = True
        self._distance_filter_m = distance_filter_m

    def stop_updates(self):
        self._updating = False

    def push(self, batch: list[Position]) -> int:
        """Deliver client fixes; returns how many passed the distance filter."""
        if not self._updating or self._status != AuthorizationStatus.granted:
            return 0
        accepted: list[Position] = []
        for pos in batch:
            last = self._last_accepted
            if last is not None and haversine(
                last.latitude, last.longitude, pos.latitude, pos.longitude
            ) < self._distance_filter_m:
                continue
            accepted.append(pos)
            self._last_accepted = pos
        if accepted and self._on_locations is not None:
            self._on_locations(accepted)
        return len(accepted)

    def push_threadsafe(self, loop, batch: list[Position]) -> None:
        """Hand a batch from a foreign thread to the session's event loop."""
        loop.call_soon_threadsafe(self.push, batch)


class LocationFeed:
    def __init__(self, provider: LocationProvider, distance_filter_m: float = 10.0):
        self.provider = provider
        self.distance_filter_m = distance_filter_m
        self.authorization_status = provider.authorization_status
        self.is_tracking = False
        self._positions: list[Position] = []
        self._last_known: Optional[Position] = None
        self._passive = False
        # A paused run keeps its trail while not tracking
        self._holding_trail = False
        # Set while a tracking start waits on a permission answer
        self._pending_clear: Optional[bool] = None
        provider.attach(self.on_locations, self.on_authorization_changed)

    @property
    def positions(self) -> list[Position]:
        return list(self._positions)

    @property
    def last_known(self) -> Optional[Position]:
        return self._last_known

    @property
    def authorized(self) -> bool:
        return self.authorization_status == AuthorizationStatus.granted

    def request_permission(self):
        self.provider.request_authorization()

    def start_location_updates(self):
        if not self.authorized:
            self.request_permission()
            if not self.authorized:
                return
        self._passive = True
        self.provider.start_updates(self.distance_filter_m)

    def stop_location_updates(self):
        # Stopping the sensor mid-run would starve the trail
        if self.is_tracking:
            return
        self._passive = False
        self.provider.stop_updates()

    def start_tracking(self, clear: bool = True):
        if not self.authorized:
            logger.info("Tracking requested without location access; asking for permission")
            # Tracking begins once access is granted, now or later
            self._pending_clear = clear
            self.request_permission()
            return
        self._begin_tracking(clear)

    def _begin_tracking(self, clear: bool):
        self._pending_clear = None
        self.is_tracking = True
        self._holding_trail = False
        if clear:
            self._positions.clear()
        self.provider.start_updates(self.distance_filter_m)

    def stop_tracking(self, keep_trail: bool = False):
        self._pending_clear = None
        self.is_tracking = False
        self._holding_trail = keep_trail
        if not self._passive:
            self.provider.stop_updates()

    def on_locations(self, batch: list[Position]):
        if not batch:
            return
        latest = batch[-1]
        self._last_known = latest
        if self.is_tracking:
            self._positions.extend(batch)
        elif self._holding_trail:
            return
        elif not self._positions:
            self._positions.append(latest)
        else:
            self._positions = [latest]

    def on_authorization_changed(self, status: AuthorizationStatus):
        self.authorization_status = status
        if status == AuthorizationStatus.granted and self._pending_clear is not None:
            self._begin_tracking(self._pending_clear)

    def calculate_distance(self) -> float:
        """Cumulative trail length in kilometers; 0 for fewer than two fixes."""
        if len(self._positions) < 2:
            return 0.0
        return path_length_m((p.latitude, p.longitude) for p in self._positions) / 1000.0

    def export_trail(self) -> str | None:
        return encode_trail((p.latitude, p.longitude) for p in self._positions)
