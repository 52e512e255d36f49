import logging
from typing import Optional

from app.services.location_feed import ClientLocationProvider, LocationFeed
from app.services.run_session import RunSession, RunStore, SessionState, SessionStateError

logger = logging.getLogger(__name__)


class RunTracker:
    """Owns the location feed and the current run session for the app.

    A Stopped session is terminal, so starting again replaces it with a
    fresh one wired to the same feed and store.
    """

    def __init__(
        self,
        provider: ClientLocationProvider,
        store: Optional[RunStore] = None,
        scheduler=None,
        clock=None,
        tick_interval_s: float = 1.0,
        distance_filter_m: float = 10.0,
    ):
        self.provider = provider
        self.feed = LocationFeed(provider, distance_filter_m=distance_filter_m)
        self.store = store
        self.scheduler = scheduler
        self.clock = clock
        self.tick_interval_s = tick_interval_s
        self.session: Optional[RunSession] = None

    @property
    def is_running(self) -> bool:
        return self.session is not None and self.session.state in (SessionState.running, SessionState.paused)

    def new_session(self) -> RunSession:
        kwargs = {}
        if self.clock is not None:
            kwargs["clock"] = self.clock
        return RunSession(
            self.feed,
            store=self.store,
            scheduler=self.scheduler,
            tick_interval_s=self.tick_interval_s,
            **kwargs,
        )

    def start(self) -> RunSession:
        if self.session is None or self.session.state == SessionState.stopped:
            self.session = self.new_session()
        self.session.start()
        return self.session

    def pause(self) -> RunSession:
        self._current("pause").pause()
        return self.session

    def resume(self) -> RunSession:
        self._current("resume").resume()
        return self.session

    def stop(self) -> RunSession:
        self._current("stop").stop()
        return self.session

    def _current(self, action: str) -> RunSession:
        if self.session is None:
            raise SessionStateError(f"Cannot {action}: no run has been started")
        return self.session
