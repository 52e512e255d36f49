import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RepeatingTask:
    """A callback re-armed on the event loop every `interval` seconds.

    Cancelling is final: a cancelled task never runs its callback again,
    even if a timer was already due.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]):
        self._loop = loop
        self.interval = interval
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self.cancelled = False

    def _arm(self):
        self._handle = self._loop.call_later(self.interval, self._fire)

    def _fire(self):
        if self.cancelled:
            return
        try:
            self._callback()
        except Exception:
            logger.exception("Repeating task callback failed")
        if not self.cancelled:
            self._arm()

    def cancel(self):
        self.cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioScheduler:
    """Schedules repeating callbacks on an asyncio loop.

    Without an explicit loop, the loop running at scheduling time is used,
    so `every` must be called from a coroutine or loop callback.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def every(self, interval: float, callback: Callable[[], None]) -> RepeatingTask:
        loop = self._loop or asyncio.get_running_loop()
        task = RepeatingTask(loop, interval, callback)
        task._arm()
        return task
