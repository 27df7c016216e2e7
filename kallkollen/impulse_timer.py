"""Cancellable delay that unlocks the considered answer on the stress-test screen."""

import logging
import threading
import time
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def threading_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Run `callback` once after `delay` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class ImpulseTimer:
    """
    Gate that opens `delay` seconds after `arm()`.

    The session arms it when entering the stress-test stage and cancels it when
    leaving, so a callback never fires for a stage that is no longer shown.
    """

    def __init__(
        self,
        delay: float,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.delay = delay
        self._scheduler = scheduler or threading_scheduler
        self._clock = clock
        self._opened = threading.Event()
        self._handle: Optional[TimerHandle] = None
        self._armed_at: Optional[float] = None

    @property
    def armed(self) -> bool:
        return self._armed_at is not None

    @property
    def is_open(self) -> bool:
        return self._opened.is_set()

    def arm(self) -> None:
        """Start (or restart) the countdown."""
        self.cancel()
        self._armed_at = self._clock()
        if self.delay <= 0:
            self._opened.set()
            return
        self._handle = self._scheduler(self.delay, self._fire)

    def cancel(self) -> None:
        """Stop the countdown and close the gate."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._armed_at = None
        self._opened.clear()

    def remaining(self) -> float:
        """Seconds left before the gate opens (0 once open or when not armed)."""
        if self._armed_at is None or self.is_open:
            return 0.0
        return max(0.0, self.delay - (self._clock() - self._armed_at))

    def _fire(self) -> None:
        if self._armed_at is None:
            return
        self._handle = None
        self._opened.set()
        logger.debug("Impulse delay of %.1fs elapsed", self.delay)
