"""Cancellable deferred callbacks driven by the game loop.

The loop calls `Scheduler.run_due()` once per frame; nothing runs on
another thread. A cancelled call never fires, and a call fires at most
once.
"""

import heapq
import itertools
import math
import time
from typing import Callable, List, Optional, Tuple


class ScheduledCall:
    """Handle for a pending callback."""

    def __init__(self, deadline: float, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> bool:
        """Cancel the call. Returns False if it already fired."""
        if self.fired:
            return False
        self.cancelled = True
        return True


class Scheduler:
    """Deadline queue of callbacks, polled by the game loop.

    Args:
        clock: Monotonic time source in seconds. Tests pass a fake.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Schedule `callback` to run `delay` seconds from now."""
        if math.isnan(delay) or delay < 0:
            raise ValueError(f"delay must be a non-negative number, got {delay}")
        call = ScheduledCall(self.clock() + delay, callback)
        # Counter breaks deadline ties in scheduling order
        heapq.heappush(self._queue, (call.deadline, next(self._counter), call))
        return call

    def run_due(self, now: Optional[float] = None) -> int:
        """Fire every pending call whose deadline has passed.

        Returns:
            Number of callbacks fired.
        """
        if now is None:
            now = self.clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, call = heapq.heappop(self._queue)
            if not call.pending:
                continue
            call.fired = True
            call.callback()
            fired += 1
        return fired

    def cancel_all(self) -> None:
        for _, _, call in self._queue:
            call.cancel()
        self._queue.clear()

    @property
    def pending(self) -> int:
        """Number of calls still waiting to fire."""
        return sum(1 for _, _, call in self._queue if call.pending)
