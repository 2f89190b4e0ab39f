from __future__ import annotations

import heapq
import itertools
import time
from typing import Callable, Dict, List, Tuple

TimerToken = int


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class Scheduler:
    """Delayed callbacks fired explicitly through ``run_due``.

    Nothing runs in the background: the owner calls ``run_due`` whenever
    it handles an event, and every callback whose deadline has passed
    fires in deadline order.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._counter = itertools.count(1)
        self._heap: List[Tuple[float, TimerToken]] = []
        self._callbacks: Dict[TimerToken, Callable[[], None]] = {}

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerToken:
        token = next(self._counter)
        heapq.heappush(self._heap, (self.clock() + delay, token))
        self._callbacks[token] = callback
        return token

    def cancel(self, token: TimerToken | None) -> bool:
        if token is None:
            return False
        return self._callbacks.pop(token, None) is not None

    def run_due(self) -> int:
        now = self.clock()
        fired = 0
        while self._heap and self._heap[0][0] <= now:
            _, token = heapq.heappop(self._heap)
            callback = self._callbacks.pop(token, None)
            if callback is None:
                continue  # cancelled
            callback()
            fired += 1
        return fired
