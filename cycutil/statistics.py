"""Running statistics: lifetime min/max tracking and time-windowed sums."""

from __future__ import annotations

import contextlib
import math
import threading
import time
from typing import ContextManager, Generic, Optional, Tuple, TypeVar

from cycutil.ring_queue import RingQueue

T = TypeVar("T")


def _now_ms() -> int:
    """Monotonic time in milliseconds."""
    return time.perf_counter_ns() // 1_000_000


class MinMaxValue(Generic[T]):
    """Tracks the smallest and largest value seen over the whole lifetime.

    Without an initial value the minimum starts at positive infinity and the
    maximum at negative infinity, so the first update sets both. Updates are
    safe to make from several threads at once.
    """

    def __init__(self, initial: Optional[T] = None) -> None:
        self._lock = threading.Lock()
        if initial is None:
            self._min = math.inf
            self._max = -math.inf
        else:
            self._min = initial
            self._max = initial

    def update(self, value: T) -> None:
        """Fold ``value`` into the running minimum and maximum."""
        with self._lock:
            if value > self._max:
                self._max = value
            if value < self._min:
                self._min = value

    def min(self):
        with self._lock:
            return self._min

    def max(self):
        with self._lock:
            return self._max

    def __repr__(self) -> str:
        return f"MinMaxValue(min={self.min()!r}, max={self.max()!r})"


class PeriodValue(Generic[T]):
    """Values recorded over a sliding window of ``time_period_ms`` milliseconds.

    Each value is stored with its timestamp; queries drop the values older
    than the window before summing what is left.
    """

    def __init__(self, time_period_ms: int = 1000, with_lock: bool = True) -> None:
        self._time_period = time_period_ms
        self._queue: RingQueue[Tuple[int, T]] = RingQueue(0)
        self._with_lock = with_lock
        self._lock = threading.Lock()

    def _guard(self) -> ContextManager:
        return self._lock if self._with_lock else contextlib.nullcontext()

    def push(self, value: T, now_ms: int = 0) -> None:
        """Record ``value`` at ``now_ms`` (the current time when zero)."""
        with self._guard():
            if now_ms == 0:
                now_ms = _now_ms()
            self._queue.push((now_ms, value))
            # When the ring is full, drop the oldest value if it has expired.
            if self._queue.free_size() == 0:
                if now_ms - self._queue.front()[0] > self._time_period:
                    self._queue.pop()

    def total_counts(self) -> int:
        """Number of values currently stored, expired or not."""
        return len(self._queue)

    def sum_and_counts(self, now_ms: int = 0) -> Tuple[T, int]:
        """Sum and count of the values inside the window ending at ``now_ms``."""
        with self._guard():
            if now_ms == 0:
                now_ms = _now_ms()
            self._expire(now_ms)
            if self._queue.empty():
                return 0, 0
            total = 0
            count = 0
            for _, value in self._queue:
                total += value
                count += 1
            return total, count

    def time_period(self) -> int:
        """Window length in milliseconds."""
        return self._time_period

    def _expire(self, now_ms: int) -> None:
        queue = self._queue
        if queue.empty():
            return
        expire = now_ms - self._time_period
        if queue.front()[0] >= expire:
            return
        if queue.back()[0] < expire:
            queue.reset()
            return
        # front is expired, back is not: find the last expired element
        left = 0
        right = len(queue) - 1
        while right - left > 1:
            mid = (left + right) // 2
            if queue.get(mid)[0] >= expire:
                right = mid
            else:
                left = mid
        queue.pop(left + 1)