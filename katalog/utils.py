import time
from collections.abc import Callable


def now_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds, for timers."""
    return time.monotonic() * 1000


class MonotonicIdGenerator:
    """Issue millisecond-timestamp ids that strictly increase.

    Two ids requested within the same clock tick (or after the clock stepped
    backwards) get ``previous + 1``, so ids stay unique and chronological.
    """

    def __init__(self, floor: int = 0, clock: Callable[[], int] = now_ms):
        self._last = floor
        self._clock = clock

    def __call__(self) -> int:
        self._last = max(self._clock(), self._last + 1)
        return self._last
