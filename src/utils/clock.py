"""
Millisecond clocks used by timers and the game loop
"""

import time


class MonotonicClock:
    """Real clock backed by time.monotonic()"""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class FakeClock:
    """Deterministic clock for tests - only moves when advanced"""

    def __init__(self, start_ms: float = 0.0):
        self._now_ms = float(start_ms)

    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, ms: float) -> None:
        if ms < 0:
            raise ValueError("ms must be non-negative")
        self._now_ms += ms
