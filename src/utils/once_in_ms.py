"""
Timing utility for throttling execution in game loops
"""

from typing import Optional

from .clock import MonotonicClock


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Use this to limit how often expensive operations run in the game loop,
    even though the loop itself runs every frame (e.g., 20ms).

    Example:
        # In __init__:
        self._memory_monitor = OnceInMs(60000)  # Once per minute

        # In update loop (runs every 20ms):
        if self._memory_monitor.should_execute():
            self._log_memory_usage()  # Only executes once per minute
    """

    def __init__(self, interval_ms: int, clock=None):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Object with now_ms(); defaults to MonotonicClock
        """
        self.interval_ms = interval_ms
        self._clock = clock or MonotonicClock()
        self.last_execution: Optional[float] = None

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and update timer if so.

        The first call always returns True.
        """
        current = self._clock.now_ms()
        if self.last_execution is None or current - self.last_execution >= self.interval_ms:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None

    def elapsed_ms(self) -> float:
        """Milliseconds elapsed since last execution (0 if never executed)"""
        if self.last_execution is None:
            return 0.0
        return self._clock.now_ms() - self.last_execution

    def remaining_ms(self) -> float:
        """Milliseconds remaining until next execution (can be negative if overdue)"""
        if self.last_execution is None:
            return 0.0
        return self.interval_ms - self.elapsed_ms()
