"""
Flash timer - cancellable "repeat every N ms, then once more after N ms" primitive
"""

from typing import Callable, Optional


class FlashTimer:
    """
    Polled timer driving the flash sequence.

    After start(), on_repeat is called every interval_ms for as long as it
    returns True. The first time it returns False the repeat stops and
    on_final is called exactly one interval later.

    The timer never fires by itself: the owner calls update() once per
    frame. Overdue events are fired in order, one per elapsed interval,
    so a late frame never skips or merges ticks.
    """

    def __init__(self,
                 interval_ms: int,
                 on_repeat: Callable[[], bool],
                 on_final: Callable[[], None],
                 clock):
        """
        Args:
            interval_ms: Period of the repeat and delay of the final call
            on_repeat: Called on each repeat tick; return False to stop repeating
            on_final: Called once, one interval after the repeat stopped
            clock: Object with now_ms()
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._on_repeat = on_repeat
        self._on_final = on_final
        self._clock = clock
        self._next_due_ms: Optional[float] = None
        self._repeating = False
        self.started = False
        self.cancelled = False
        self.finished = False

    @property
    def active(self) -> bool:
        """True while a repeat tick or the final call is still pending"""
        return self._next_due_ms is not None

    @property
    def next_due_ms(self) -> Optional[float]:
        return self._next_due_ms

    def start(self) -> None:
        if self.started:
            raise RuntimeError("FlashTimer can only be started once")
        self.started = True
        self._repeating = True
        self._next_due_ms = self._clock.now_ms() + self.interval_ms

    def cancel(self) -> None:
        """Drop any pending tick; callbacks will not run again"""
        self._next_due_ms = None
        self._repeating = False
        self.cancelled = True

    def update(self) -> int:
        """
        Fire every event that is due.

        Returns:
            Number of callbacks fired
        """
        fired = 0
        now = self._clock.now_ms()
        while self._next_due_ms is not None and now >= self._next_due_ms:
            due = self._next_due_ms
            fired += 1
            if self._repeating:
                if not self._on_repeat():
                    self._repeating = False
                # on_repeat may have cancelled us
                if self._next_due_ms is not None:
                    self._next_due_ms = due + self.interval_ms
            else:
                self._next_due_ms = None
                self.finished = True
                self._on_final()
        return fired
