"""
Triggers - the closed set of inputs a game session reacts to
"""

import enum
from dataclasses import dataclass
from typing import Optional


class TriggerKind(enum.Enum):
    SELECT_PRESET = "select_preset"
    START_GAME = "start_game"
    ADVANCE = "advance"
    DIGIT = "digit"
    CLEAR = "clear"
    SUBMIT = "submit"
    RESTART = "restart"
    GO_HOME = "go_home"


VALUED_KINDS = (TriggerKind.SELECT_PRESET, TriggerKind.DIGIT)


@dataclass(frozen=True)
class Trigger:
    """
    A single input event.

    Only SELECT_PRESET (catalog index) and DIGIT (0-9) carry a value.
    Use the factory methods rather than the constructor.
    """
    kind: TriggerKind
    value: Optional[int] = None

    def __post_init__(self):
        if self.kind in VALUED_KINDS:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValueError(f"{self.kind.value} needs an int value, got {self.value!r}")
            if self.kind is TriggerKind.DIGIT and not (0 <= self.value <= 9):
                raise ValueError(f"Digit must be 0-9, got {self.value}")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} takes no value, got {self.value!r}")

    @classmethod
    def select_preset(cls, index: int) -> 'Trigger':
        return cls(TriggerKind.SELECT_PRESET, index)

    @classmethod
    def digit(cls, digit: int) -> 'Trigger':
        return cls(TriggerKind.DIGIT, digit)

    @classmethod
    def start_game(cls) -> 'Trigger':
        return cls(TriggerKind.START_GAME)

    @classmethod
    def advance(cls) -> 'Trigger':
        return cls(TriggerKind.ADVANCE)

    @classmethod
    def clear(cls) -> 'Trigger':
        return cls(TriggerKind.CLEAR)

    @classmethod
    def submit(cls) -> 'Trigger':
        return cls(TriggerKind.SUBMIT)

    @classmethod
    def restart(cls) -> 'Trigger':
        return cls(TriggerKind.RESTART)

    @classmethod
    def go_home(cls) -> 'Trigger':
        return cls(TriggerKind.GO_HOME)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({self.value})"
