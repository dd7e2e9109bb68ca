"""
Read-only view of a game session for the presentation layer
"""

import enum
from dataclasses import dataclass
from typing import Optional


class GamePhase(enum.Enum):
    START = "start"
    READY = "ready"
    FLASHING = "flashing"
    ANSWERING = "answering"
    RESULT = "result"


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a renderer needs after a transition. Rebuilt on every request."""
    phase: GamePhase

    # Active preset
    preset_name: str
    preset_color: str
    preset_icon: str
    preset_message: str

    # Flash sequence
    flash_index: int
    flash_count: int
    flash_value: Optional[int]

    # Answer entry
    pending_input: str

    # Ledger
    score: int
    streak: int

    # Last evaluated answer
    last_correct_sum: Optional[int]
    last_user_answer: Optional[int]
    last_answer_correct: Optional[bool]
    praise: str

    @property
    def progress(self) -> float:
        """Fraction of the round flashed so far (0.0 when nothing is shown)"""
        if self.flash_index < 0 or self.flash_count == 0:
            return 0.0
        return (self.flash_index + 1) / self.flash_count

    @property
    def counter_text(self) -> str:
        return f"{self.flash_index + 1} / {self.flash_count}"

    @property
    def can_submit(self) -> bool:
        return self.phase is GamePhase.ANSWERING and bool(self.pending_input)

    @property
    def show_streak_banner(self) -> bool:
        """The "N in a row" banner: last answer correct and streak above one"""
        return bool(self.last_answer_correct) and self.streak > 1

    def describe(self) -> str:
        """One-line summary for console status output"""
        if self.phase is GamePhase.START:
            return f"[START] level={self.preset_name} score={self.score}"
        if self.phase is GamePhase.READY:
            return f"[READY] {self.preset_message} - press Enter"
        if self.phase is GamePhase.FLASHING:
            shown = "" if self.flash_value is None else self.flash_value
            return f"[FLASH] {shown}  ({self.counter_text})"
        if self.phase is GamePhase.ANSWERING:
            return f"[ANSWER] > {self.pending_input or '?'}"
        banner = f" {self.streak} in a row!" if self.show_streak_banner else ""
        return (f"[RESULT] {self.praise} answer={self.last_correct_sum} "
                f"yours={self.last_user_answer} score={self.score}{banner}")
