"""
Scoring - score/streak ledger and answer evaluation
"""

from dataclasses import dataclass
from typing import Sequence

from .difficulty import MISS_MESSAGE, PRAISE_MESSAGES
from .round_generator import Round

POINTS_PER_VALUE = 10
STREAK_BONUS = 5
MAX_ANSWER_DIGITS = 3


@dataclass
class ScoreLedger:
    """Score and streak for one play session. Score never decreases."""
    score: int = 0
    streak: int = 0

    def points_for(self, count: int) -> int:
        """Points a correct answer on a round of `count` values is worth right now"""
        return count * POINTS_PER_VALUE + self.streak * STREAK_BONUS

    def record_correct(self, count: int) -> int:
        # Bonus uses the streak before it is incremented
        points = self.points_for(count)
        self.score += points
        self.streak += 1
        return points

    def record_miss(self) -> None:
        self.streak = 0


@dataclass(frozen=True)
class AnswerResult:
    user_answer: int
    correct_sum: int
    is_correct: bool
    points: int
    praise: str


def evaluate_answer(pending_input: str,
                    round_: Round,
                    ledger: ScoreLedger,
                    rng,
                    praise_messages: Sequence[str] = PRAISE_MESSAGES) -> AnswerResult:
    """
    Compare the typed answer with the round sum and update the ledger.

    Args:
        pending_input: 1-3 decimal digits
        round_: Round being answered
        ledger: Ledger to update in place
        rng: Random source providing choice(seq), used for the praise text
        praise_messages: Affirmations to pick from on a correct answer
    """
    if not pending_input or not pending_input.isdigit() or len(pending_input) > MAX_ANSWER_DIGITS:
        raise ValueError(f"Answer must be 1-{MAX_ANSWER_DIGITS} digits, got {pending_input!r}")

    user_answer = int(pending_input)
    if user_answer == round_.sum:
        points = ledger.record_correct(round_.count)
        return AnswerResult(user_answer, round_.sum, True, points, rng.choice(praise_messages))

    ledger.record_miss()
    return AnswerResult(user_answer, round_.sum, False, 0, MISS_MESSAGE)
