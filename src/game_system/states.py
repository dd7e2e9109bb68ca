"""
Game state base class and concrete implementations
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from audio_system.feedback_signals import FeedbackSignal
from .flash_timer import FlashTimer
from .scoring import MAX_ANSWER_DIGITS, AnswerResult, evaluate_answer
from .snapshot import GamePhase
from .triggers import Trigger, TriggerKind

if TYPE_CHECKING:
    from game_system.session import GameSession


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state represents one game phase with its own:
    - Trigger handling logic
    - Timer management
    - State transition conditions

    Triggers a state does not handle are ignored (no-op, no signal).
    """

    phase: GamePhase

    def __init__(self, session: 'GameSession'):
        self.session: 'GameSession' = session

    @abstractmethod
    def handle(self, trigger: Trigger) -> Optional['GameState']:
        """
        React to an input trigger (override in subclasses).

        Returns:
            New GameState instance if transition needed, None to stay
        """
        pass

    def update(self) -> Optional['GameState']:
        """Time-driven logic, called once per frame (override if needed)"""
        return None

    def on_enter(self) -> None:
        self.custom_on_enter()

    def on_exit(self) -> None:
        self.custom_on_exit()

    def custom_on_enter(self) -> None:
        pass

    def custom_on_exit(self) -> None:
        pass


class StartState(GameState):
    """
    Level selection screen.

    Transitions:
    - SELECT_PRESET → stays, swaps the active preset
    - START_GAME → ReadyState with a fresh round
    """

    phase = GamePhase.START

    def custom_on_enter(self) -> None:
        self.session.active_round = None
        self.session.pending_input = ""
        self.session.flash_index = -1

    def handle(self, trigger: Trigger) -> Optional[GameState]:
        if trigger.kind is TriggerKind.SELECT_PRESET:
            if self.session.select_preset(trigger.value):
                self.session.emit(FeedbackSignal.CLICK)
            return None

        if trigger.kind is TriggerKind.START_GAME:
            # Raises InvalidConfiguration before anything is emitted
            self.session.start_new_round()
            self.session.emit(FeedbackSignal.START)
            return ReadyState(self.session)

        return None


class ReadyState(GameState):
    """
    "Ready?" screen showing the preset message.

    Transitions:
    - ADVANCE → FlashingState
    """

    phase = GamePhase.READY

    def handle(self, trigger: Trigger) -> Optional[GameState]:
        if trigger.kind is TriggerKind.ADVANCE:
            self.session.emit(FeedbackSignal.CLICK)
            return FlashingState(self.session)
        return None


class FlashingState(GameState):
    """
    Flashes the round's values one per interval.

    Index 0 is shown on enter. The timer then advances one index per
    interval; once the last index has been shown for a full interval the
    repeat stops and, one more interval later, the state moves on.

    Transitions:
    - timer finished → AnsweringState
    All triggers are ignored while flashing.
    """

    phase = GamePhase.FLASHING

    def __init__(self, session: 'GameSession'):
        super().__init__(session)
        self.round = session.active_round
        self.timer: Optional[FlashTimer] = None
        self._done = False

    def custom_on_enter(self) -> None:
        self.session.flash_index = 0
        self.session.emit(FeedbackSignal.FLASH)
        self.timer = FlashTimer(
            interval_ms=self.session.preset.interval_ms,
            on_repeat=self._advance_flash,
            on_final=self._finish_flashing,
            clock=self.session.clock
        )
        self.timer.start()

    def custom_on_exit(self) -> None:
        if self.timer is not None and self.timer.active:
            self.timer.cancel()
            self.session.logger.debug("Flash timer cancelled")

    def _is_current(self) -> bool:
        return self.session.active_round is self.round and self.session.current_state is self

    def _advance_flash(self) -> bool:
        if not self._is_current():
            self.session.logger.warning("Stale flash tick ignored")
            self.timer.cancel()
            return False

        if self.session.flash_index < self.round.count - 1:
            self.session.flash_index += 1
            self.session.emit(FeedbackSignal.FLASH)
            self.session.logger.debug(f"Flash {self.session.flash_index + 1}/{self.round.count}")
            return True
        return False

    def _finish_flashing(self) -> None:
        if self._is_current():
            self._done = True

    def handle(self, trigger: Trigger) -> Optional[GameState]:
        return None

    def update(self) -> Optional[GameState]:
        self.timer.update()
        if self._done:
            return AnsweringState(self.session)
        return None


class AnsweringState(GameState):
    """
    Keypad entry of the sum.

    Transitions:
    - DIGIT / CLEAR → stays, edits pending input
    - SUBMIT with non-empty input → ResultState
    """

    phase = GamePhase.ANSWERING

    def custom_on_enter(self) -> None:
        self.session.flash_index = -1
        self.session.pending_input = ""

    def handle(self, trigger: Trigger) -> Optional[GameState]:
        if trigger.kind is TriggerKind.DIGIT:
            self.session.emit(FeedbackSignal.CLICK)
            if len(self.session.pending_input) < MAX_ANSWER_DIGITS:
                self.session.pending_input += str(trigger.value)
            return None

        if trigger.kind is TriggerKind.CLEAR:
            self.session.emit(FeedbackSignal.CLICK)
            self.session.pending_input = ""
            return None

        if trigger.kind is TriggerKind.SUBMIT and self.session.pending_input:
            self.session.emit(FeedbackSignal.CLICK)
            result = evaluate_answer(
                self.session.pending_input,
                self.session.active_round,
                self.session.ledger,
                self.session.rng,
                self.session.praise_messages
            )
            return ResultState(self.session, result)

        return None


class ResultState(GameState):
    """
    Shows the evaluation of the submitted answer.

    Transitions:
    - RESTART → ReadyState with a fresh round (score/streak kept)
    - GO_HOME → StartState (score/streak kept)
    """

    phase = GamePhase.RESULT

    def __init__(self, session: 'GameSession', result: AnswerResult):
        super().__init__(session)
        self.result = result

    def custom_on_enter(self) -> None:
        self.session.last_result = self.result
        if self.result.is_correct:
            self.session.emit(FeedbackSignal.CORRECT)
            self.session.logger.info(
                f"Correct: {self.result.user_answer} (+{self.result.points}) "
                f"score={self.session.ledger.score} streak={self.session.ledger.streak}"
            )
        else:
            self.session.emit(FeedbackSignal.WRONG)
            self.session.logger.info(
                f"Wrong: {self.result.user_answer} != {self.result.correct_sum} "
                f"score={self.session.ledger.score}"
            )

    def handle(self, trigger: Trigger) -> Optional[GameState]:
        if trigger.kind is TriggerKind.RESTART:
            self.session.start_new_round()
            self.session.emit(FeedbackSignal.START)
            return ReadyState(self.session)

        if trigger.kind is TriggerKind.GO_HOME:
            self.session.emit(FeedbackSignal.CLICK)
            return StartState(self.session)

        return None
