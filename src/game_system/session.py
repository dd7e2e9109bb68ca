"""
Game session - owns all mutable game state and drives the state machine
"""

import random
from typing import List, Optional, Sequence, TYPE_CHECKING

from audio_system.feedback_signals import FeedbackSignal
from utils.clock import MonotonicClock
from .difficulty import DIFFICULTY_LEVELS, PRAISE_MESSAGES, DifficultyPreset
from .exceptions import InvalidConfiguration
from .round_generator import Round, generate_round
from .scoring import AnswerResult, ScoreLedger
from .snapshot import GamePhase, SessionSnapshot
from .states import GameState, StartState
from .triggers import Trigger

if TYPE_CHECKING:
    from utils import ClassLogger


class GameSession:
    """
    Single play session.

    Responsibilities:
    - Own the active preset, round, flash index, pending input and ledger
    - Route triggers and timer updates to the current GameState
    - Forward feedback signals to the sound sink (fire-and-forget)

    dispatch() and update() are the only ways state advances. Both return
    the feedback signals emitted during that call, in order.
    """

    def __init__(self,
                 logger: 'ClassLogger',
                 sound_controller,
                 clock=None,
                 rng=None,
                 catalog: Sequence[DifficultyPreset] = DIFFICULTY_LEVELS,
                 preset_index: int = 0,
                 praise_messages: Sequence[str] = PRAISE_MESSAGES):
        """
        Args:
            logger: Logger for transitions and diagnostics
            sound_controller: Sink with play_signal(FeedbackSignal)
            clock: Object with now_ms(); defaults to MonotonicClock
            rng: Random source with randint() and choice(); defaults to random.Random()
            catalog: Presets selectable by index
            preset_index: Initially selected preset
            praise_messages: Affirmations used on correct answers

        Raises:
            InvalidConfiguration: If preset_index is not a catalog index
        """
        if not catalog:
            raise ValueError("catalog must contain at least one preset")
        if not praise_messages:
            raise ValueError("praise_messages must not be empty")
        if not (0 <= preset_index < len(catalog)):
            raise InvalidConfiguration(
                f"Preset index {preset_index} out of range (0-{len(catalog) - 1})"
            )

        self.logger = logger
        self.sound_controller = sound_controller
        self.clock = clock or MonotonicClock()
        self.rng = rng if rng is not None else random.Random()
        self.catalog = tuple(catalog)
        self.praise_messages = tuple(praise_messages)

        self.preset: DifficultyPreset = self.catalog[preset_index]
        self.active_round: Optional[Round] = None
        self.flash_index: int = -1
        self.pending_input: str = ""
        self.ledger = ScoreLedger()
        self.last_result: Optional[AnswerResult] = None

        self._emitted: List[FeedbackSignal] = []

        self.current_state: GameState = StartState(self)
        self.current_state.on_enter()

        self.logger.info(f"GameSession initialized: preset '{self.preset.name}', {len(self.catalog)} presets")

    # --- Read side -------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self.current_state.phase

    @property
    def score(self) -> int:
        return self.ledger.score

    @property
    def streak(self) -> int:
        return self.ledger.streak

    def snapshot(self) -> SessionSnapshot:
        """Build a read-only view of the current state"""
        flash_value = None
        if self.active_round is not None and 0 <= self.flash_index < self.active_round.count:
            flash_value = self.active_round.values[self.flash_index]

        result = self.last_result
        return SessionSnapshot(
            phase=self.phase,
            preset_name=self.preset.name,
            preset_color=self.preset.color,
            preset_icon=self.preset.icon,
            preset_message=self.preset.message,
            flash_index=self.flash_index,
            flash_count=self.active_round.count if self.active_round else self.preset.count,
            flash_value=flash_value,
            pending_input=self.pending_input,
            score=self.ledger.score,
            streak=self.ledger.streak,
            last_correct_sum=result.correct_sum if result else None,
            last_user_answer=result.user_answer if result else None,
            last_answer_correct=result.is_correct if result else None,
            praise=result.praise if result else "",
        )

    # --- Write side ------------------------------------------------------

    def dispatch(self, trigger: Trigger) -> List[FeedbackSignal]:
        """
        Apply one input trigger to the current state.

        Triggers not valid in the current phase are ignored.

        Returns:
            Feedback signals emitted by this transition
        """
        self._emitted = []
        new_state = self.current_state.handle(trigger)
        if new_state is not None:
            self._transition_to_state(new_state)
        elif not self._emitted:
            self.logger.debug(f"Ignored trigger {trigger} in {self.current_state.__class__.__name__}")
        return self._drain_emitted()

    def update(self) -> List[FeedbackSignal]:
        """
        Advance timers of the current state. Call once per frame.

        Returns:
            Feedback signals emitted by timer callbacks
        """
        self._emitted = []
        new_state = self.current_state.update()
        if new_state is not None:
            self._transition_to_state(new_state)
        return self._drain_emitted()

    def reset(self) -> List[FeedbackSignal]:
        """
        Force the session back to START from any phase.

        Pending timers are cancelled; score and streak are kept.
        """
        self._emitted = []
        if self.phase is not GamePhase.START:
            self.logger.info("Session reset requested")
            self._transition_to_state(StartState(self))
        return self._drain_emitted()

    def select_preset(self, index: Optional[int]) -> bool:
        """Select a catalog preset by index. Returns False for an unknown index."""
        if index is None or not (0 <= index < len(self.catalog)):
            self.logger.debug(f"Unknown preset index {index}")
            return False
        self.preset = self.catalog[index]
        self.logger.info(f"Preset selected: {self.preset.name}")
        return True

    def start_new_round(self) -> Round:
        """
        Replace the active round with a freshly generated one.

        Raises:
            InvalidConfiguration: If the active preset cannot produce a round
        """
        new_round = generate_round(self.preset, self.rng)
        self.active_round = new_round
        self.pending_input = ""
        self.flash_index = -1
        self.logger.debug(f"New round: {list(new_round.values)} (sum {new_round.sum})")
        return new_round

    def emit(self, signal: FeedbackSignal) -> None:
        """Record a feedback signal and hand it to the sound sink"""
        self._emitted.append(signal)
        try:
            self.sound_controller.play_signal(signal)
        except Exception as e:
            self.logger.warning(f"Feedback signal {signal.value} failed: {e}")

    def _drain_emitted(self) -> List[FeedbackSignal]:
        emitted, self._emitted = self._emitted, []
        return emitted

    def _transition_to_state(self, new_state: GameState) -> None:
        """
        Handle transition to a new game state.

        Args:
            new_state: The new state to transition to
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.current_state.on_enter()

    def get_current_state_name(self) -> str:
        return self.current_state.__class__.__name__
