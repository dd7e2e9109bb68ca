"""
Game System - State machine based flash mental arithmetic game

This module provides the core of the game: the difficulty catalog,
round generation, the flash timer, scoring and the session state machine.
"""

from .exceptions import FlashAnzanError, InvalidConfiguration
from .difficulty import DifficultyPreset, DIFFICULTY_LEVELS, PRAISE_MESSAGES, MISS_MESSAGE
from .round_generator import Round, generate_round
from .flash_timer import FlashTimer
from .triggers import Trigger, TriggerKind
from .scoring import ScoreLedger, AnswerResult, evaluate_answer
from .snapshot import GamePhase, SessionSnapshot
from .states import GameState, StartState, ReadyState, FlashingState, AnsweringState, ResultState
from .session import GameSession
from .config import GameConfig

__all__ = [
    # Errors
    "FlashAnzanError",
    "InvalidConfiguration",
    # Catalog
    "DifficultyPreset",
    "DIFFICULTY_LEVELS",
    "PRAISE_MESSAGES",
    "MISS_MESSAGE",
    # Rounds and scoring
    "Round",
    "generate_round",
    "ScoreLedger",
    "AnswerResult",
    "evaluate_answer",
    # State machine
    "FlashTimer",
    "Trigger",
    "TriggerKind",
    "GamePhase",
    "SessionSnapshot",
    "GameState",
    "StartState",
    "ReadyState",
    "FlashingState",
    "AnsweringState",
    "ResultState",
    "GameSession",
    # Configuration
    "GameConfig"
]
