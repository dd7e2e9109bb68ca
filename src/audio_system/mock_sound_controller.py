"""
Mock Sound Controller - No-op implementation for testing without audio hardware
"""

from typing import List

from .feedback_signals import FeedbackSignal


class MockSoundController:
    """
    Mock implementation of SoundController that performs no audio operations.

    Remembers every signal it was asked to play, in order.
    """

    def __init__(self, logger):
        self.logger = logger
        self.played: List[FeedbackSignal] = []
        self.logger.info("🔇 MockSoundController initialized (audio disabled)")

    def play_signal(self, signal: FeedbackSignal) -> None:
        """Mock: record the signal instead of playing it"""
        self.played.append(signal)
        self.logger.debug(f"Mock: Playing signal {signal.value}")
        return None

    def clear(self) -> None:
        self.played.clear()

    def cleanup(self) -> None:
        self.logger.info("MockSoundController cleaned up")
