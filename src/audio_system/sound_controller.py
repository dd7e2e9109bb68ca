"""
Sound Controller - plays game feedback signals through the pygame mixer
"""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
from typing import Dict, Optional

from .feedback_signals import FeedbackSignal
from .tone_synth import ToneSynth, to_channels


class SoundController:
    """
    Plays feedback signals for the game system.

    All signals are synthesized once at startup and kept as pygame Sound
    objects. Playback is fire-and-forget: errors are logged and never
    propagate back into the game session.
    """

    def __init__(self, logger, sample_rate_hz: int = 44100, master_volume: float = 1.0):
        """
        Initialize pygame mixer and pre-render every feedback signal.

        Args:
            logger: ClassLogger instance for logging
            sample_rate_hz: Requested mixer frequency
            master_volume: Volume scale applied when rendering (0.0 to 1.0)

        Raises:
            pygame.error: If the audio device cannot be opened
        """
        self.logger = logger
        self.mixer = pygame.mixer
        if self.mixer.get_init() is None:
            self.mixer.init(frequency=sample_rate_hz, size=-16, channels=1, buffer=512)

        # The device may not honour the requested format
        frequency, _size, channels = self.mixer.get_init()
        self.sample_rate_hz = frequency
        self.channels = channels

        self._sound_objects: Dict[FeedbackSignal, pygame.mixer.Sound] = {}
        self._load_sounds(ToneSynth(frequency, master_volume))

        self.logger.info(f"🔊 SoundController initialized: {frequency}Hz, {channels} channel(s), "
                         f"{len(self._sound_objects)} signals")

    def _load_sounds(self, synth: ToneSynth) -> None:
        """Render every signal and wrap it in a pygame Sound"""
        for signal in FeedbackSignal:
            pcm = to_channels(synth.render(signal), self.channels)
            self._sound_objects[signal] = pygame.mixer.Sound(buffer=pcm.tobytes())

    def play_signal(self, signal: FeedbackSignal) -> Optional[pygame.mixer.Channel]:
        """
        Play a feedback signal without waiting for it.

        Returns:
            pygame.mixer.Channel playing the sound, or None if playback failed
        """
        try:
            return self._sound_objects[signal].play()
        except pygame.error as e:
            self.logger.warning(f"Failed to play signal {signal.value}: {e}")
            return None

    def cleanup(self) -> None:
        """Stop playback and release the audio device"""
        if self.mixer.get_init() is not None:
            self.mixer.stop()
            self.mixer.quit()
        self._sound_objects.clear()
        self.logger.info("SoundController cleaned up")
