"""
Audio System Module

Feedback signal definitions, tone synthesis and playback
for the Flash Anzan game.
"""

from .feedback_signals import FeedbackSignal, Tone, SIGNAL_TONES
from .tone_synth import ToneSynth
from .mock_sound_controller import MockSoundController

__all__ = [
    'FeedbackSignal',
    'Tone',
    'SIGNAL_TONES',
    'ToneSynth',
    'MockSoundController'
]
