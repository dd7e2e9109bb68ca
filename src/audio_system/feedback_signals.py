"""
Feedback signals - the closed set of audio cues the game emits
"""

import enum
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Tone:
    """A single decaying oscillator note inside a signal"""
    frequency_hz: float
    waveform: str          # sine | triangle | sawtooth | square
    duration_s: float
    volume: float
    offset_s: float = 0.0  # start time relative to the signal start


class FeedbackSignal(enum.Enum):
    """Game feedback cues - each value is the recipe of tones that makes it up"""
    FLASH = "flash"
    CLICK = "click"
    CORRECT = "correct"
    WRONG = "wrong"
    START = "start"

    @property
    def tones(self) -> Tuple[Tone, ...]:
        return SIGNAL_TONES[self]

    @property
    def duration_s(self) -> float:
        """Total length of the signal including delayed tones"""
        return max(tone.offset_s + tone.duration_s for tone in self.tones)


SIGNAL_TONES = {
    FeedbackSignal.FLASH: (
        Tone(880.0, "sine", 0.1, 0.05),
    ),
    FeedbackSignal.CLICK: (
        Tone(440.0, "triangle", 0.05, 0.05),
    ),
    # Rising C major arpeggio
    FeedbackSignal.CORRECT: (
        Tone(523.25, "sine", 0.4, 0.1, offset_s=0.0),
        Tone(659.25, "sine", 0.4, 0.1, offset_s=0.1),
        Tone(783.99, "sine", 0.4, 0.1, offset_s=0.2),
        Tone(1046.5, "sine", 0.6, 0.1, offset_s=0.3),
    ),
    FeedbackSignal.WRONG: (
        Tone(220.0, "sawtooth", 0.3, 0.05, offset_s=0.0),
        Tone(180.0, "sawtooth", 0.3, 0.05, offset_s=0.15),
    ),
    FeedbackSignal.START: (
        Tone(587.33, "sine", 0.2, 0.1),
    ),
}
