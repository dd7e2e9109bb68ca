"""
Tone synthesis - renders feedback signals to signed 16-bit PCM
"""

import math
from array import array
from typing import Dict

from .feedback_signals import FeedbackSignal, Tone

# Exponential decay target of every note envelope
DECAY_FLOOR = 0.00001
MAX_AMPLITUDE = 32767


def _oscillator(waveform: str, phase: float) -> float:
    """Sample of a unit waveform at phase (in cycles)"""
    frac = phase - math.floor(phase)
    if waveform == "sine":
        return math.sin(2.0 * math.pi * frac)
    if waveform == "triangle":
        return 4.0 * abs(frac - 0.5) - 1.0
    if waveform == "sawtooth":
        return 2.0 * frac - 1.0
    if waveform == "square":
        return 1.0 if frac < 0.5 else -1.0
    raise ValueError(f"Unknown waveform: {waveform}")


class ToneSynth:
    """
    Renders FeedbackSignal recipes into mono PCM buffers.

    Each tone starts at its volume and ramps exponentially down to
    DECAY_FLOOR over its duration. Overlapping tones are summed, then
    scaled by the master volume and clipped.
    """

    def __init__(self, sample_rate_hz: int = 44100, master_volume: float = 1.0):
        if sample_rate_hz <= 0:
            raise ValueError(f"Sample rate must be positive, got {sample_rate_hz}")
        self.sample_rate_hz = sample_rate_hz
        self.master_volume = master_volume

    def sample_count(self, duration_s: float) -> int:
        return max(1, int(round(self.sample_rate_hz * duration_s)))

    def render_tone(self, tone: Tone) -> array:
        """Render one tone as float samples in [-volume, volume]"""
        count = self.sample_count(tone.duration_s)
        ratio = DECAY_FLOOR / tone.volume if tone.volume > 0 else 0.0
        out = array("d")
        for idx in range(count):
            t = idx / self.sample_rate_hz
            envelope = tone.volume * (ratio ** (t / tone.duration_s)) if ratio > 0 else 0.0
            out.append(_oscillator(tone.waveform, tone.frequency_hz * t) * envelope)
        return out

    def render(self, signal: FeedbackSignal) -> array:
        """Render a whole signal as a signed 16-bit mono PCM array"""
        mix = array("d", [0.0] * self.sample_count(signal.duration_s))
        for tone in signal.tones:
            start = int(round(tone.offset_s * self.sample_rate_hz))
            for idx, sample in enumerate(self.render_tone(tone)):
                pos = start + idx
                if pos < len(mix):
                    mix[pos] += sample

        pcm = array("h")
        for sample in mix:
            value = max(-1.0, min(1.0, sample * self.master_volume))
            pcm.append(int(value * MAX_AMPLITUDE))
        return pcm

    def render_all(self) -> Dict[FeedbackSignal, array]:
        return {signal: self.render(signal) for signal in FeedbackSignal}


def to_channels(pcm: array, channels: int) -> array:
    """Interleave a mono buffer into the mixer's channel count"""
    if channels == 1:
        return pcm
    out = array("h")
    for sample in pcm:
        out.extend([sample] * channels)
    return out
