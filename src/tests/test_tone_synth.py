from array import array

import pytest

from audio_system import SIGNAL_TONES, FeedbackSignal, Tone, ToneSynth
from audio_system.tone_synth import MAX_AMPLITUDE, to_channels


def test_every_signal_has_a_recipe():
    assert set(SIGNAL_TONES) == set(FeedbackSignal)


def test_signal_durations_include_offsets():
    assert FeedbackSignal.FLASH.duration_s == pytest.approx(0.1)
    assert FeedbackSignal.CORRECT.duration_s == pytest.approx(0.9)
    assert FeedbackSignal.WRONG.duration_s == pytest.approx(0.45)


@pytest.mark.parametrize("signal", list(FeedbackSignal))
def test_render_length_and_bounds(signal):
    synth = ToneSynth(sample_rate_hz=8000)
    pcm = synth.render(signal)
    assert pcm.typecode == "h"
    assert len(pcm) == synth.sample_count(signal.duration_s)
    assert all(-MAX_AMPLITUDE <= s <= MAX_AMPLITUDE for s in pcm)
    assert any(s != 0 for s in pcm)


def test_envelope_decays():
    synth = ToneSynth(sample_rate_hz=8000)
    samples = synth.render_tone(Tone(100.0, "square", 1.0, 0.5))
    assert abs(samples[0]) == pytest.approx(0.5)
    assert abs(samples[-1]) < 0.001


def test_master_volume_scales_and_clips():
    quiet = ToneSynth(sample_rate_hz=8000, master_volume=0.0).render(FeedbackSignal.START)
    assert all(s == 0 for s in quiet)

    loud = ToneSynth(sample_rate_hz=8000, master_volume=1000.0).render(FeedbackSignal.START)
    assert max(loud) == MAX_AMPLITUDE


def test_unknown_waveform_rejected():
    synth = ToneSynth(sample_rate_hz=8000)
    with pytest.raises(ValueError):
        synth.render_tone(Tone(100.0, "noise", 0.1, 0.1))


def test_invalid_sample_rate():
    with pytest.raises(ValueError):
        ToneSynth(sample_rate_hz=0)


def test_to_channels():
    mono = array("h", [1, -2, 3])
    assert to_channels(mono, 1) is mono
    assert list(to_channels(mono, 2)) == [1, 1, -2, -2, 3, 3]
