from itertools import islice

import pytest

from additivesynth.osc import SAMPLE_RATE, SineOsc
from additivesynth.traits import KeyPress
from additivesynth.utils import midi_to_hz


def test_new_oscillator_is_silent():
    osc = SineOsc(440.0)
    assert list(islice(osc, 100)) == [0.0] * 100


def test_iter_returns_self():
    osc = SineOsc(440.0)
    assert iter(osc) is osc


def test_sample_rate():
    assert SineOsc(1.0).sample_rate == 48000 == SAMPLE_RATE


def test_start_freq_full_velocity_gives_unit_volume():
    osc = SineOsc(0.0)
    osc.start_freq(220.0, 127)
    assert osc.freq == 220.0
    assert osc.volume == pytest.approx(1.0)


def test_quarter_rate_wave_hits_peaks():
    osc = SineOsc(0.0)
    osc.start_freq(SAMPLE_RATE / 4, 127)
    samples = list(islice(osc, 4))
    assert samples[0] == pytest.approx(1.0)
    assert samples[2] == pytest.approx(-1.0)
    assert samples[1] == pytest.approx(0.0, abs=1e-9)


def test_samples_bounded_by_volume():
    osc = SineOsc(0.0)
    osc.start_freq(1234.5, 64)
    assert all(abs(s) <= osc.volume + 1e-12 for s in islice(osc, 5000))


def test_wave_is_periodic_over_many_cycles():
    osc = SineOsc(0.0)
    osc.start_freq(SAMPLE_RATE / 8, 127)
    first = list(islice(osc, 8))
    for _ in range(100):
        later = list(islice(osc, 8))
    assert later == pytest.approx(first, abs=1e-6)


def test_start_note_uses_raw_velocity_and_note_pitch():
    osc = SineOsc(0.0)
    osc.start_note(KeyPress(57, 2))
    assert osc.freq == pytest.approx(midi_to_hz(57))
    assert osc.volume == 2.0


def test_stop_note_keeps_playing():
    osc = SineOsc(0.0)
    osc.start_freq(SAMPLE_RATE / 4, 127)
    osc.stop_note(60)
    assert next(osc) == pytest.approx(1.0)