import math
from itertools import islice

import pytest

from additivesynth.harmonics_source import HarmonicsSource
from additivesynth.osc import SineOsc
from additivesynth.traits import KeyPress
from additivesynth.utils import midi_to_hz


def test_default_weights():
    src = HarmonicsSource(10)
    assert list(src.harmonics()) == [1.0] * 10


def test_set_harmonic():
    src = HarmonicsSource(4)
    src.set_harmonic(2, 0.25)
    assert list(src.harmonics()) == [1.0, 1.0, 0.25, 1.0]


@pytest.mark.parametrize("index", [4, -1])
def test_set_harmonic_out_of_range(index):
    src = HarmonicsSource(4)
    with pytest.raises(IndexError):
        src.set_harmonic(index, 0.5)


def test_silent_before_any_note():
    src = HarmonicsSource(3)
    assert list(islice(src, 50)) == [0.0] * 50


def test_output_is_normalised():
    src = HarmonicsSource(10)
    src.start_note(KeyPress(45, 127))
    assert all(abs(s) <= 1.0 + 1e-9 for s in islice(src, 2000))


def test_fundamental_only_matches_single_oscillator():
    src = HarmonicsSource(3)
    src.set_harmonic(1, 0.0)
    src.set_harmonic(2, 0.0)
    src.start_note(KeyPress(60, 90))
    reference = SineOsc(0.0)
    reference.start_freq(midi_to_hz(60), 90)
    assert list(islice(src, 300)) == pytest.approx(list(islice(reference, 300)))


def test_second_harmonic_is_double_pitch():
    src = HarmonicsSource(2)
    src.set_harmonic(0, 0.0)
    src.start_note(KeyPress(50, 127))
    reference = SineOsc(0.0)
    reference.start_freq(2 * midi_to_hz(50), 127)
    assert list(islice(src, 300)) == pytest.approx(list(islice(reference, 300)))


def test_all_weights_zero_gives_nan():
    src = HarmonicsSource(2)
    src.set_harmonic(0, 0.0)
    src.set_harmonic(1, 0.0)
    src.start_note(KeyPress(60, 100))
    samples = list(islice(src, 3))
    assert samples == pytest.approx([math.nan] * 3, nan_ok=True)