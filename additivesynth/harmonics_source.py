"""A tone built from a weighted sum of harmonics."""

import math
from typing import Iterator

from additivesynth.osc import SAMPLE_RATE, SineOsc
from additivesynth.traits import KeyPress, MidiControllable
from additivesynth.utils import midi_to_hz


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class HarmonicsSource(MidiControllable):
    """Sine oscillators at whole multiples of the note's pitch, mixed by weight."""

    channels = 1
    sample_rate = SAMPLE_RATE

    def __init__(self, num_harmonics: int) -> None:
        self._harmonics = [[SineOsc(440.0), 1.0] for _ in range(num_harmonics)]

    def harmonics(self) -> Iterator[float]:
        """Yield the weight of each harmonic, fundamental first."""
        return (vol for _osc, vol in self._harmonics)

    def set_harmonic(self, i: int, vol: float) -> None:
        """Set the weight of harmonic ``i`` (0 is the fundamental)."""
        if not 0 <= i < len(self._harmonics):
            raise IndexError(f"harmonic {i} out of range")
        self._harmonics[i][1] = vol

    def start_note(self, key_press: KeyPress) -> None:
        base = midi_to_hz(key_press.note)
        for multiple, (osc, _vol) in enumerate(self._harmonics, start=1):
            osc.start_freq(base * multiple, key_press.velocity)

    def stop_note(self, note: int) -> None:
        pass

    def __iter__(self) -> "HarmonicsSource":
        return self

    def __next__(self) -> float:
        total_vol = sum(vol for _osc, vol in self._harmonics)
        sample = sum(next(osc) * vol for osc, vol in self._harmonics)
        return _ratio(sample, total_vol)