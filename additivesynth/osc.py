"""Sine-wave oscillator."""

import math

from additivesynth.traits import KeyPress, MidiControllable
from additivesynth.utils import MIDI_MAX, midi_to_hz

SAMPLE_RATE = 48000
TWO_PI = 2.0 * math.pi


class SineOsc(MidiControllable):
    """An endless sine wave whose frequency and volume can be changed."""

    channels = 1
    sample_rate = SAMPLE_RATE

    def __init__(self, freq: float) -> None:
        self.freq = freq
        self._phase = 0.0
        self.volume = 0.0

    def start_freq(self, freq: float, velocity: int) -> None:
        """Play at ``freq`` with volume scaled from a MIDI velocity."""
        self.freq = freq
        self.volume = velocity / MIDI_MAX

    def start_note(self, key_press: KeyPress) -> None:
        # Volume takes the raw velocity here, unscaled.
        self.freq = midi_to_hz(key_press.note)
        self.volume = float(key_press.velocity)

    def stop_note(self, note: int) -> None:
        pass

    def __iter__(self) -> "SineOsc":
        return self

    def __next__(self) -> float:
        self._phase += TWO_PI * self.freq / self.sample_rate
        while self._phase > TWO_PI:
            self._phase -= TWO_PI
        return math.sin(self._phase) * self.volume