"""ADSR amplitude envelope."""

from dataclasses import replace
from enum import Enum, auto

from additivesynth.traits import KeyPress, MidiControllable, SynthComponent
from additivesynth.utils import lerp

TIME_STEP = 1.0 / 4800.0


class EnvState(Enum):
    """Where the envelope is in its cycle."""

    OFF = auto()
    PLAYING = auto()
    RELEASING = auto()


class Envelope(MidiControllable, SynthComponent):
    """Attack/decay/sustain/release gain applied sample by sample."""

    def __init__(self) -> None:
        self.a = 0.0
        self.d = 0.0
        self.s = 1.0
        self.r = 0.0
        self.state = EnvState.OFF
        self._t = 0.0
        self._start_level = 0.0
        self.current_note = KeyPress(0, 0)

    def amplitude(self) -> float:
        """Current gain, from the position within the envelope."""
        t = self._t
        if self.state is EnvState.OFF:
            return 0.0
        if self.state is EnvState.RELEASING:
            return lerp(t, 0.0, self.r, self._start_level, 0.0)
        if t <= self.a:
            return lerp(t, 0.0, self.a, self._start_level, 1.0)
        if t <= self.a + self.d:
            return lerp(t, self.a, self.a + self.d, 1.0, self.s)
        return self.s

    def _enter(self, state: EnvState, start_level: float) -> None:
        self.state = state
        self._t = 0.0
        self._start_level = start_level

    def start_note(self, key_press: KeyPress) -> None:
        if self.state is EnvState.OFF:
            self._enter(EnvState.PLAYING, 0.0)
            self.current_note = key_press
        elif self.state is EnvState.PLAYING:
            self.current_note = replace(self.current_note, note=key_press.note)
        else:
            self.current_note = replace(self.current_note, note=key_press.note)
            self._enter(EnvState.PLAYING, self.amplitude())

    def stop_note(self, note: int) -> None:
        if self.current_note.note == note:
            self._enter(EnvState.RELEASING, self.amplitude())

    def apply(self, sample: float) -> float:
        if self.state is EnvState.PLAYING:
            self._t += TIME_STEP
        elif self.state is EnvState.RELEASING:
            if self._t <= self.r:
                self._t += TIME_STEP
            else:
                self.state = EnvState.OFF
        return sample * self.amplitude()