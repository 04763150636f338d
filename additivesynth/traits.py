"""Interfaces shared by the synthesiser's parts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from additivesynth.utils import MIDI_MAX


@dataclass(frozen=True)
class KeyPress:
    """A MIDI note-on: note number and velocity, both 0..127."""

    note: int
    velocity: int

    def __post_init__(self) -> None:
        for name in ("note", "velocity"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= MIDI_MAX:
                raise ValueError(f"{name} must be an integer in 0..{MIDI_MAX}, got {value!r}")


class MidiControllable(ABC):
    """Something that reacts to notes starting and stopping."""

    @abstractmethod
    def start_note(self, key_press: KeyPress) -> None:
        """React to a key being pressed."""

    @abstractmethod
    def stop_note(self, note: int) -> None:
        """React to the key for ``note`` being released."""


class SynthComponent(ABC):
    """A stage that transforms one sample at a time."""

    @abstractmethod
    def apply(self, sample: float) -> float:
        """Process one sample and return the result."""