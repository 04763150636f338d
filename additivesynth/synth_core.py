"""A sound source shaped by an envelope."""

from additivesynth.envelope import Envelope
from additivesynth.traits import KeyPress, MidiControllable


class SynthCore(MidiControllable):
    """Feeds each sample of ``source`` through an ADSR envelope."""

    def __init__(self, source) -> None:
        self.source = source
        self.envelope = Envelope()

    @property
    def channels(self) -> int:
        return self.source.channels

    @property
    def sample_rate(self) -> int:
        return self.source.sample_rate

    def start_note(self, key_press: KeyPress) -> None:
        self.source.start_note(key_press)
        self.envelope.start_note(key_press)

    def stop_note(self, note: int) -> None:
        self.source.stop_note(note)
        self.envelope.stop_note(note)

    def __iter__(self) -> "SynthCore":
        return self

    def __next__(self) -> float:
        return self.envelope.apply(next(self.source))