"""Audio output and MIDI input for the synthesiser."""

import itertools
import threading

import mido
import numpy as np

from additivesynth.harmonics_source import HarmonicsSource
from additivesynth.synth_core import SynthCore
from additivesynth.threadsafe_controllable import ThreadsafeControllable
from additivesynth.traits import KeyPress, MidiControllable

NUM_HARMONICS = 10
CHUNK_SAMPLES = 1024
MIXER_BUFFER = 512
PCM16_MAX = 32767


def midi_handler(controllable_source: MidiControllable, raw_message) -> None:
    """Decode one raw MIDI message and forward note on/off events.

    Messages other than channel note events are ignored. Malformed bytes
    raise ValueError.
    """
    message = mido.Message.from_bytes(list(raw_message))
    if message.type == "note_off":
        controllable_source.stop_note(message.note)
    elif message.type == "note_on":
        controllable_source.start_note(KeyPress(note=message.note, velocity=message.velocity))


def _to_pcm16(samples) -> np.ndarray:
    """Convert float samples in [-1, 1] to signed 16-bit PCM."""
    cleaned = np.nan_to_num(
        np.asarray(samples, dtype=np.float64), nan=0.0, posinf=1.0, neginf=-1.0
    )
    return (np.clip(cleaned, -1.0, 1.0) * PCM16_MAX).astype(np.int16)


class _AudioPump:
    """Keeps a mixer channel fed with chunks pulled from a sample source."""

    def __init__(self, source, mixer, chunk: int = CHUNK_SAMPLES) -> None:
        self._source = source
        self._mixer = mixer
        self._chunk = chunk
        self._poll = chunk / (4.0 * source.sample_rate)
        self._stop = threading.Event()
        self._channel = mixer.Channel(0)
        self._thread = threading.Thread(target=self._run, name="synth-audio", daemon=True)

    def _next_sound(self):
        samples = np.fromiter(
            itertools.islice(self._source, self._chunk), dtype=np.float64, count=self._chunk
        )
        return self._mixer.Sound(buffer=_to_pcm16(samples).tobytes())

    def _run(self) -> None:
        while not self._stop.is_set():
            if self._channel.get_queue() is None:
                self._channel.queue(self._next_sound())
            else:
                self._stop.wait(self._poll)

    def start(self) -> None:
        self._channel.play(self._next_sound())
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join()
        self._channel.stop()


class Synth:
    """The playable instrument: a harmonic source, an envelope, audio out and MIDI in."""

    def __init__(self) -> None:
        self.threadsafe_source = ThreadsafeControllable(
            SynthCore(HarmonicsSource(NUM_HARMONICS))
        )
        self._audio = None
        self._mixer = None
        self._midi_port = None

    def connect_to_default_audio(self) -> None:
        """Start streaming the synthesiser to the default audio device."""
        import pygame

        source = self.threadsafe_source
        pygame.mixer.init(
            frequency=source.sample_rate,
            size=-16,
            channels=source.channels,
            buffer=MIXER_BUFFER,
        )
        self._mixer = pygame.mixer
        pump = _AudioPump(source, pygame.mixer)
        pump.start()
        self._audio = pump

    def connect_to_default_midi(self) -> None:
        """Listen to the first available MIDI input port.

        Raises ConnectionError when no MIDI input is present.
        """
        ports = mido.get_input_names()
        if not ports:
            raise ConnectionError("no midi device connected")
        source = self.threadsafe_source
        self._midi_port = mido.open_input(
            ports[0], callback=lambda message: midi_handler(source, message.bytes())
        )

    def close(self) -> None:
        """Disconnect MIDI input and stop audio output."""
        if self._midi_port is not None:
            self._midi_port.close()
            self._midi_port = None
        if self._audio is not None:
            self._audio.stop()
            self._audio = None
        if self._mixer is not None:
            self._mixer.quit()
            self._mixer = None

    def __enter__(self) -> "Synth":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @classmethod
    def create_default(cls) -> "Synth":
        """Build a synth connected to the default audio device and MIDI input."""
        synth = cls()
        try:
            synth.connect_to_default_audio()
        except Exception as exc:
            synth.close()
            raise RuntimeError("could not connect to default audio") from exc
        try:
            synth.connect_to_default_midi()
        except Exception as exc:
            synth.close()
            raise RuntimeError("could not connect to default midi") from exc
        return synth