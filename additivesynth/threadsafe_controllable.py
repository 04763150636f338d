"""Lock-guarded access to a controllable sample source."""

import threading
from contextlib import contextmanager
from typing import Iterator

from additivesynth.traits import KeyPress, MidiControllable


class ThreadsafeControllable(MidiControllable):
    """Wraps a source so that notes and samples can come from different threads.

    Share one instance between threads; every operation holds the same lock.
    """

    def __init__(self, source) -> None:
        self.contents = source
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator:
        """Hold the lock and give direct access to the wrapped source."""
        with self._lock:
            yield self.contents

    @property
    def channels(self) -> int:
        with self._lock:
            return self.contents.channels

    @property
    def sample_rate(self) -> int:
        with self._lock:
            return self.contents.sample_rate

    def start_note(self, key_press: KeyPress) -> None:
        with self._lock:
            self.contents.start_note(key_press)

    def stop_note(self, note: int) -> None:
        with self._lock:
            self.contents.stop_note(note)

    def __iter__(self) -> "ThreadsafeControllable":
        return self

    def __next__(self) -> float:
        with self._lock:
            return next(self.contents)