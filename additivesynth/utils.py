"""Pitch conversion and interpolation helpers."""

import math

MIDI_MAX = 127
A4_HZ = 440.0
A4_NOTE = 69


def _check_midi(value: int) -> int:
    if not 0 <= value <= MIDI_MAX:
        raise ValueError(f"MIDI value {value} outside 0..{MIDI_MAX}")
    return value


def midi_to_hz(midi_num: int) -> float:
    """Return the frequency in Hz of a MIDI note number (A4 = 69 = 440 Hz)."""
    _check_midi(midi_num)
    return A4_HZ * 2.0 ** ((midi_num - A4_NOTE) / 12.0)


def hz_to_midi(hz: float) -> int:
    """Return the MIDI note number at or below a frequency.

    Frequencies at or below zero map to note 0; a result above 127 is an error.
    """
    if not hz > 0:
        return 0
    raw = 12.0 * math.log2(hz / A4_HZ) + A4_NOTE
    if math.isnan(raw):
        return 0
    note = int(min(max(raw, 0.0), 255.0))
    return _check_midi(note)


def lerp(t: float, t0: float, t1: float, a: float, b: float) -> float:
    """Map ``t`` linearly from the interval [t0, t1] onto [a, b].

    A zero-length interval follows IEEE arithmetic: the fraction becomes
    NaN when ``t == t0`` and a signed infinity otherwise.
    """
    span = t1 - t0
    offset = t - t0
    if span == 0:
        if offset == 0 or math.isnan(offset):
            fraction = math.nan
        else:
            fraction = math.copysign(math.inf, offset) * math.copysign(1.0, span)
    else:
        fraction = offset / span
    return fraction * (b - a) + a