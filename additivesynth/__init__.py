"""Additive synthesizer played over MIDI, with an ADSR envelope, adjustable harmonics and a slider window."""

__version__ = "0.1.0"