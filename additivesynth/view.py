"""Slider window for the envelope and harmonic weights."""

import argparse
import tkinter as tk
from dataclasses import dataclass
from typing import Callable, Union

from additivesynth.synth_io import Synth

WINDOW_TITLE = "additive synth"
SLIDER_HEIGHT = 200
SLIDER_STEP = 0.01
SPACING = 50


@dataclass(frozen=True)
class AChanged:
    value: float


@dataclass(frozen=True)
class DChanged:
    value: float


@dataclass(frozen=True)
class SChanged:
    value: float


@dataclass(frozen=True)
class RChanged:
    value: float


@dataclass(frozen=True)
class HarmonicChanged:
    harmonic: int
    value: float


Message = Union[AChanged, DChanged, SChanged, RChanged, HarmonicChanged]


def update(synth: Synth, message: Message) -> None:
    """Apply a slider change to the synth's envelope or harmonics."""
    with synth.threadsafe_source.locked() as core:
        match message:
            case AChanged(value):
                core.envelope.a = value
            case DChanged(value):
                core.envelope.d = value
            case SChanged(value):
                core.envelope.s = value
            case RChanged(value):
                core.envelope.r = value
            case HarmonicChanged(harmonic, value):
                core.source.set_harmonic(harmonic, value)
            case _:
                raise TypeError(f"unknown message {message!r}")


def slider_label(label: str, val: float) -> str:
    """Caption shown under a slider."""
    return f"{label}: {val:.2f}"


def _slider(
    parent: tk.Misc,
    column: int,
    label: str,
    value: float,
    make_message: Callable[[float], Message],
    synth: Synth,
) -> None:
    cell = tk.Frame(parent)
    cell.grid(row=0, column=column, padx=SPACING // 2)
    caption = tk.Label(cell, text=slider_label(label, value))

    def changed(raw: str) -> None:
        val = float(raw)
        update(synth, make_message(val))
        caption.config(text=slider_label(label, val))

    scale = tk.Scale(
        cell,
        from_=1.0,
        to=0.0,
        resolution=SLIDER_STEP,
        orient=tk.VERTICAL,
        length=SLIDER_HEIGHT,
        showvalue=False,
    )
    scale.set(value)
    scale.configure(command=changed)
    scale.pack()
    caption.pack()


def build_window(synth: Synth) -> tk.Tk:
    """Create the window with envelope sliders above harmonic sliders."""
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    with synth.threadsafe_source.locked() as core:
        env = core.envelope
        envelope_controls = [
            ("Attack", AChanged, env.a),
            ("Decay", DChanged, env.d),
            ("Sustain", SChanged, env.s),
            ("Release", RChanged, env.r),
        ]
        harmonic_values = list(core.source.harmonics())

    env_row = tk.Frame(root)
    env_row.pack(pady=SPACING // 2)
    for column, (label, message_type, value) in enumerate(envelope_controls):
        _slider(env_row, column, label, value, message_type, synth)

    harmonic_row = tk.Frame(root)
    harmonic_row.pack(pady=SPACING // 2)
    for harmonic, value in enumerate(harmonic_values):
        _slider(
            harmonic_row,
            harmonic,
            str(harmonic),
            value,
            lambda v, h=harmonic: HarmonicChanged(h, v),
            synth,
        )
    return root


def main(argv=None) -> int:
    """Open the synthesiser window, playing MIDI input through the default audio device."""
    parser = argparse.ArgumentParser(
        prog="additivesynth", description="Additive synthesiser driven by MIDI input."
    )
    parser.parse_args(argv)
    synth = Synth.create_default()
    try:
        build_window(synth).mainloop()
    finally:
        synth.close()
    return 0