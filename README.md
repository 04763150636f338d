# additivesynth

An additive synthesizer that you play from a MIDI keyboard. Each note is made of ten sine-wave
harmonics: the first at the note's pitch, each following one at the next whole-number multiple of
that frequency. The harmonics are mixed by their weights (the sum is divided by the total weight),
shaped by an ADSR envelope and sent to the default audio output at 48 kHz, mono.

## Installation

```
pip install .
```

The window uses `tkinter`, which must be present in your Python installation. MIDI ports are
opened through `mido`, which needs one of its port backends installed to see any devices.

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

Connect a MIDI keyboard, then start the synthesizer:

```
additivesynth
```

The command takes no options apart from `--help`. It opens the default audio output and listens on
the first MIDI input port that `mido` reports. If audio cannot be opened it stops with
`RuntimeError: could not connect to default audio`; if there is no MIDI input port it stops with
`RuntimeError: could not connect to default midi`.

The window has two rows of vertical sliders, each running from 0 to 1 in steps of 0.01, with the
current value shown beneath it:

- **Attack, Decay, Sustain, Release** set the envelope. Sustain is the level held while the key is
  down. Attack, decay and release are times: the envelope clock advances 1/4800 per sample, so at
  48 kHz a setting of 1.0 lasts a tenth of a second.
- **0 – 9** set the weight of each harmonic; slider 0 is the fundamental.

Note-on and note-off messages on any channel start and stop notes; every other message is ignored.
The key velocity sets the loudness.

## Using it as a library

The parts can be used without the window:

```python
from additivesynth.harmonics_source import HarmonicsSource
from additivesynth.synth_core import SynthCore
from additivesynth.traits import KeyPress

core = SynthCore(HarmonicsSource(10))
core.envelope.a = 0.1
core.envelope.r = 0.2
core.source.set_harmonic(1, 0.5)

core.start_note(KeyPress(note=69, velocity=100))
samples = [next(core) for _ in range(48000)]  # one second at 48 kHz
core.stop_note(69)
```

- `additivesynth.utils`: `midi_to_hz`, `hz_to_midi` and `lerp`.
- `additivesynth.traits`: `KeyPress` (note and velocity, both 0..127) and the `MidiControllable`
  and `SynthComponent` interfaces.
- `additivesynth.osc.SineOsc`: an endless sine oscillator.
- `additivesynth.envelope.Envelope`: the ADSR envelope, with its state in `EnvState`.
- `additivesynth.harmonics_source.HarmonicsSource`: the weighted set of harmonics.
- `additivesynth.synth_core.SynthCore`: a source passed through an envelope.
- `additivesynth.threadsafe_controllable.ThreadsafeControllable`: a lock around a source, so notes
  and samples can come from different threads; `locked()` gives direct access while holding it.
- `additivesynth.synth_io`: `Synth` (audio out and MIDI in; `Synth.create_default()`, `close()`,
  usable as a context manager) and `midi_handler`, which decodes raw MIDI bytes into note events.
- `additivesynth.view`: `update(synth, message)` applies an `AChanged`, `DChanged`, `SChanged`,
  `RChanged` or `HarmonicChanged` message; `build_window(synth)` creates the slider window.

## Limitations

- One note at a time: a new key while another is held changes the pitch but does not restart the
  envelope, and releasing a key only stops the note if it is the one the envelope is tracking.
- The MIDI port and audio device cannot be chosen; the first MIDI input and the default output are
  always used.
- Slider settings are not saved between runs.