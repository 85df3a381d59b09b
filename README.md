# wavesynth

Pure-Python building blocks for a SoundFont-based software synthesizer.
It has no dependencies outside the standard library.

## Modules

- `wavesynth.midifile` loads standard MIDI files (formats 0 and 1). It merges
  all tracks into one time-ordered list of `Message` objects. `MidiFile.messages`
  holds the messages and `MidiFile.times` holds their times in seconds.
  `MidiFile.length` is the time of the last message. Tempo changes are applied
  while the tracks are merged and are then dropped from the list. Loop markers
  come from `MidiFileLoopType`:
  - `LOOP_POINT` with a non-zero `loop_point` inserts a loop start marker at
    that tick in the first track.
  - `RPG_MAKER` treats CC #111 as the loop start.
  - `INCREDIBLE_MACHINE` treats CC #110 and CC #111 as the loop start and end.
  - `FINAL_FANTASY` treats CC #116 and CC #117 as the loop start and end.

  `Message.message_type` gives the kind of a message as a `MessageType`.
- `wavesynth.channel`: `Channel` holds the controller state of one MIDI channel.
  It covers bank and patch, modulation, volume, pan, expression, hold pedal,
  reverb and chorus sends, RPN data entry (pitch bend range, fine tune and
  coarse tune) and pitch bend. Percussion channels add 128 to the bank number.
- `wavesynth.bi_quad_filter`: `BiQuadFilter` is a resonant low-pass biquad that
  processes a block of samples in place. A cutoff at or above 0.499 × the sample
  rate switches the filter off.
- `wavesynth.chorus`: `Chorus` is a stereo chorus made from modulated delay lines.
  The left and right delays follow one sine, a quarter period apart.
- `wavesynth.lfo`: `Lfo` is a delayed triangle oscillator between -1 and 1. It
  advances by one block each time `process()` is called.
- `wavesynth.array_math`: `multiply_add` and `multiply_add_slope` add a scaled
  block into a destination block in place.
- `wavesynth.binary_reader` reads little- and big-endian integers, MIDI
  variable-length quantities, four-character codes, zero-padded strings and
  16-bit wave data from a binary stream. A short read raises `EOFError`.
- `wavesynth.generator` and `wavesynth.instrument_info` read the generator and
  instrument header records of a SoundFont chunk. `GeneratorType` lists the
  generator operators.
- `wavesynth.constants` defines the `EnvelopeStage` and `LoopMode` enums.
- `wavesynth.errors` defines `SynthesizerError`, `SoundFontError` and
  `MidiFileError`. Each one has a `kind` member from its matching `...ErrorKind`
  enum, and the message text comes from that kind.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Load a MIDI file:

```python
from wavesynth.errors import MidiFileError
from wavesynth.midifile import MidiFile, MidiFileLoopType

try:
    with open("song.mid", "rb") as stream:
        midi = MidiFile(stream, MidiFileLoopType.LOOP_POINT, 0)
except MidiFileError as error:
    print(f"could not load: {error}")
else:
    print(f"{len(midi.messages)} messages, length {midi.length:.2f} s")
```

Set and read channel state:

```python
from wavesynth.channel import Channel

channel = Channel(is_percussion_channel=False)
channel.set_volume_coarse(64)
channel.set_pitch_bend(0, 96)
print(channel.volume, channel.pitch_bend)
```

Filter a block of samples in place:

```python
from wavesynth.bi_quad_filter import BiQuadFilter

lowpass = BiQuadFilter(44100)
lowpass.set_low_pass_filter(1000.0, 1.0)
block = [1.0] + [0.0] * 63
lowpass.process(block)
```

## What this package does not do

This package does not contain a synthesizer. Nothing in it turns notes into
audio. It has no voices, envelopes, oscillators or reverb, and no sequencer that
plays a `MidiFile`. It also cannot load a complete SoundFont: it reads only
generator records and instrument headers. There is no command-line program.
`SynthesizerError` is defined, but nothing in the package raises it.