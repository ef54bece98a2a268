# midix

This package works with MIDI 1.0 data in pure Python. It provides:

- a pull-based reader for Standard MIDI Files (`.mid`). The reader yields
  header chunks, track chunks and unknown chunks, and every track event,
  including events that use running status;
- parsing and serialising of live MIDI messages: channel voice, system common
  and system real-time;
- small value types for keys, notes, octaves, velocities, dynamics, pitch
  bends, tempos, time signatures and key signatures.

It needs nothing outside the standard library.

## Installing

```
pip install .
```

## Reading a MIDI file

```python
from pathlib import Path

from midix.reader import Reader
from midix.events import FileEventKind

reader = Reader(Path("song.mid").read_bytes())

for event in reader:
    if event.kind is FileEventKind.HEADER:
        header = event.value
        print(header.format_type(), header.num_tracks(),
              header.timing.ticks_per_quarter_note())
    elif event.kind is FileEventKind.TRACK_EVENT:
        print(event.value.delta_time, event.value.event)
```

Iterating a `Reader` stops at the end of the file. It does not yield the
end-of-file event.

For finer control, call `Reader.read_event()` yourself:

- It returns a `FileEvent` each time. Its `kind` is a `FileEventKind`:
  `HEADER`, `TRACK`, `UNKNOWN`, `TRACK_EVENT` or `EOF`.
- Its `value` is the matching object: a `HeaderChunk`, a `TrackChunkHeader`,
  an `UnknownChunk` or a `TrackEvent`. For `EOF` it is `None`.
- After the last chunk it returns an end-of-file event. That event compares
  equal to `FileEvent.eof()`.
- On malformed data it raises a `midix.errors.MidiError` subclass.
  `Reader.buffer_position()` then tells you how far the reader got.

A `TrackEvent` has a `delta_time` and an `event`. The `event` is one of:

- a `midix.voice.ChannelVoiceMessage`;
- a `midix.system.SystemExclusiveMessage`, whose payload has the closing
  `F7` removed;
- a `midix.meta.MetaMessage`.

A `MetaMessage` has a `kind` (a `MetaType`), a `value` and a `type_byte`. The
`value` depends on the kind:

| Kind | Value |
|------|-------|
| text kinds (`TEXT`, `TRACK_NAME`, `LYRIC`, ...) | a `BytesText` |
| `TEMPO` | a `Tempo`, see `micros_per_quarter_note()` |
| `TIME_SIGNATURE` | a `TimeSignature` |
| `KEY_SIGNATURE` | a `KeySignature` |
| `MIDI_CHANNEL` | a `Channel` |
| `MIDI_PORT` | an `int` |
| `END_OF_TRACK` | `None` |
| every other kind | the raw payload bytes |

`Timing.ticks_per_quarter_note()` returns `None` when the header uses SMPTE
timing.

## Parsing live messages

```python
from midix.live import LiveEvent

event = LiveEvent.from_bytes(bytes([0x91, 72, 33]))
voice = event.channel_voice()
print(voice.channel(), voice.key(), voice.velocity().dynamic())
assert event.to_bytes() == bytes([0x91, 72, 33])
```

`ChannelVoiceMessage.channel()` counts from 1, so a status of `0x91` is
channel 2.

A `LiveEvent` wraps one of three message types:

- a `ChannelVoiceMessage`;
- a `midix.system.SystemCommonMessage`. Its subclasses are `SysExCommon`,
  `SongPositionCommon`, `SongSelect`, `TuneRequest` and `UndefinedCommon`;
- a `midix.system.SystemRealTimeMessage`. Its `kind()` returns a
  `RealTimeKind`.

Decoding a real-time message needs at least one byte after the status byte.
Without one, `InvalidDataError` is raised.

## Building messages

```python
from midix.primitives import Channel
from midix.voice import ChannelVoiceMessage, NoteOn, PitchBendChange
from midix.pitch_bend import PitchBend

msg = ChannelVoiceMessage.for_channel(Channel(0), NoteOn(60, 127))
assert msg.to_bytes() == bytes([0x90, 60, 127])

bend = ChannelVoiceMessage.for_channel(Channel(0), PitchBendChange(PitchBend.from_float(0.5)))
```

The voice events are:

- `NoteOff`
- `NoteOn`
- `Aftertouch`
- `ControlChange`
- `ProgramChange`
- `ChannelPressureAfterTouch`
- `PitchBendChange`

## Keys, notes and octaves

```python
from midix.key import Key, Note, Octave

key = Key(63)
assert key.note() is Note.D_SHARP
assert key.octave() == Octave(4)
assert Note.F_SHARP.with_octave(Octave(4)).note() is Note.F_SHARP
```

`Octave` clamps its value into the range -1 to 9.

`Velocity.dynamic()` maps a velocity to a `Dynamic`, from `OFF` up to
`FORTISSISSIMO`.

## Errors

Every parsing failure raises a subclass of `midix.errors.MidiError`:

- `InvalidDataError` for malformed bytes or out-of-range values;
- `InvalidInputError` when a message is missing data or cannot be built;
- `UnexpectedEofError` when the data ends in the middle of a chunk or event.

## What it does not do

- It does not write MIDI files. It can only read them.
- It does not talk to MIDI devices or ports. Live messages are decoded from
  bytes and encoded to bytes, and sending or receiving them is up to you.
- SMPTE offset meta messages are kept as raw bytes and are not decoded.

## Running the tests

```
pip install .[test]
pytest
```