import pytest

from midix.chunk import HeaderChunk, Timing, TrackChunkHeader, UnknownChunk
from midix.events import FileEvent, FileEventKind, TrackEvent
from midix.format import Format
from midix.key import Key
from midix.meta import MetaMessage, MetaType
from midix.primitives import Channel
from midix.system import SystemExclusiveMessage
from midix.velocity import Velocity
from midix.voice import ChannelVoiceMessage, NoteOn


def _note_on():
    return ChannelVoiceMessage.for_channel(Channel(1), NoteOn(Key(72), Velocity(33)))


def test_eof_events_compare_equal():
    first = FileEvent.eof()
    assert first == FileEvent.eof()
    assert first.kind is FileEventKind.EOF
    assert first.value is None


def test_header_event_holds_chunk():
    chunk = HeaderChunk(Format.single_multichannel(), Timing.new_ticks_per_quarter_note(96))
    event = FileEvent.header(chunk)
    assert event.kind is FileEventKind.HEADER
    assert event.value is chunk
    assert event != FileEvent.eof()


def test_track_event_holds_chunk_header():
    event = FileEvent.track(TrackChunkHeader(59))
    assert event.kind is FileEventKind.TRACK
    assert len(event.value) == 59


def test_unknown_event_holds_chunk():
    chunk = UnknownChunk(b"abcd", b"\x01\x02")
    event = FileEvent.unknown(chunk)
    assert event.kind is FileEventKind.UNKNOWN
    assert event.value.name == b"abcd"


def test_track_message_event_round_trip():
    message = _note_on()
    track_event = TrackEvent(0, message)
    event = FileEvent.track_event(track_event)
    assert event.kind is FileEventKind.TRACK_EVENT
    assert event.value.delta_time == 0
    assert event.value.event.to_bytes() == bytes([0b1001_0001, 72, 33])


def test_track_events_with_equal_parts_are_equal():
    assert TrackEvent(5, _note_on()) == TrackEvent(5, _note_on())
    assert TrackEvent(5, _note_on()) != TrackEvent(6, _note_on())


def test_track_event_accepts_meta_and_sysex():
    meta = TrackEvent(0, MetaMessage(MetaType.END_OF_TRACK))
    sysex = TrackEvent(3, SystemExclusiveMessage(b"\x7e\x01"))
    assert meta.event.kind is MetaType.END_OF_TRACK
    assert sysex.event.to_live_bytes() == b"\xf0\x7e\x01\xf7"


def test_track_event_rejects_negative_delta():
    with pytest.raises(ValueError):
        TrackEvent(-1, _note_on())


def test_track_event_rejects_other_messages():
    with pytest.raises(TypeError):
        TrackEvent(0, "note")


def test_file_event_checks_payload_type():
    with pytest.raises(TypeError):
        FileEvent.header(TrackChunkHeader(1))


def test_eof_cannot_hold_a_value():
    with pytest.raises(TypeError):
        FileEvent(FileEventKind.EOF, TrackChunkHeader(1))


def test_track_event_repr_shows_delta_in_hex():
    text = repr(TrackEvent(0x1F, MetaMessage(MetaType.END_OF_TRACK)))
    assert text.startswith("Track Event { delta_time: 0x1F")