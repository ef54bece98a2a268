import pytest

from midix.errors import InvalidDataError, InvalidInputError
from midix.key import Key
from midix.live import LiveEvent
from midix.primitives import Channel
from midix.system import (
    RealTimeKind,
    SysExCommon,
    SystemExclusiveMessage,
    SystemRealTimeMessage,
    TuneRequest,
)
from midix.velocity import Velocity
from midix.voice import ChannelVoiceMessage, NoteOn


def test_parse_note_on():
    message = bytes([0b1001_0001, 0b0100_1000, 0b0010_0001])
    parsed = LiveEvent.from_bytes(message)
    expected = LiveEvent(
        ChannelVoiceMessage.for_channel(
            Channel(1), NoteOn(key=Key(72), velocity=Velocity(33))
        )
    )
    assert parsed == expected


def test_note_on_round_trip():
    raw = bytes([0x90, 60, 127])
    event = LiveEvent.from_bytes(raw)
    assert event.to_bytes() == raw
    voice = event.channel_voice()
    assert voice.is_note_on()
    assert voice.key() == Key(60)


def test_sysex_round_trip():
    raw = bytes([0xF0, 0x01, 0x02, 0xF7])
    event = LiveEvent.from_bytes(raw)
    assert event.message == SysExCommon(SystemExclusiveMessage(b"\x01\x02"))
    assert event.to_bytes() == raw
    assert event.channel_voice() is None


def test_tune_request():
    event = LiveEvent.from_bytes(b"\xf6")
    assert event.message == TuneRequest()
    assert event.to_bytes() == b"\xf6"


def test_realtime_event():
    event = LiveEvent.from_status_and_data(0xFC, b"\x00")
    assert event.message.kind() is RealTimeKind.STOP
    assert event.channel_voice() is None
    assert event.to_bytes() == b"\xfc"


def test_realtime_to_bytes_from_constructed_event():
    event = LiveEvent(SystemRealTimeMessage(0xF8))
    assert event.to_bytes() == b"\xf8"


def test_empty_bytes_raise():
    with pytest.raises(InvalidInputError):
        LiveEvent.from_bytes(b"")


def test_data_byte_as_status_raises():
    with pytest.raises(InvalidDataError):
        LiveEvent.from_bytes(b"\x40\x01")


def test_from_status_and_data_rejects_non_status():
    with pytest.raises(InvalidDataError):
        LiveEvent.from_status_and_data(0x70, b"")


def test_missing_data_raises():
    with pytest.raises(InvalidInputError):
        LiveEvent.from_bytes(b"\x90\x3c")


def test_wrong_message_type_rejected():
    with pytest.raises(TypeError):
        LiveEvent(SystemExclusiveMessage(b"\x01"))