"""Channel voice and channel mode messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from .errors import InvalidDataError, invalid_data
from .key import Key
from .pitch_bend import PitchBend
from .primitives import (
    Channel,
    Controller,
    DataByte,
    FromLiveEventBytes,
    Program,
    StatusByte,
    get_byte,
)
from .velocity import Velocity

__all__ = [
    "VoiceEvent",
    "NoteOff",
    "NoteOn",
    "Aftertouch",
    "ControlChange",
    "ProgramChange",
    "ChannelPressureAfterTouch",
    "PitchBendChange",
    "ChannelVoiceMessage",
    "ChannelModeMessage",
]


def _coerce(value: Any, cls: type) -> Any:
    return value if isinstance(value, cls) else cls(value)


class VoiceEvent(ABC):
    """The message type and data of a channel voice message."""

    STATUS_NIBBLE: ClassVar[int]

    def is_note_on(self) -> bool:
        """True for a note-on with a non-zero velocity."""
        return False

    def is_note_off(self) -> bool:
        """True for a note-off, or a note-on with a velocity of zero."""
        return False

    @abstractmethod
    def to_raw(self) -> bytes:
        """The data bytes of the event, without the status byte."""

    def status_nibble(self) -> int:
        """The upper four bits of the status byte for this event."""
        return self.STATUS_NIBBLE


@dataclass(frozen=True)
class NoteOff(VoiceEvent):
    """Stop playing a note."""

    STATUS_NIBBLE: ClassVar[int] = 0x8

    key: Key
    velocity: Velocity

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", _coerce(self.key, Key))
        object.__setattr__(self, "velocity", _coerce(self.velocity, Velocity))

    def is_note_off(self) -> bool:
        return True

    def to_raw(self) -> bytes:
        return bytes([self.key.byte, self.velocity.byte])


@dataclass(frozen=True)
class NoteOn(VoiceEvent):
    """Start playing a note; a velocity of zero means note off."""

    STATUS_NIBBLE: ClassVar[int] = 0x9

    key: Key
    velocity: Velocity

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", _coerce(self.key, Key))
        object.__setattr__(self, "velocity", _coerce(self.velocity, Velocity))

    def is_note_on(self) -> bool:
        return self.velocity.byte != 0

    def is_note_off(self) -> bool:
        return self.velocity.byte == 0

    def to_raw(self) -> bytes:
        return bytes([self.key.byte, self.velocity.byte])


@dataclass(frozen=True)
class Aftertouch(VoiceEvent):
    """Change the velocity of a note after it has been played."""

    STATUS_NIBBLE: ClassVar[int] = 0xA

    key: Key
    velocity: Velocity

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", _coerce(self.key, Key))
        object.__setattr__(self, "velocity", _coerce(self.velocity, Velocity))

    def to_raw(self) -> bytes:
        return bytes([self.key.byte, self.velocity.byte])


@dataclass(frozen=True)
class ControlChange(VoiceEvent):
    """Set the value of a controller."""

    STATUS_NIBBLE: ClassVar[int] = 0xB

    controller: Controller
    value: DataByte

    def __post_init__(self) -> None:
        object.__setattr__(self, "controller", _coerce(self.controller, Controller))
        object.__setattr__(self, "value", _coerce(self.value, DataByte))

    def to_raw(self) -> bytes:
        return bytes([self.controller.byte, self.value.byte])


@dataclass(frozen=True)
class ProgramChange(VoiceEvent):
    """Change the program (instrument) of a channel."""

    STATUS_NIBBLE: ClassVar[int] = 0xC

    program: Program

    def __post_init__(self) -> None:
        object.__setattr__(self, "program", _coerce(self.program, Program))

    def to_raw(self) -> bytes:
        return bytes([self.program.byte])


@dataclass(frozen=True)
class ChannelPressureAfterTouch(VoiceEvent):
    """Change the velocity of every note playing on a channel."""

    STATUS_NIBBLE: ClassVar[int] = 0xD

    velocity: Velocity

    def __post_init__(self) -> None:
        object.__setattr__(self, "velocity", _coerce(self.velocity, Velocity))

    def to_raw(self) -> bytes:
        return bytes([self.velocity.byte])


@dataclass(frozen=True)
class PitchBendChange(VoiceEvent):
    """Set the pitch bend of a whole channel."""

    STATUS_NIBBLE: ClassVar[int] = 0xE

    bend: PitchBend

    def __post_init__(self) -> None:
        if not isinstance(self.bend, PitchBend):
            object.__setattr__(self, "bend", PitchBend.from_bits(self.bend))

    def to_raw(self) -> bytes:
        return bytes([self.bend.lsb, self.bend.msb])


@dataclass(frozen=True)
class ChannelVoiceMessage(FromLiveEventBytes):
    """A voice event together with the status byte that carries its channel."""

    MIN_STATUS_BYTE: ClassVar[int] = 0x80
    MAX_STATUS_BYTE: ClassVar[int] = 0xEF

    status: StatusByte
    event: VoiceEvent

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", _coerce(self.status, StatusByte))

    @classmethod
    def for_channel(cls, channel: Channel, event: VoiceEvent) -> ChannelVoiceMessage:
        """Build a message from a channel and an event."""
        status = channel.byte | (event.status_nibble() << 4)
        return cls(StatusByte(status), event)

    @classmethod
    def read(cls, status: StatusByte | int, reader: Any) -> ChannelVoiceMessage:
        """Read the data bytes for ``status`` from a file reader."""
        status = _coerce(status, StatusByte)
        nibble = status.byte >> 4
        event: VoiceEvent
        match nibble:
            case 0x8:
                event = NoteOff(Key(reader.read_next()), Velocity(reader.read_next()))
            case 0x9:
                event = NoteOn(Key(reader.read_next()), Velocity(reader.read_next()))
            case 0xA:
                event = Aftertouch(Key(reader.read_next()), Velocity(reader.read_next()))
            case 0xB:
                event = ControlChange(
                    Controller(reader.read_next()), DataByte(reader.read_next())
                )
            case 0xC:
                event = ProgramChange(Program(reader.read_next()))
            case 0xD:
                event = ChannelPressureAfterTouch(Velocity(reader.read_next()))
            case 0xE:
                # Pitch bend data is little-endian, unlike the rest of a file.
                lsb, msb = reader.read_exact(2)
                event = PitchBendChange(PitchBend._unchecked(lsb, msb))
            case _:
                raise invalid_data(reader, f"Invalid status byte for message: {nibble}")
        return cls(status, event)

    @classmethod
    def from_status_and_data(cls, status: int, data: bytes) -> ChannelVoiceMessage:
        """Decode from a live status byte and its data bytes."""
        event: VoiceEvent
        match status >> 4:
            case 0x8:
                event = NoteOff(Key(get_byte(data, 0)), Velocity(get_byte(data, 1)))
            case 0x9:
                event = NoteOn(Key(get_byte(data, 0)), Velocity(get_byte(data, 1)))
            case 0xA:
                event = Aftertouch(Key(get_byte(data, 0)), Velocity(get_byte(data, 1)))
            case 0xB:
                event = ControlChange(
                    Controller(get_byte(data, 0)), DataByte(get_byte(data, 1))
                )
            case 0xC:
                event = ProgramChange(Program(get_byte(data, 0)))
            case 0xD:
                event = ChannelPressureAfterTouch(Velocity(get_byte(data, 0)))
            case 0xE:
                event = PitchBendChange(PitchBend(get_byte(data, 0), get_byte(data, 1)))
            case _:
                raise InvalidDataError("Status byte is not a channel voice message")
        return cls(StatusByte(status), event)

    def channel(self) -> Channel:
        """The channel of the message, from 1 to 16."""
        return Channel.from_status(self.status.byte)

    def is_note_on(self) -> bool:
        """True for a note-on with a non-zero velocity."""
        return self.event.is_note_on()

    def is_note_off(self) -> bool:
        """True for a note-off, or a note-on with a velocity of zero."""
        return self.event.is_note_off()

    def key(self) -> Key | None:
        """The key of the event, if it has one."""
        match self.event:
            case NoteOn(key=key) | NoteOff(key=key) | Aftertouch(key=key):
                return key
        return None

    def velocity(self) -> Velocity | None:
        """The velocity of the event, if it has one."""
        match self.event:
            case (
                NoteOn(velocity=velocity)
                | NoteOff(velocity=velocity)
                | Aftertouch(velocity=velocity)
                | ChannelPressureAfterTouch(velocity=velocity)
            ):
                return velocity
        return None

    def to_bytes(self) -> bytes:
        """The raw MIDI packet for this message."""
        return bytes([self.status.byte]) + self.event.to_raw()


@dataclass(frozen=True)
class ChannelModeMessage:
    """A control change whose controller number is reserved for a channel mode."""

    controller: Controller
    value: DataByte

    def __post_init__(self) -> None:
        object.__setattr__(self, "controller", _coerce(self.controller, Controller))
        object.__setattr__(self, "value", _coerce(self.value, DataByte))