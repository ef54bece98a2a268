"""System common, system exclusive and system real-time messages."""

from __future__ import annotations

import operator
from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar, Union

from .errors import InvalidDataError, InvalidInputError
from .primitives import FromLiveEventBytes, SongPositionPointer, StatusByte, check_u7

__all__ = [
    "SystemExclusiveMessage",
    "SystemCommonMessage",
    "SysExCommon",
    "UndefinedCommon",
    "SongPositionCommon",
    "SongSelect",
    "TuneRequest",
    "MtcQuarterFrameMessage",
    "RealTimeKind",
    "SystemRealTimeMessage",
    "SystemMessage",
]

_SYSEX_START = 0xF0
_SYSEX_END = 0xF7


@dataclass(frozen=True)
class SystemExclusiveMessage:
    """The payload of a system exclusive message, without the F0/F7 framing."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def to_live_bytes(self) -> bytes:
        """The message as sent on a live stream: F0, the payload, then F7."""
        return bytes([_SYSEX_START]) + self.data + bytes([_SYSEX_END])


class SystemCommonMessage(FromLiveEventBytes):
    """A message for every receiver, regardless of channel."""

    MIN_STATUS_BYTE: ClassVar[int] = 0xF0
    MAX_STATUS_BYTE: ClassVar[int] = 0xF7

    @classmethod
    def from_status_and_data(cls, status: int, data: Any) -> SystemCommonMessage:
        """Decode a system common message from its status and data bytes."""
        status = operator.index(status)
        data = bytes(data)
        if status == 0xF0:
            payload = bytearray()
            for byte in data:
                if byte == _SYSEX_END:
                    break
                payload.append(byte)
            return SysExCommon(SystemExclusiveMessage(bytes(payload)))
        if status == 0xF2 and len(data) == 2:
            return SongPositionCommon(SongPositionPointer(data[0], data[1]))
        if status == 0xF3 and len(data) == 1:
            return SongSelect(data[0])
        if status == 0xF6:
            return TuneRequest()
        if 0xF1 <= status <= 0xF5 and not data:
            return UndefinedCommon(StatusByte(status))
        # Includes the F7 end-of-exclusive marker on its own.
        raise InvalidInputError("Could not read System Common Message")

    @abstractmethod
    def status(self) -> int:
        """The status byte of the message."""

    def to_bytes(self) -> bytes:
        """The message as bytes for a live MIDI stream."""
        return bytes([self.status()])


@dataclass(frozen=True)
class SysExCommon(SystemCommonMessage):
    """A system exclusive message carried as a system common message."""

    message: SystemExclusiveMessage

    def __post_init__(self) -> None:
        if not isinstance(self.message, SystemExclusiveMessage):
            object.__setattr__(self, "message", SystemExclusiveMessage(self.message))

    def status(self) -> int:
        return _SYSEX_START

    def to_bytes(self) -> bytes:
        return self.message.to_live_bytes()


@dataclass(frozen=True)
class UndefinedCommon(SystemCommonMessage):
    """A system common status byte with no defined meaning."""

    byte: StatusByte

    def __post_init__(self) -> None:
        if not isinstance(self.byte, StatusByte):
            object.__setattr__(self, "byte", StatusByte(self.byte))

    def status(self) -> int:
        return self.byte.byte


@dataclass(frozen=True)
class SongPositionCommon(SystemCommonMessage):
    """The number of MIDI beats since the start of the sequence."""

    pointer: SongPositionPointer

    def status(self) -> int:
        return 0xF2

    def to_bytes(self) -> bytes:
        return bytes([self.status(), self.pointer.lsb, self.pointer.msb])


@dataclass(frozen=True)
class SongSelect(SystemCommonMessage):
    """Select a song by its seven-bit index."""

    song: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "song", check_u7(self.song))

    def status(self) -> int:
        return 0xF3

    def to_bytes(self) -> bytes:
        return bytes([self.status(), self.song])


@dataclass(frozen=True)
class TuneRequest(SystemCommonMessage):
    """Ask the device to tune itself."""

    def status(self) -> int:
        return 0xF6


class MtcQuarterFrameMessage(IntEnum):
    """The part of the time code a MIDI Time Code quarter frame carries."""

    FRAMES_LOW = 0
    FRAMES_HIGH = 1
    SECONDS_LOW = 2
    SECONDS_HIGH = 3
    MINUTES_LOW = 4
    MINUTES_HIGH = 5
    HOURS_LOW = 6
    HOURS_HIGH = 7

    @classmethod
    def from_code(cls, code: int) -> MtcQuarterFrameMessage:
        """The message for ``code``; raises InvalidDataError above 7."""
        try:
            return cls(operator.index(code))
        except ValueError:
            raise InvalidDataError("Invalid MtcQuarterFrameMessage") from None

    def as_byte(self) -> int:
        """The message code as a byte."""
        return int(self)


class RealTimeKind(Enum):
    """The kinds of system real-time message; the value is the status byte."""

    TIMING_CLOCK = 0xF8
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    ACTIVE_SENSING = 0xFE
    RESET = 0xFF
    UNDEFINED = None


@dataclass(frozen=True)
class SystemRealTimeMessage(FromLiveEventBytes):
    """A one-byte synchronisation message of a live stream."""

    MIN_STATUS_BYTE: ClassVar[int] = 0xF8
    MAX_STATUS_BYTE: ClassVar[int] = 0xFF

    byte: int

    def __post_init__(self) -> None:
        value = operator.index(self.byte)
        if not 0 <= value <= 0xFF:
            raise InvalidDataError("A real-time message is a single byte")
        object.__setattr__(self, "byte", value)

    @classmethod
    def from_byte(cls, rep: int) -> SystemRealTimeMessage:
        """Interpret a byte as a real-time message; unknown bytes are undefined."""
        return cls(rep)

    @classmethod
    def from_status_and_data(cls, status: int, data: Any) -> SystemRealTimeMessage:
        """Decode from a status byte and what follows it.

        Raises InvalidDataError when no bytes follow the status.
        """
        if not bytes(data):
            raise InvalidDataError("System real time messages do not have data bytes")
        return cls.from_byte(status)

    def kind(self) -> RealTimeKind:
        """Which real-time message this is."""
        try:
            return RealTimeKind(self.byte)
        except ValueError:
            return RealTimeKind.UNDEFINED

    def to_bytes(self) -> bytes:
        """The single byte of the message."""
        return bytes([self.byte])


SystemMessage = Union[SystemCommonMessage, SystemRealTimeMessage, SystemExclusiveMessage]