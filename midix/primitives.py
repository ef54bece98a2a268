"""Byte-level building blocks of MIDI messages."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, BinaryIO, ClassVar, Sequence, SupportsIndex

from .errors import InvalidDataError, InvalidInputError

__all__ = [
    "check_u7",
    "check_u4",
    "get_byte",
    "StatusByte",
    "DataByte",
    "MidiMessageBytes",
    "Channel",
    "Controller",
    "Program",
    "SongPositionPointer",
    "FromLiveEventBytes",
]


def check_u7(byte: SupportsIndex) -> int:
    """Return ``byte`` if it fits in seven bits, else raise InvalidDataError."""
    value = operator.index(byte)
    if not 0 <= value <= 0x7F:
        raise InvalidDataError("Leading bit found")
    return value


def check_u4(byte: SupportsIndex) -> int:
    """Return ``byte`` if it fits in four bits, else raise InvalidDataError."""
    value = operator.index(byte)
    if not 0 <= value <= 0x0F:
        raise InvalidDataError("Leading bit found")
    return value


def get_byte(data: Sequence[int], index: int) -> int:
    """Return ``data[index]``, raising InvalidInputError if it is missing."""
    if 0 <= index < len(data):
        return data[index]
    raise InvalidInputError("Data not accessible for message!")


@dataclass(frozen=True)
class StatusByte:
    """A status byte, in the range 0x80 to 0xFF."""

    byte: int

    def __post_init__(self) -> None:
        value = operator.index(self.byte)
        if not 0x80 <= value <= 0xFF:
            raise InvalidDataError("Expected Status byte")
        object.__setattr__(self, "byte", value)

    def __index__(self) -> int:
        return self.byte

    def __str__(self) -> str:
        return f"{self.byte:02X}"

    def __repr__(self) -> str:
        return f"StatusByte(0x{self.byte:X})"


@dataclass(frozen=True)
class DataByte:
    """A data byte, in the range 0x00 to 0x7F."""

    byte: int

    def __post_init__(self) -> None:
        value = operator.index(self.byte)
        if not 0 <= value <= 0x7F:
            raise InvalidDataError("Expected Data byte")
        object.__setattr__(self, "byte", value)

    def __index__(self) -> int:
        return self.byte

    def __str__(self) -> str:
        return f"{self.byte:02X}"


@dataclass(frozen=True)
class MidiMessageBytes:
    """A status byte followed by zero, one or two data bytes."""

    status: StatusByte
    data: tuple[DataByte, ...] = ()

    def __post_init__(self) -> None:
        status = self.status
        if not isinstance(status, StatusByte):
            status = StatusByte(status)
        data = tuple(d if isinstance(d, DataByte) else DataByte(d) for d in self.data)
        if len(data) > 2:
            raise InvalidInputError("A MIDI message has at most two data bytes")
        object.__setattr__(self, "status", status)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_status(cls, status: Any) -> MidiMessageBytes:
        """Build a message made of a single status byte."""
        return cls(status)

    def __bytes__(self) -> bytes:
        return bytes([self.status.byte, *(d.byte for d in self.data)])

    def write(self, writer: BinaryIO) -> None:
        """Write the message bytes into ``writer``."""
        writer.write(bytes(self))


@dataclass(frozen=True)
class Channel:
    """A MIDI channel number; the constructor accepts 0 to 15."""

    byte: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "byte", check_u4(self.byte))

    @classmethod
    def _unchecked(cls, value: int) -> Channel:
        channel = object.__new__(cls)
        object.__setattr__(channel, "byte", value)
        return channel

    @classmethod
    def from_status(cls, status: int) -> Channel:
        """Take the channel from the low nibble of a channel voice status byte.

        The result is one-based, so it ranges from 1 to 16.
        """
        return cls._unchecked((operator.index(status) & 0x0F) + 1)

    def __str__(self) -> str:
        return str(self.byte)


@dataclass(frozen=True)
class Controller:
    """Identifies a controller; a seven-bit value."""

    byte: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "byte", check_u7(self.byte))

    def __str__(self) -> str:
        return f"{self.byte:02X}"


@dataclass(frozen=True)
class Program:
    """Identifies an instrument program; a seven-bit value."""

    byte: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "byte", check_u7(self.byte))

    def __str__(self) -> str:
        return f"{self.byte:02X}"


@dataclass(frozen=True)
class SongPositionPointer:
    """The 14-bit count of MIDI beats since the start of the song."""

    lsb: int
    msb: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "lsb", check_u7(self.lsb))
        object.__setattr__(self, "msb", check_u7(self.msb))


class FromLiveEventBytes(ABC):
    """Something that can be decoded from the bytes of a live MIDI stream."""

    MIN_STATUS_BYTE: ClassVar[int] = 0x80
    MAX_STATUS_BYTE: ClassVar[int] = 0xFF

    @classmethod
    def from_bytes(cls, data: bytes | Sequence[int]) -> Any:
        """Decode a status byte and its data bytes."""
        raw = bytes(data)
        if not raw:
            raise InvalidInputError("Invalid live event (no byte data!)")
        status = raw[0]
        if not cls.MIN_STATUS_BYTE <= status <= cls.MAX_STATUS_BYTE:
            raise InvalidDataError("Invalid status message for type!")
        return cls.from_status_and_data(status, raw[1:])

    @classmethod
    @abstractmethod
    def from_status_and_data(cls, status: int, data: bytes) -> Any:
        """Decode from a status byte and the data bytes that follow it."""