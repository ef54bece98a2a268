"""Meta messages of MIDI file tracks and the values they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidDataError, invalid_data
from .primitives import Channel

__all__ = [
    "Tempo",
    "TimeSignature",
    "KeySignature",
    "BytesText",
    "MetaType",
    "MetaMessage",
]


def _fixed(data: Any, size: int, what: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise InvalidDataError(f"{what} needs {size} bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class Tempo:
    """Microseconds per MIDI quarter note, stored in three bytes (FF 51 03 tttttt)."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed(self.data, 3, "A tempo"))

    def micros_per_quarter_note(self) -> int:
        """The number of microseconds per quarter note."""
        return int.from_bytes(self.data, "big")


@dataclass(frozen=True)
class TimeSignature:
    """A time signature (FF 58 04 nn dd cc bb)."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed(self.data, 4, "A time signature"))

    def num(self) -> int:
        """The numerator."""
        return self.data[0]

    def den(self) -> int:
        """The denominator as a power of two: 2 is a quarter note, 3 an eighth."""
        return self.data[1]

    def clocks_per_click(self) -> int:
        """MIDI clocks in a metronome click."""
        return self.data[2]

    def notated_32nds_per_24_clocks(self) -> int:
        """Notated 32nd notes in a MIDI quarter note (24 clocks)."""
        return self.data[3]


@dataclass(frozen=True)
class KeySignature:
    """A key signature (FF 59 02 sf mi)."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed(self.data, 2, "A key signature"))

    def sharp_flat_count(self) -> int:
        """Sharps when positive, flats when negative, 0 for C."""
        return int.from_bytes(self.data[:1], "big", signed=True)

    def num_sharps(self) -> int:
        """The number of sharps."""
        return max(self.sharp_flat_count(), 0)

    def num_flats(self) -> int:
        """The number of flats."""
        return max(-self.sharp_flat_count(), 0)

    def minor_key(self) -> bool:
        """True if the key is minor."""
        return self.data[1] == 1


@dataclass(frozen=True)
class BytesText:
    """UTF-8 text carried by a meta message."""

    text: str

    @classmethod
    def from_bytes(cls, data: Any) -> BytesText:
        """Decode UTF-8 bytes; raises InvalidDataError if they are not valid."""
        try:
            return cls(bytes(data).decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise InvalidDataError(f"Invalid string: {exc}") from None

    def __str__(self) -> str:
        return self.text


class MetaType(Enum):
    """The kinds of meta message; the value is the type byte."""

    TRACK_NUMBER = 0x00
    TEXT = 0x01
    COPYRIGHT = 0x02
    TRACK_NAME = 0x03
    INSTRUMENT_NAME = 0x04
    LYRIC = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07
    PROGRAM_NAME = 0x08
    DEVICE_NAME = 0x09
    MIDI_CHANNEL = 0x20
    MIDI_PORT = 0x21
    END_OF_TRACK = 0x2F
    TEMPO = 0x51
    SMPTE_OFFSET = 0x54
    TIME_SIGNATURE = 0x58
    KEY_SIGNATURE = 0x59
    SEQUENCER_SPECIFIC = 0x7F
    UNKNOWN = None


_TEXT_TYPES = frozenset(
    {
        MetaType.TEXT,
        MetaType.COPYRIGHT,
        MetaType.TRACK_NAME,
        MetaType.INSTRUMENT_NAME,
        MetaType.LYRIC,
        MetaType.MARKER,
        MetaType.PROGRAM_NAME,
        MetaType.DEVICE_NAME,
    }
)

_RAW_TYPES = frozenset(
    {
        MetaType.TRACK_NUMBER,
        MetaType.CUE_POINT,
        MetaType.SMPTE_OFFSET,
        MetaType.SEQUENCER_SPECIFIC,
    }
)


@dataclass(frozen=True)
class MetaMessage:
    """A meta message of a track: its kind, its decoded value and its type byte.

    The value is a BytesText for text kinds, a Tempo, TimeSignature,
    KeySignature or Channel where those apply, an int port for MIDI_PORT,
    None for END_OF_TRACK and the raw payload bytes otherwise.
    """

    kind: MetaType
    value: Any = None
    type_byte: int | None = None

    def __post_init__(self) -> None:
        if self.type_byte is None:
            if self.kind is MetaType.UNKNOWN:
                raise InvalidDataError("An unknown meta message needs its type byte")
            object.__setattr__(self, "type_byte", self.kind.value)

    @classmethod
    def read(cls, reader: Any) -> MetaMessage:
        """Read a meta message whose FF marker has already been consumed."""
        type_byte = reader.read_next()
        data = bytes(reader.read_varlen_slice())
        try:
            kind = MetaType(type_byte)
        except ValueError:
            kind = MetaType.UNKNOWN

        if kind in _TEXT_TYPES:
            return cls(kind, BytesText.from_bytes(data), type_byte)
        if kind in _RAW_TYPES:
            return cls(kind, data, type_byte)

        match kind:
            case MetaType.MIDI_CHANNEL:
                if len(data) != 1:
                    raise invalid_data(
                        reader,
                        "Varlen is invalid for this channel "
                        f"(should be 1, is {len(data)}",
                    )
                return cls(kind, Channel(data[0]), type_byte)
            case MetaType.MIDI_PORT:
                if len(data) != 1:
                    raise invalid_data(
                        reader,
                        f"Varlen is invalid for port (should be 1, is {len(data)}",
                    )
                return cls(kind, data[0], type_byte)
            case MetaType.END_OF_TRACK:
                return cls(kind, None, type_byte)
            case MetaType.TEMPO:
                if len(data) != 3:
                    raise invalid_data(
                        reader,
                        f"Varlen is invalid for tempo (should be 3, is {len(data)}",
                    )
                return cls(kind, Tempo(data), type_byte)
            case MetaType.TIME_SIGNATURE if len(data) >= 4:
                if len(data) != 4:
                    raise invalid_data(
                        reader,
                        "Varlen is invalid for time signature "
                        f"(should be 4, is {len(data)}",
                    )
                return cls(kind, TimeSignature(data), type_byte)
            case MetaType.KEY_SIGNATURE:
                if len(data) != 2:
                    raise invalid_data(
                        reader,
                        "Varlen is invalid for key signature "
                        f"(should be 2, is {len(data)}",
                    )
                return cls(kind, KeySignature(data), type_byte)
        return cls(MetaType.UNKNOWN, data, type_byte)