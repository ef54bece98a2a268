"""The chunks of a Standard MIDI File: header, track and unknown chunks."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, SupportsIndex

from .errors import InvalidDataError, invalid_data
from .format import Format, FormatType

__all__ = ["Timing", "HeaderChunk", "TrackChunkHeader", "UnknownChunk"]

_HEADER_LENGTH = 6


def _read_u32(reader: Any) -> int:
    return int.from_bytes(bytes(reader.read_exact(4)), "big")


@dataclass(frozen=True)
class Timing:
    """The ``<division>`` word of a header: how delta times are measured.

    When ``smpte`` is false the word holds ticks per quarter note; when true
    it holds a negative SMPTE format and ticks per frame.
    """

    data: bytes
    smpte: bool = False

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != 2:
            raise InvalidDataError("A timing word is two bytes long")
        object.__setattr__(self, "data", raw)
        object.__setattr__(self, "smpte", bool(self.smpte))

    @classmethod
    def new_ticks_per_quarter_note(cls, tpqn: SupportsIndex) -> Timing:
        """Timing in ticks per quarter note; the top bit of ``tpqn`` is disregarded."""
        value = operator.index(tpqn)
        if not 0 <= value <= 0xFFFF:
            raise InvalidDataError("Ticks per quarter note must fit in 16 bits")
        return cls(value.to_bytes(2, "big"), smpte=False)

    @classmethod
    def read(cls, reader: Any) -> Timing:
        """Read the two-byte division word from ``reader``."""
        raw = bytes(reader.read_exact(2))
        return cls(raw, smpte=bool(raw[0] >> 7))

    def ticks_per_quarter_note(self) -> int | None:
        """Ticks per quarter note, or None when the timing is SMPTE based."""
        if self.smpte:
            return None
        return int.from_bytes(self.data, "big") & 0x7FFF


@dataclass(frozen=True)
class HeaderChunk:
    """The ``MThd`` chunk: the file format, its track count and its timing."""

    format: Format
    timing: Timing

    def __post_init__(self) -> None:
        if not isinstance(self.format, Format):
            raise TypeError("format must be a Format")
        if not isinstance(self.timing, Timing):
            raise TypeError("timing must be a Timing")

    @classmethod
    def read(cls, reader: Any) -> HeaderChunk:
        """Read a header whose ``MThd`` type bytes have already been consumed."""
        length = _read_u32(reader)
        if length != _HEADER_LENGTH:
            raise invalid_data(reader, "Length of header chunk is not 6")

        format_bytes = bytes(reader.read_exact(2))
        num_tracks = bytes(reader.read_exact(2))

        match format_bytes[1]:
            case 0:
                if num_tracks[1] != 1:
                    raise invalid_data(
                        reader,
                        "Type 0 MIDI format (SingleMultiChannel) defines multiple tracks!",
                    )
                file_format = Format.single_multichannel()
            case 1:
                file_format = Format.simultaneous(num_tracks)
            case 2:
                file_format = Format.sequentially_independent(num_tracks)
            case other:
                raise invalid_data(reader, f"Invalid MIDI format {other}")

        return cls(file_format, Timing.read(reader))

    def __len__(self) -> int:
        return _HEADER_LENGTH

    def format_type(self) -> FormatType:
        """The format type named by the header."""
        return self.format.format_type()

    def num_tracks(self) -> int:
        """The number of tracks the header claims."""
        return self.format.num_tracks()


@dataclass(frozen=True)
class TrackChunkHeader:
    """The header of an ``MTrk`` chunk: the byte length of its body."""

    length: int

    def __post_init__(self) -> None:
        value = operator.index(self.length)
        if not 0 <= value <= 0xFFFFFFFF:
            raise InvalidDataError("A chunk length must fit in 32 bits")
        object.__setattr__(self, "length", value)

    @classmethod
    def read(cls, reader: Any) -> TrackChunkHeader:
        """Read the length of a track whose ``MTrk`` bytes have been consumed."""
        return cls(_read_u32(reader))

    def __len__(self) -> int:
        return self.length


@dataclass(frozen=True)
class UnknownChunk:
    """A chunk whose type is neither ``MThd`` nor ``MTrk``; its bytes are kept as is."""

    name: bytes
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", bytes(self.name))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def read(cls, name: Any, reader: Any) -> UnknownChunk:
        """Read the length and body of a chunk whose name has been consumed."""
        length = _read_u32(reader)
        data = bytes(reader.read_exact(length))
        return cls(bytes(name), data)

    def __len__(self) -> int:
        return len(self.data)