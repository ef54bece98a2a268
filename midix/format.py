"""File formats and chunk types of a Standard MIDI File."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from .errors import InvalidDataError

__all__ = ["FormatType", "Format", "MidiChunkType"]


class FormatType(IntEnum):
    """The type of a MIDI file; the value is the header's format word."""

    SINGLE_MULTI_CHANNEL = 0
    SIMULTANEOUS = 1
    SEQUENTIALLY_INDEPENDENT = 2


def _track_count(num_tracks: Any) -> int:
    if isinstance(num_tracks, (bytes, bytearray, memoryview)):
        raw = bytes(num_tracks)
        if len(raw) != 2:
            raise InvalidDataError("A track count is two bytes long")
        return int.from_bytes(raw, "big")
    count = operator.index(num_tracks)
    if not 0 <= count <= 0xFFFF:
        raise InvalidDataError("A track count must fit in 16 bits")
    return count


@dataclass(frozen=True)
class Format:
    """The format of a MIDI file together with the number of tracks it claims."""

    kind: FormatType
    tracks: int = 1

    def __post_init__(self) -> None:
        kind = FormatType(self.kind)
        tracks = _track_count(self.tracks)
        if kind is FormatType.SINGLE_MULTI_CHANNEL and tracks != 1:
            raise InvalidDataError(
                "Type 0 MIDI format (SingleMultiChannel) defines multiple tracks!"
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "tracks", tracks)

    @classmethod
    def single_multichannel(cls) -> Format:
        """Format 0: a single multi-channel track."""
        return cls(FormatType.SINGLE_MULTI_CHANNEL, 1)

    @classmethod
    def simultaneous(cls, num_tracks: Any) -> Format:
        """Format 1 with ``num_tracks`` tracks (an int or two big-endian bytes)."""
        return cls(FormatType.SIMULTANEOUS, num_tracks)

    @classmethod
    def sequentially_independent(cls, num_tracks: Any) -> Format:
        """Format 2 with ``num_tracks`` tracks (an int or two big-endian bytes)."""
        return cls(FormatType.SEQUENTIALLY_INDEPENDENT, num_tracks)

    def num_tracks(self) -> int:
        """The number of tracks; always 1 for format 0."""
        return self.tracks

    def format_type(self) -> FormatType:
        """The format type."""
        return self.kind


class MidiChunkType(Enum):
    """The four-character type that begins every chunk."""

    HEADER = b"MThd"
    TRACK = b"MTrk"
    UNKNOWN = None