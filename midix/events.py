"""Events yielded while reading a MIDI file."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from .chunk import HeaderChunk, TrackChunkHeader, UnknownChunk
from .meta import MetaMessage
from .system import SystemExclusiveMessage
from .voice import ChannelVoiceMessage

__all__ = ["TrackMessage", "TrackEvent", "FileEventKind", "FileEvent"]

TrackMessage = Union[ChannelVoiceMessage, SystemExclusiveMessage, MetaMessage]

_TRACK_MESSAGES = (ChannelVoiceMessage, SystemExclusiveMessage, MetaMessage)


@dataclass(frozen=True)
class TrackEvent:
    """A message in the body of a track, with the delta time since the previous one.

    The delta time is interpreted according to the header's timing.
    """

    delta_time: int
    event: TrackMessage

    def __post_init__(self) -> None:
        delta = operator.index(self.delta_time)
        if delta < 0:
            raise ValueError("A delta time cannot be negative")
        if not isinstance(self.event, _TRACK_MESSAGES):
            raise TypeError(
                f"{type(self.event).__name__} cannot appear in a track"
            )
        object.__setattr__(self, "delta_time", delta)

    def __repr__(self) -> str:
        return (
            f"Track Event {{ delta_time: 0x{self.delta_time:02X}, "
            f"event: {self.event!r} }}"
        )


class FileEventKind(Enum):
    """What a file event holds."""

    HEADER = auto()
    TRACK = auto()
    UNKNOWN = auto()
    TRACK_EVENT = auto()
    EOF = auto()


_PAYLOAD_TYPES: dict[FileEventKind, type] = {
    FileEventKind.HEADER: HeaderChunk,
    FileEventKind.TRACK: TrackChunkHeader,
    FileEventKind.UNKNOWN: UnknownChunk,
    FileEventKind.TRACK_EVENT: TrackEvent,
    FileEventKind.EOF: type(None),
}


@dataclass(frozen=True)
class FileEvent:
    """An event read from a ``.mid`` file: a chunk, a track event or the end.

    ``value`` is a HeaderChunk, TrackChunkHeader, UnknownChunk or TrackEvent
    according to ``kind``, and None at the end of the file.
    """

    kind: FileEventKind
    value: Any = None

    def __post_init__(self) -> None:
        kind = FileEventKind(self.kind)
        expected = _PAYLOAD_TYPES[kind]
        if not isinstance(self.value, expected):
            raise TypeError(
                f"A {kind.name} event cannot hold {type(self.value).__name__}"
            )
        object.__setattr__(self, "kind", kind)

    @classmethod
    def header(cls, chunk: HeaderChunk) -> FileEvent:
        """An event for a header chunk."""
        return cls(FileEventKind.HEADER, chunk)

    @classmethod
    def track(cls, chunk: TrackChunkHeader) -> FileEvent:
        """An event for the header of a track chunk."""
        return cls(FileEventKind.TRACK, chunk)

    @classmethod
    def unknown(cls, chunk: UnknownChunk) -> FileEvent:
        """An event for a chunk of unknown type."""
        return cls(FileEventKind.UNKNOWN, chunk)

    @classmethod
    def track_event(cls, event: TrackEvent) -> FileEvent:
        """An event for a message in a track body."""
        return cls(FileEventKind.TRACK_EVENT, event)

    @classmethod
    def eof(cls) -> FileEvent:
        """The event yielded once no more bytes can be read."""
        return cls(FileEventKind.EOF, None)