"""A pull-based reader that turns the bytes of a MIDI file into events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .chunk import HeaderChunk, TrackChunkHeader, UnknownChunk
from .errors import UnexpectedEofError, invalid_data, unexpected_eof
from .events import FileEvent, FileEventKind, TrackEvent
from .meta import MetaMessage
from .system import SystemExclusiveMessage
from .voice import ChannelVoiceMessage

__all__ = ["Reader", "decode_varlen"]

_MAX_VARLEN_BYTES = 4


class _Phase(Enum):
    INIT = auto()
    INSIDE_MIDI = auto()
    INSIDE_TRACK = auto()
    DONE = auto()


@dataclass
class _TrackState:
    start: int
    length: int
    prev_status: int | None = None


class Reader:
    """Reads MIDI file events, one at a time, from a byte buffer.

    Chunks of unknown type are assumed to carry a four-byte name followed
    by a four-byte length; if that is not so, the next read fails.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self.data = bytes(data)
        self._offset = 0
        self.last_error_offset = 0
        self._phase = _Phase.INIT
        self._track: _TrackState | None = None

    def buffer_position(self) -> int:
        """The current position of the cursor in the buffer."""
        return self._offset

    def read_exact(self, size: int) -> bytes:
        """Read and return exactly ``size`` bytes, or raise UnexpectedEofError."""
        start = self._offset
        end = start + size
        if start > len(self.data) or end > len(self.data):
            raise unexpected_eof()
        self._offset = end
        return self.data[start:end]

    def peek_next(self) -> int:
        """The next byte, without moving the cursor."""
        if self._offset >= len(self.data):
            raise unexpected_eof()
        return self.data[self._offset]

    def read_next(self) -> int:
        """Read and return the next byte."""
        byte = self.peek_next()
        self._offset += 1
        return byte

    def read_varlen_slice(self) -> bytes:
        """Read a variable-length size, then that many bytes."""
        return self.read_exact(decode_varlen(self))

    def __iter__(self) -> Iterator[FileEvent]:
        """Yield events until the end of the file; the EOF event is not yielded."""
        while True:
            event = self.read_event()
            if event.kind is FileEventKind.EOF:
                return
            yield event

    def read_event(self) -> FileEvent:
        """Read the next event; raises a MidiError if the bytes are invalid."""
        running_status: int | None = None
        while True:
            if self._phase is _Phase.INIT:
                self._phase = _Phase.INSIDE_MIDI
                continue

            if self._phase is _Phase.DONE:
                event = FileEvent.eof()
                break

            if self._phase is _Phase.INSIDE_MIDI:
                try:
                    name = self.read_exact(4)
                except UnexpectedEofError:
                    self._phase = _Phase.DONE
                    return FileEvent.eof()
                if name == b"MThd":
                    event = FileEvent.header(HeaderChunk.read(self))
                elif name == b"MTrk":
                    chunk = TrackChunkHeader.read(self)
                    self._phase = _Phase.INSIDE_TRACK
                    self._track = _TrackState(self._offset, len(chunk))
                    event = FileEvent.track(chunk)
                else:
                    event = FileEvent.unknown(UnknownChunk.read(name, self))
                break

            track = self._track
            assert track is not None
            if track.start + track.length <= self._offset:
                self._phase = _Phase.INSIDE_MIDI
                self._track = None
                continue

            delta_time = decode_varlen(self)
            byte = self.read_next()
            message: SystemExclusiveMessage | MetaMessage | ChannelVoiceMessage
            if byte == 0xF0:
                data = self.read_varlen_slice()
                # The payload ends with the F7 end-of-exclusive marker.
                message = SystemExclusiveMessage(data[:-1] if data else data)
            elif byte == 0xFF:
                message = MetaMessage.read(self)
            else:
                if byte >> 7 == 1:
                    status = byte
                elif track.prev_status is not None:
                    # A data byte under running status: put it back.
                    self._offset -= 1
                    status = track.prev_status
                else:
                    raise invalid_data(self, "Invalid MIDI event triggered")
                running_status = status
                message = ChannelVoiceMessage.read(status, self)
            event = FileEvent.track_event(TrackEvent(delta_time, message))
            break

        if self._phase is _Phase.INSIDE_TRACK and self._track is not None:
            self._track.prev_status = running_status
        return event


def decode_varlen(reader: Reader) -> int:
    """Read a variable-length quantity of at most four bytes."""
    value = 0
    for _ in range(_MAX_VARLEN_BYTES):
        byte = reader.read_next()
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            break
    return value