"""Exception types raised while decoding MIDI data."""

from __future__ import annotations

from typing import Any

__all__ = [
    "MidiError",
    "InvalidDataError",
    "InvalidInputError",
    "UnexpectedEofError",
    "unexpected_eof",
    "invalid_data",
    "invalid_input",
]


class MidiError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


class InvalidDataError(MidiError, ValueError):
    """The bytes do not form a valid MIDI value or message."""


class InvalidInputError(MidiError, ValueError):
    """The input is missing data needed to build a message."""


class UnexpectedEofError(MidiError, EOFError):
    """A read went past the end of the available bytes."""


def unexpected_eof() -> UnexpectedEofError:
    """Build the error for a read past the end of the data."""
    return UnexpectedEofError("Read past the end of the file")


def _located(reader: Any, message: object) -> tuple[int, str]:
    position = reader.buffer_position()
    reader.last_error_offset = position
    return position, f"Cursor at {position}: {message}"


def invalid_data(reader: Any, message: object) -> InvalidDataError:
    """Build an invalid-data error tagged with the reader's position.

    The reader's ``last_error_offset`` is updated to that position.
    """
    position, text = _located(reader, message)
    return InvalidDataError(text, offset=position)


def invalid_input(reader: Any, message: object) -> InvalidInputError:
    """Build an invalid-input error tagged with the reader's position.

    The reader's ``last_error_offset`` is updated to that position.
    """
    position, text = _located(reader, message)
    return InvalidInputError(text, offset=position)