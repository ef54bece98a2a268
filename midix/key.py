"""Keys, notes and octaves."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import SupportsIndex

from .primitives import check_u7

__all__ = ["Note", "Octave", "Key"]

_NOTE_NAMES = (
    "C",
    "C#/Db",
    "D",
    "D#/Eb",
    "E",
    "F",
    "F#/Gb",
    "G",
    "G#Ab",
    "A",
    "A#/Bb",
    "B",
)


class Note(Enum):
    """A pitch class; the value is its offset in semitones from C."""

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    @classmethod
    def all(cls) -> list[Note]:
        """Every note, from C to B."""
        return list(cls)

    @classmethod
    def from_byte(cls, byte: SupportsIndex) -> Note:
        """The note of a seven-bit key byte."""
        return cls(check_u7(byte) % 12)

    def with_octave(self, octave: Octave) -> Key:
        """The key made of this note in ``octave``."""
        return Key.from_note_and_octave(self, octave)

    def __str__(self) -> str:
        return _NOTE_NAMES[self.value]


@dataclass(frozen=True)
class Octave:
    """An octave from -1 to 9; other values are clamped into that range."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", max(-1, min(9, operator.index(self.value))))

    @classmethod
    def from_byte(cls, byte: SupportsIndex) -> Octave:
        """The octave of a seven-bit key byte."""
        return cls(check_u7(byte) // 12 - 1)

    def with_note(self, note: Note) -> Key:
        """The key made of ``note`` in this octave."""
        return Key.from_note_and_octave(note, self)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Key:
    """A seven-bit key number: 0 is C in octave -1 and 127 is G9."""

    byte: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "byte", check_u7(self.byte))

    @classmethod
    def from_note_and_octave(cls, note: Note, octave: Octave) -> Key:
        """The key for ``note`` in ``octave``; raises if it is above 127."""
        return cls((octave.value + 1) * 12 + note.value)

    def note(self) -> Note:
        """The note of this key."""
        return Note.from_byte(self.byte)

    def octave(self) -> Octave:
        """The octave of this key."""
        return Octave.from_byte(self.byte)

    def __str__(self) -> str:
        return f"{self.note()}-{self.octave()}"