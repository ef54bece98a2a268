"""Fourteen-bit pitch bend values."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import ClassVar, SupportsIndex

from .errors import InvalidDataError
from .primitives import check_u7

__all__ = ["PitchBend"]


@dataclass(frozen=True)
class PitchBend:
    """A pitch bend made of two seven-bit bytes, least significant first.

    A value of ``0x0000`` is full bend down, ``0x2000`` is no bend and
    ``0x3FFF`` is full bend up.
    """

    MIN_BYTES: ClassVar[int] = 0x0000
    MID_BYTES: ClassVar[int] = 0x2000
    MAX_VALUE: ClassVar[int] = 0x3FFF

    lsb: int
    msb: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "lsb", check_u7(self.lsb))
        object.__setattr__(self, "msb", check_u7(self.msb))

    @classmethod
    def _unchecked(cls, lsb: int, msb: int) -> PitchBend:
        bend = object.__new__(cls)
        object.__setattr__(bend, "lsb", lsb)
        object.__setattr__(bend, "msb", msb)
        return bend

    def value(self) -> int:
        """The combined fourteen-bit value."""
        return (self.msb << 7) | self.lsb

    @classmethod
    def from_bits(cls, rep: SupportsIndex) -> PitchBend:
        """Split a fourteen-bit value into its two data bytes."""
        value = operator.index(rep)
        if not cls.MIN_BYTES <= value <= cls.MAX_VALUE:
            raise InvalidDataError("Pitch bend value does not fit in 14 bits")
        return cls(value & 0x7F, value >> 7)

    @classmethod
    def from_int(cls, value: SupportsIndex) -> PitchBend:
        """Build from an int in ``[-0x2000, 0x1FFF]``; other values are clamped."""
        clamped = max(-0x2000, min(0x1FFF, operator.index(value)))
        return cls.from_bits(clamped + 0x2000)

    @classmethod
    def from_float(cls, value: float) -> PitchBend:
        """Build from a number in ``[-1.0, 1.0)``; other values are clamped."""
        number = float(value)
        if math.isnan(number):
            return cls.from_int(0)
        number = max(-1.0, min(1.0, number))
        return cls.from_int(int(number * 0x2000))

    def as_int(self) -> int:
        """The bend as an int in ``[-0x2000, 0x1FFF]``."""
        return self.value() - 0x2000

    def as_float(self) -> float:
        """The bend as a float in ``[-1.0, 1.0)``."""
        return self.as_int() / 0x2000