"""Key velocities and the musical dynamics they correspond to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .primitives import check_u7

__all__ = ["Dynamic", "Velocity"]


class Dynamic(IntEnum):
    """The musical analog of a digital velocity, ordered from silent to loudest."""

    OFF = 0
    PIANISSISSIMO = 1
    PIANISSIMO = 2
    PIANO = 3
    MEZZO_PIANO = 4
    MEZZO_FORTE = 5
    FORTE = 6
    FORTISSIMO = 7
    FORTISSISSIMO = 8


@dataclass(frozen=True)
class Velocity:
    """The velocity of a key press, a key release or an aftertouch; seven bits."""

    byte: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "byte", check_u7(self.byte))

    @property
    def value(self) -> int:
        """The velocity as an integer from 0 to 127."""
        return self.byte

    def dynamic(self) -> Dynamic:
        """The dynamic marking this velocity falls under."""
        if self.byte == 0:
            return Dynamic.OFF
        # Each dynamic covers a band of sixteen velocities; the top band is fff.
        return Dynamic(min(self.byte // 16 + 1, Dynamic.FORTISSISSIMO))

    def __str__(self) -> str:
        return f"{self.byte:02X}"