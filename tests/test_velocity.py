import pytest

from midix.errors import InvalidDataError
from midix.velocity import Dynamic, Velocity


@pytest.mark.parametrize(
    "byte, expected",
    [
        (0, Dynamic.OFF),
        (1, Dynamic.PIANISSISSIMO),
        (15, Dynamic.PIANISSISSIMO),
        (16, Dynamic.PIANISSIMO),
        (31, Dynamic.PIANISSIMO),
        (32, Dynamic.PIANO),
        (48, Dynamic.MEZZO_PIANO),
        (64, Dynamic.MEZZO_FORTE),
        (80, Dynamic.FORTE),
        (96, Dynamic.FORTISSIMO),
        (111, Dynamic.FORTISSIMO),
        (112, Dynamic.FORTISSISSIMO),
        (127, Dynamic.FORTISSISSIMO),
    ],
)
def test_dynamic_bands(byte, expected):
    assert Velocity(byte).dynamic() is expected


def test_dynamic_is_monotonic():
    dynamics = [Velocity(b).dynamic() for b in range(128)]
    assert dynamics == sorted(dynamics)
    assert set(dynamics) == set(Dynamic)


def test_dynamic_ordering():
    off = Velocity(0).dynamic()
    piano = Velocity(32).dynamic()
    loudest = Velocity(127).dynamic()
    assert off < piano < loudest
    assert (off, piano, loudest) == (
        Dynamic.OFF,
        Dynamic.PIANO,
        Dynamic.FORTISSISSIMO,
    )


def test_value_matches_byte():
    for b in (0, 33, 127):
        assert Velocity(b).value == b


@pytest.mark.parametrize("bad", [128, 255, -1])
def test_rejects_out_of_range(bad):
    with pytest.raises(InvalidDataError):
        Velocity(bad)


def test_str_is_hex():
    assert str(Velocity(0x21)) == "21"


def test_equality():
    assert Velocity(40) == Velocity(40)
    assert Velocity(40) != Velocity(41)