import pytest

from midix.errors import InvalidDataError
from midix.pitch_bend import PitchBend


def test_no_bend_is_mid_value():
    assert PitchBend.from_int(0).value() == PitchBend.MID_BYTES


def test_extremes():
    assert PitchBend.from_int(-0x2000).value() == PitchBend.MIN_BYTES
    assert PitchBend.from_int(0x1FFF).value() == PitchBend.MAX_VALUE


def test_mid_value_wire_bytes():
    bend = PitchBend.from_bits(PitchBend.MID_BYTES)
    assert (bend.lsb, bend.msb) == (0x00, 0x40)


def test_from_int_clamps():
    assert PitchBend.from_int(100000) == PitchBend.from_int(0x1FFF)
    assert PitchBend.from_int(-100000) == PitchBend.from_int(-0x2000)


@pytest.mark.parametrize("value", [-0x2000, -1, 0, 1, 1234, 0x1FFF])
def test_int_round_trip(value):
    assert PitchBend.from_int(value).as_int() == value


@pytest.mark.parametrize("bits", [0, 1, 0x7F, 0x80, 0x2000, 0x3FFF])
def test_bits_round_trip(bits):
    assert PitchBend.from_bits(bits).value() == bits


def test_from_bits_rejects_out_of_range():
    with pytest.raises(InvalidDataError):
        PitchBend.from_bits(PitchBend.MAX_VALUE + 1)
    with pytest.raises(InvalidDataError):
        PitchBend.from_bits(-1)


def test_constructor_checks_bytes():
    with pytest.raises(InvalidDataError):
        PitchBend(0x80, 0)
    with pytest.raises(InvalidDataError):
        PitchBend(0, 0x80)


def test_float_extremes_and_clamping():
    assert PitchBend.from_float(-1.0).as_int() == -0x2000
    assert PitchBend.from_float(1.0) == PitchBend.from_int(0x1FFF)
    assert PitchBend.from_float(2.0) == PitchBend.from_float(1.0)
    assert PitchBend.from_float(-5.0) == PitchBend.from_float(-1.0)


@pytest.mark.parametrize("value", [-1.0, -0.5, 0.0, 0.25, 0.5])
def test_float_round_trip(value):
    assert PitchBend.from_float(value).as_float() == value


def test_as_float_range():
    for bits in range(0, 0x4000, 0x155):
        result = PitchBend.from_bits(bits).as_float()
        assert -1.0 <= result < 1.0