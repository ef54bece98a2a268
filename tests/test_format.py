import pytest

from midix.errors import InvalidDataError
from midix.format import Format, FormatType, MidiChunkType


def test_single_multichannel_has_one_track():
    fmt = Format.single_multichannel()
    assert fmt.num_tracks() == 1
    assert fmt.format_type() is FormatType.SINGLE_MULTI_CHANNEL


def test_simultaneous_from_int():
    fmt = Format.simultaneous(3)
    assert fmt.num_tracks() == 3
    assert fmt.format_type() is FormatType.SIMULTANEOUS


def test_sequentially_independent_from_bytes():
    fmt = Format.sequentially_independent(b"\x00\x03")
    assert fmt.num_tracks() == 3
    assert fmt.format_type() is FormatType.SEQUENTIALLY_INDEPENDENT


def test_bytes_and_int_counts_agree():
    assert Format.simultaneous(bytes([0x01, 0x02])) == Format.simultaneous(0x0102)


def test_format_type_values_match_header_words():
    assert [FormatType(n) for n in (0, 1, 2)] == [
        FormatType.SINGLE_MULTI_CHANNEL,
        FormatType.SIMULTANEOUS,
        FormatType.SEQUENTIALLY_INDEPENDENT,
    ]


def test_type_zero_with_many_tracks_is_rejected():
    with pytest.raises(InvalidDataError):
        Format(FormatType.SINGLE_MULTI_CHANNEL, 3)


@pytest.mark.parametrize("count", [-1, 0x10000])
def test_track_count_out_of_range(count):
    with pytest.raises(InvalidDataError):
        Format.simultaneous(count)


def test_track_count_bytes_must_be_two_long():
    with pytest.raises(InvalidDataError):
        Format.simultaneous(b"\x00\x00\x01")


def test_chunk_type_lookup():
    assert MidiChunkType(b"MThd") is MidiChunkType.HEADER
    assert MidiChunkType(b"MTrk") is MidiChunkType.TRACK