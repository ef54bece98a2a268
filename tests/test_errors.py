import pytest

from midix.errors import (
    InvalidDataError,
    InvalidInputError,
    MidiError,
    UnexpectedEofError,
    invalid_data,
    invalid_input,
    unexpected_eof,
)


class FakeReader:
    def __init__(self, position):
        self._position = position
        self.last_error_offset = 0

    def buffer_position(self):
        return self._position


def test_unexpected_eof_message_and_types():
    err = unexpected_eof()
    assert isinstance(err, UnexpectedEofError)
    assert isinstance(err, EOFError)
    assert str(err) == "Read past the end of the file"


def test_unexpected_eof_can_be_caught_as_base():
    err = unexpected_eof()
    assert isinstance(err, MidiError)
    with pytest.raises(MidiError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "Read past the end of the file"


def test_invalid_data_records_position():
    reader = FakeReader(12)
    err = invalid_data(reader, "boom")
    assert isinstance(err, InvalidDataError)
    assert isinstance(err, ValueError)
    assert str(err) == "Cursor at 12: boom"
    assert err.offset == 12
    assert reader.last_error_offset == 12


def test_invalid_input_records_position():
    reader = FakeReader(3)
    err = invalid_input(reader, "missing")
    assert isinstance(err, InvalidInputError)
    assert err.offset == 3
    assert reader.last_error_offset == 3
    assert str(err).endswith("missing")


def test_invalid_data_formats_non_string_message():
    reader = FakeReader(0)
    err = invalid_data(reader, 42)
    assert str(err).endswith(": 42")
    assert err.message == str(err)


def test_error_kinds_are_distinct():
    reader = FakeReader(1)
    data_err = invalid_data(reader, "x")
    input_err = invalid_input(reader, "x")
    assert isinstance(data_err, InvalidDataError)
    assert not isinstance(data_err, InvalidInputError)
    assert isinstance(input_err, InvalidInputError)
    assert not isinstance(input_err, InvalidDataError)
    assert str(data_err) == "Cursor at 1: x"