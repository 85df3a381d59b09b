import io
import struct

import pytest

from wavesynth import binary_reader as br


@pytest.mark.parametrize(
    "fmt, reader, value",
    [
        ("<b", br.read_i8, -1),
        ("<B", br.read_u8, 200),
        ("<h", br.read_i16, -12345),
        ("<H", br.read_u16, 54321),
        ("<i", br.read_i32, -123456789),
        (">h", br.read_i16_big_endian, -300),
        (">i", br.read_i32_big_endian, 100000),
    ],
)
def test_integer_round_trip(fmt, reader, value):
    stream = io.BytesIO(struct.pack(fmt, value))
    assert reader(stream) == value
    assert stream.read() == b""


def test_short_read_raises_eof():
    with pytest.raises(EOFError):
        br.read_i32(io.BytesIO(b"\x01\x02"))
    with pytest.raises(EOFError):
        br.read_u8(io.BytesIO(b""))


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00", 0),
        (b"\x81\x00", 0x80),
        (b"\xff\xff\xff\x7f", 0x0FFFFFFF),
    ],
)
def test_variable_length(data, expected):
    assert br.read_i32_variable_length(io.BytesIO(data)) == expected


def test_variable_length_too_long():
    with pytest.raises(ValueError):
        br.read_i32_variable_length(io.BytesIO(b"\x80\x80\x80\x80\x00"))


def test_four_cc_plain():
    assert br.read_four_cc(io.BytesIO(b"RIFFrest")) == "RIFF"


def test_four_cc_replaces_non_printable():
    assert br.read_four_cc(io.BytesIO(b"\x00AB\xff")) == "?AB?"


def test_fixed_length_string_stops_at_zero_and_consumes_all():
    stream = io.BytesIO(b"abc\x00xyz\x00\x00\x00tail")
    assert br.read_fixed_length_string(stream, 10) == "abc"
    assert stream.read() == b"tail"


def test_fixed_length_string_keeps_tab():
    assert br.read_fixed_length_string(io.BytesIO(b"a\tb\x01"), 4) == "a\tb?"


def test_discard_data():
    stream = io.BytesIO(b"0123456789")
    br.discard_data(stream, 4)
    assert stream.read() == b"456789"
    with pytest.raises(EOFError):
        br.discard_data(io.BytesIO(b"12"), 3)


def test_read_wave_data_round_trip():
    values = [0, 1, -1, 32767, -32768]
    stream = io.BytesIO(struct.pack("<5h", *values))
    assert list(br.read_wave_data(stream, 10)) == values


def test_read_wave_data_short():
    with pytest.raises(EOFError):
        br.read_wave_data(io.BytesIO(b"\x00\x01"), 4)