"""Readers for the little- and big-endian binary values found in RIFF and MIDI files."""

from __future__ import annotations

import struct
import sys
from array import array
from typing import BinaryIO

_I8 = struct.Struct("<b")
_U8 = struct.Struct("<B")
_I16 = struct.Struct("<h")
_U16 = struct.Struct("<H")
_I32 = struct.Struct("<i")
_I16_BE = struct.Struct(">h")
_I32_BE = struct.Struct(">i")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes but only {len(data)} were available")
    return data


def _unpack(stream: BinaryIO, fmt: struct.Struct) -> int:
    return fmt.unpack(_read_exact(stream, fmt.size))[0]


def read_i8(stream: BinaryIO) -> int:
    """Read a signed 8-bit integer."""
    return _unpack(stream, _I8)


def read_u8(stream: BinaryIO) -> int:
    """Read an unsigned 8-bit integer."""
    return _unpack(stream, _U8)


def read_i16(stream: BinaryIO) -> int:
    """Read a little-endian signed 16-bit integer."""
    return _unpack(stream, _I16)


def read_u16(stream: BinaryIO) -> int:
    """Read a little-endian unsigned 16-bit integer."""
    return _unpack(stream, _U16)


def read_i32(stream: BinaryIO) -> int:
    """Read a little-endian signed 32-bit integer."""
    return _unpack(stream, _I32)


def read_i16_big_endian(stream: BinaryIO) -> int:
    """Read a big-endian signed 16-bit integer."""
    return _unpack(stream, _I16_BE)


def read_i32_big_endian(stream: BinaryIO) -> int:
    """Read a big-endian signed 32-bit integer."""
    return _unpack(stream, _I32_BE)


def read_i32_variable_length(stream: BinaryIO) -> int:
    """Read a MIDI variable-length quantity of at most four bytes."""
    acc = 0
    for _ in range(4):
        value = read_u8(stream)
        acc = (acc << 7) | (value & 0x7F)
        if not value & 0x80:
            return acc
    raise ValueError("the length of the value must be equal to or less than 4")


def _sanitize(data: bytes, lowest: int) -> str:
    return "".join(chr(b) if lowest <= b <= 126 else "?" for b in data)


def read_four_cc(stream: BinaryIO) -> str:
    """Read a four-character code, replacing non-printable bytes with '?'."""
    return _sanitize(_read_exact(stream, 4), 32)


def read_fixed_length_string(stream: BinaryIO, length: int) -> str:
    """Read a zero-padded string of ``length`` bytes.

    The text ends at the first zero byte; tabs and line breaks are kept and
    other non-ASCII bytes become '?'.
    """
    data = _read_exact(stream, length)
    return _sanitize(data.split(b"\x00", 1)[0], 9)


def discard_data(stream: BinaryIO, size: int) -> None:
    """Skip ``size`` bytes, failing if fewer are available."""
    _read_exact(stream, size)


def read_wave_data(stream: BinaryIO, size: int) -> array:
    """Read ``size`` bytes of little-endian 16-bit samples."""
    data = _read_exact(stream, size)
    samples = array("h")
    samples.frombytes(data[: size // 2 * 2])
    if sys.byteorder == "big":
        samples.byteswap()
    return samples