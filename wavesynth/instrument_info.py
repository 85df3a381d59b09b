"""Instrument header records from a SoundFont's 'inst' sub-chunk."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import BinaryIO

from .binary_reader import read_fixed_length_string, read_u16
from .errors import SoundFontError, SoundFontErrorKind

_RECORD_SIZE = 22
_NAME_LENGTH = 20


@dataclass
class InstrumentInfo:
    """An instrument name and the range of zones that belong to it."""

    name: str
    zone_start_index: int
    zone_end_index: int = 0

    @classmethod
    def read(cls, stream: BinaryIO) -> InstrumentInfo:
        """Read one instrument header record."""
        name = read_fixed_length_string(stream, _NAME_LENGTH)
        zone_start_index = read_u16(stream)
        return cls(name, zone_start_index)


def read_instrument_infos(stream: BinaryIO, size: int) -> list[InstrumentInfo]:
    """Read ``size`` bytes of instrument headers, linking each to its zone range."""
    if size % _RECORD_SIZE != 0 or size == 0:
        raise SoundFontError(SoundFontErrorKind.INVALID_INSTRUMENT_LIST)
    try:
        infos = [InstrumentInfo.read(stream) for _ in range(size // _RECORD_SIZE)]
    except EOFError as exc:
        raise SoundFontError(SoundFontErrorKind.IO_ERROR, error=exc) from exc
    for current, following in pairwise(infos):
        current.zone_end_index = following.zone_start_index - 1
    return infos