"""Exceptions raised while configuring a synthesizer or loading its input files."""

from __future__ import annotations

from enum import Enum
from typing import Any


class SynthesizerErrorKind(Enum):
    """Reasons a synthesizer cannot be initialised."""

    SAMPLE_RATE_OUT_OF_RANGE = "the sample rate must be between 16000 and 192000, but was {value}"
    BLOCK_SIZE_OUT_OF_RANGE = "the block size must be between 8 and 1024, but was {value}"
    MAXIMUM_POLYPHONY_OUT_OF_RANGE = (
        "the maximum number of polyphony must be between 8 and 256, but was {value}"
    )


class SynthesizerError(Exception):
    """Raised when the synthesizer settings are out of range."""

    def __init__(self, kind: SynthesizerErrorKind, value: int) -> None:
        self.kind = kind
        self.value = value
        super().__init__(kind.value.format(value=value))


def _render(template: str, details: dict[str, Any]) -> str:
    try:
        return template.format_map(details)
    except KeyError as exc:
        raise TypeError(f"missing error detail {exc}") from None


class SoundFontErrorKind(Enum):
    """Reasons a SoundFont cannot be loaded."""

    IO_ERROR = "{error}"
    RIFF_CHUNK_NOT_FOUND = "the RIFF chunk was not found"
    INVALID_RIFF_CHUNK_TYPE = "the type of the RIFF chunk must be '{expected}', but was '{actual}'"
    LIST_CHUNK_NOT_FOUND = "the LIST chunk was not found"
    INVALID_LIST_CHUNK_TYPE = "the type of the LIST chunk must be '{expected}', but was '{actual}'"
    LIST_CONTAINS_UNKNOWN_ID = "the INFO list contains an unknown ID '{id}'"
    SAMPLE_DATA_NOT_FOUND = "no valid sample data was found"
    UNSUPPORTED_SAMPLE_FORMAT = "SoundFont3 is not yet supported"
    SUB_CHUNK_NOT_FOUND = "the '{id}' sub-chunk was not found"
    INVALID_PRESET_LIST = "the preset list is invalid"
    INVALID_INSTRUMENT_ID = (
        "the preset '{preset_name}' contains an invalid instrument ID '{instrument_id}'"
    )
    INVALID_PRESET = "the preset '{preset_name}' has no zone"
    PRESET_NOT_FOUND = "no valid preset was found"
    INVALID_INSTRUMENT_LIST = "the instrument list is invalid"
    INVALID_SAMPLE_ID = (
        "the instrument '{instrument_name}' contains an invalid sample ID '{sample_id}'"
    )
    INVALID_INSTRUMENT = "the instrument '{instrument_name}' has no zone"
    INSTRUMENT_NOT_FOUND = "no valid instrument was found"
    INVALID_SAMPLE_HEADER_LIST = "the sample header list is invalid"
    INVALID_ZONE_LIST = "the zone list is invalid"
    ZONE_NOT_FOUND = "no valid zone was found"
    INVALID_GENERATOR_LIST = "the generator list is invalid"


class SoundFontError(Exception):
    """Raised when a SoundFont is malformed or cannot be read."""

    def __init__(self, kind: SoundFontErrorKind, **kwargs: Any) -> None:
        self.kind = kind
        self.details = dict(kwargs)
        super().__init__(_render(kind.value, self.details))


class MidiFileErrorKind(Enum):
    """Reasons a MIDI file cannot be loaded."""

    IO_ERROR = "{error}"
    INVALID_CHUNK_TYPE = "the chunk type must be '{expected}', but was '{actual}'"
    INVALID_CHUNK_DATA = "the '{id}' chunk has invalid data"
    UNSUPPORTED_FORMAT = "the format {format} is not supported"
    INVALID_TEMPO_VALUE = "failed to read the tempo value"


class MidiFileError(Exception):
    """Raised when a MIDI file is malformed or cannot be read."""

    def __init__(self, kind: MidiFileErrorKind, **kwargs: Any) -> None:
        self.kind = kind
        self.details = dict(kwargs)
        super().__init__(_render(kind.value, self.details))