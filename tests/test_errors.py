import pytest

from wavesynth.errors import (
    MidiFileError,
    MidiFileErrorKind,
    SoundFontError,
    SoundFontErrorKind,
    SynthesizerError,
    SynthesizerErrorKind,
)


def test_synthesizer_error_message_and_fields():
    err = SynthesizerError(SynthesizerErrorKind.SAMPLE_RATE_OUT_OF_RANGE, 8000)
    assert str(err) == "the sample rate must be between 16000 and 192000, but was 8000"
    assert err.kind is SynthesizerErrorKind.SAMPLE_RATE_OUT_OF_RANGE
    assert err.value == 8000


def test_synthesizer_error_block_size():
    err = SynthesizerError(SynthesizerErrorKind.BLOCK_SIZE_OUT_OF_RANGE, 2048)
    assert str(err) == "the block size must be between 8 and 1024, but was 2048"


def test_synthesizer_error_polyphony_message_and_fields():
    err = SynthesizerError(SynthesizerErrorKind.MAXIMUM_POLYPHONY_OUT_OF_RANGE, 4)
    assert str(err) == (
        "the maximum number of polyphony must be between 8 and 256, but was 4"
    )
    assert err.kind is SynthesizerErrorKind.MAXIMUM_POLYPHONY_OUT_OF_RANGE
    assert err.value == 4
    assert isinstance(err, Exception)


def test_soundfont_error_with_details():
    err = SoundFontError(SoundFontErrorKind.INVALID_RIFF_CHUNK_TYPE, expected="sfbk", actual="abcd")
    assert str(err) == "the type of the RIFF chunk must be 'sfbk', but was 'abcd'"
    assert err.details == {"expected": "sfbk", "actual": "abcd"}


def test_soundfont_error_without_details():
    err = SoundFontError(SoundFontErrorKind.UNSUPPORTED_SAMPLE_FORMAT)
    assert str(err) == "SoundFont3 is not yet supported"
    assert err.details == {}


def test_soundfont_error_invalid_sample_id():
    err = SoundFontError(
        SoundFontErrorKind.INVALID_SAMPLE_ID, instrument_name="Piano", sample_id=7
    )
    assert str(err) == "the instrument 'Piano' contains an invalid sample ID '7'"


def test_soundfont_io_error_uses_wrapped_message():
    inner = EOFError("unexpected end of data")
    err = SoundFontError(SoundFontErrorKind.IO_ERROR, error=inner)
    assert str(err) == "unexpected end of data"
    assert err.details["error"] is inner


def test_soundfont_error_missing_detail_raises_type_error():
    with pytest.raises(TypeError):
        SoundFontError(SoundFontErrorKind.SUB_CHUNK_NOT_FOUND)


def test_midi_file_error_messages():
    err = MidiFileError(MidiFileErrorKind.UNSUPPORTED_FORMAT, format=2)
    assert str(err) == "the format 2 is not supported"
    chunk = MidiFileError(MidiFileErrorKind.INVALID_CHUNK_TYPE, expected="MThd", actual="RIFF")
    assert str(chunk) == "the chunk type must be 'MThd', but was 'RIFF'"
    assert str(MidiFileError(MidiFileErrorKind.INVALID_TEMPO_VALUE)) == "failed to read the tempo value"