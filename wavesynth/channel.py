"""Per-channel MIDI controller state."""

from __future__ import annotations


def _to_i16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _with_coarse(current: int, value: int) -> int:
    return _to_i16((current & 0x7F) | (value << 7))


def _with_fine(current: int, value: int) -> int:
    return _to_i16((current & 0xFF80) | value)


class Channel:
    """The controller values of one MIDI channel."""

    def __init__(self, is_percussion_channel: bool = False) -> None:
        self.is_percussion_channel = is_percussion_channel
        self.reset()

    def reset(self) -> None:
        """Restore every controller to its power-on value."""
        self._bank_number = 128 if self.is_percussion_channel else 0
        self._patch_number = 0

        self._modulation = 0
        self._volume = 100 << 7
        self._pan = 64 << 7
        self._expression = 127 << 7
        self._hold_pedal = False

        self._reverb_send = 40
        self._chorus_send = 0

        self._rpn = -1
        self._pitch_bend_range = 2 << 7
        self._coarse_tune = 0
        self._fine_tune = 8192

        self._pitch_bend = 0.0

    def reset_all_controllers(self) -> None:
        """Handle the "reset all controllers" message."""
        self._modulation = 0
        self._expression = 127 << 7
        self._hold_pedal = False
        self._rpn = -1
        self._pitch_bend = 0.0

    def set_bank(self, value: int) -> None:
        self._bank_number = value + 128 if self.is_percussion_channel else value

    def set_patch(self, value: int) -> None:
        self._patch_number = value

    def set_modulation_coarse(self, value: int) -> None:
        self._modulation = _with_coarse(self._modulation, value)

    def set_modulation_fine(self, value: int) -> None:
        self._modulation = _with_fine(self._modulation, value)

    def set_volume_coarse(self, value: int) -> None:
        self._volume = _with_coarse(self._volume, value)

    def set_volume_fine(self, value: int) -> None:
        self._volume = _with_fine(self._volume, value)

    def set_pan_coarse(self, value: int) -> None:
        self._pan = _with_coarse(self._pan, value)

    def set_pan_fine(self, value: int) -> None:
        self._pan = _with_fine(self._pan, value)

    def set_expression_coarse(self, value: int) -> None:
        self._expression = _with_coarse(self._expression, value)

    def set_expression_fine(self, value: int) -> None:
        self._expression = _with_fine(self._expression, value)

    def set_hold_pedal(self, value: int) -> None:
        self._hold_pedal = value >= 64

    def set_reverb_send(self, value: int) -> None:
        self._reverb_send = value & 0xFF

    def set_chorus_send(self, value: int) -> None:
        self._chorus_send = value & 0xFF

    def set_rpn_coarse(self, value: int) -> None:
        self._rpn = _with_coarse(self._rpn, value)

    def set_rpn_fine(self, value: int) -> None:
        self._rpn = _with_fine(self._rpn, value)

    def data_entry_coarse(self, value: int) -> None:
        """Apply the data entry MSB to the selected registered parameter."""
        if self._rpn == 0:
            self._pitch_bend_range = _with_coarse(self._pitch_bend_range, value)
        elif self._rpn == 1:
            self._fine_tune = _with_coarse(self._fine_tune, value)
        elif self._rpn == 2:
            self._coarse_tune = _to_i16(value - 64)

    def data_entry_fine(self, value: int) -> None:
        """Apply the data entry LSB to the selected registered parameter."""
        if self._rpn == 0:
            self._pitch_bend_range = _with_fine(self._pitch_bend_range, value)
        elif self._rpn == 1:
            self._fine_tune = _with_fine(self._fine_tune, value)

    def set_pitch_bend(self, value1: int, value2: int) -> None:
        self._pitch_bend = ((value1 | (value2 << 7)) - 8192) / 8192

    @property
    def bank_number(self) -> int:
        return self._bank_number

    @property
    def patch_number(self) -> int:
        return self._patch_number

    @property
    def modulation(self) -> float:
        """Modulation depth in cents, from 0 to 50."""
        return (50 / 16383) * self._modulation

    @property
    def volume(self) -> float:
        return self._volume / 16383

    @property
    def pan(self) -> float:
        """Pan position from -50 to 50."""
        return (100 / 16383) * self._pan - 50

    @property
    def expression(self) -> float:
        return self._expression / 16383

    @property
    def hold_pedal(self) -> bool:
        return self._hold_pedal

    @property
    def reverb_send(self) -> float:
        return self._reverb_send / 127

    @property
    def chorus_send(self) -> float:
        return self._chorus_send / 127

    @property
    def pitch_bend_range(self) -> float:
        """Pitch bend range in semitones."""
        return (self._pitch_bend_range >> 7) + 0.01 * (self._pitch_bend_range & 0x7F)

    @property
    def tune(self) -> float:
        """Channel tuning in semitones."""
        return self._coarse_tune + (self._fine_tune - 8192) / 8192

    @property
    def pitch_bend(self) -> float:
        """Current pitch bend in semitones."""
        return self.pitch_bend_range * self._pitch_bend