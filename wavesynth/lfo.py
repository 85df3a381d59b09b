"""A triangle-wave low-frequency oscillator advanced once per block."""

from __future__ import annotations

import math


class Lfo:
    """A delayed triangle LFO whose value ranges from -1 to 1."""

    def __init__(self, sample_rate: int, block_size: int) -> None:
        self.sample_rate = sample_rate
        self.block_size = block_size

        self.active = False
        self._delay = 0.0
        self._period = 0.0
        self._processed_sample_count = 0
        self._value = 0.0

    def start(self, delay: float, frequency: float) -> None:
        """Restart with a delay in seconds and a frequency in hertz."""
        self._value = 0.0
        if frequency > 1.0e-3:
            self.active = True
            self._delay = delay
            self._period = 1.0 / frequency
            self._processed_sample_count = 0
        else:
            self.active = False

    def process(self) -> None:
        """Advance by one block."""
        if not self.active:
            return

        self._processed_sample_count += self.block_size
        current_time = self._processed_sample_count / self.sample_rate

        if current_time < self._delay:
            self._value = 0.0
            return

        phase = math.fmod(current_time - self._delay, self._period) / self._period
        if phase < 0.25:
            self._value = 4.0 * phase
        elif phase < 0.75:
            self._value = 4.0 * (0.5 - phase)
        else:
            self._value = 4.0 * (phase - 1.0)

    @property
    def value(self) -> float:
        """The current output of the oscillator."""
        return self._value