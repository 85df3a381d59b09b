"""A second-order low-pass filter with resonance."""

from __future__ import annotations

import math
from collections.abc import MutableSequence

_RESONANCE_PEAK_OFFSET = 1.0 - 1.0 / math.sqrt(2.0)


class BiQuadFilter:
    """A biquad low-pass filter that processes sample blocks in place."""

    def __init__(self, sample_rate: int) -> None:
        self.sample_rate = sample_rate
        self.active = False

        self._a0 = 0.0
        self._a1 = 0.0
        self._a2 = 0.0
        self._a3 = 0.0
        self._a4 = 0.0

        self._x1 = 0.0
        self._x2 = 0.0
        self._y1 = 0.0
        self._y2 = 0.0

    def clear_buffer(self) -> None:
        """Forget the previous input and output samples."""
        self._x1 = 0.0
        self._x2 = 0.0
        self._y1 = 0.0
        self._y2 = 0.0

    def set_low_pass_filter(self, cutoff_frequency: float, resonance: float) -> None:
        """Configure the filter; a cutoff near Nyquist or above disables it."""
        if cutoff_frequency >= 0.499 * self.sample_rate:
            self.active = False
            return

        self.active = True

        # This Q gives the desired resonance peak to within about 3%.
        q = resonance - _RESONANCE_PEAK_OFFSET / (1.0 + 6.0 * (resonance - 1.0))

        w = 2.0 * math.pi * cutoff_frequency / self.sample_rate
        cosw = math.cos(w)
        alpha = math.sin(w) / (2.0 * q)

        b0 = (1.0 - cosw) / 2.0
        b1 = 1.0 - cosw
        b2 = (1.0 - cosw) / 2.0
        a0 = 1.0 + alpha
        a1 = -2.0 * cosw
        a2 = 1.0 - alpha

        self._set_coefficients(a0, a1, a2, b0, b1, b2)

    def process(self, block: MutableSequence[float]) -> None:
        """Filter ``block`` in place; when inactive it only tracks the history."""
        if not self.active:
            self._x2 = block[-2]
            self._x1 = block[-1]
            self._y2 = self._x2
            self._y1 = self._x1
            return

        a0, a1, a2, a3, a4 = self._a0, self._a1, self._a2, self._a3, self._a4
        x1, x2, y1, y2 = self._x1, self._x2, self._y1, self._y2
        for i, sample in enumerate(block):
            output = a0 * sample + a1 * x1 + a2 * x2 - a3 * y1 - a4 * y2
            x2, x1 = x1, sample
            y2, y1 = y1, output
            block[i] = output
        self._x1, self._x2, self._y1, self._y2 = x1, x2, y1, y2

    def _set_coefficients(
        self, a0: float, a1: float, a2: float, b0: float, b1: float, b2: float
    ) -> None:
        self._a0 = b0 / a0
        self._a1 = b1 / a0
        self._a2 = b2 / a0
        self._a3 = a1 / a0
        self._a4 = a2 / a0