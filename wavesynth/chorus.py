"""A stereo chorus effect built from modulated delay lines."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence


class Chorus:
    """A chorus whose left and right delays follow a sine, a quarter period apart."""

    def __init__(self, sample_rate: int, delay: float, depth: float, frequency: float) -> None:
        buffer_length = int(sample_rate * (delay + depth)) + 2
        self._buffer_l = [0.0] * buffer_length
        self._buffer_r = [0.0] * buffer_length

        table_length = int(math.floor(sample_rate / frequency + 0.5))
        self._delay_table = [
            sample_rate * (delay + depth * math.sin(2.0 * math.pi * t / table_length))
            for t in range(table_length)
        ]

        self._buffer_index = 0
        self._delay_table_index_l = 0
        self._delay_table_index_r = table_length // 4

    def _read_delayed(self, buffer: list[float], delay_index: int) -> float:
        buffer_length = len(buffer)
        position = self._buffer_index - self._delay_table[delay_index]
        if position < 0.0:
            position += buffer_length

        index1 = int(position)
        index2 = index1 + 1
        if index2 == buffer_length:
            index2 = 0

        x1 = buffer[index1]
        x2 = buffer[index2]
        a = position - index1
        return x1 + a * (x2 - x1)

    def process(
        self,
        input_left: Sequence[float],
        input_right: Sequence[float],
        output_left: MutableSequence[float],
        output_right: MutableSequence[float],
    ) -> None:
        """Write the chorus of the inputs into the outputs, one sample per output slot."""
        buffer_length = len(self._buffer_l)
        table_length = len(self._delay_table)

        for t in range(len(output_left)):
            output_left[t] = self._read_delayed(self._buffer_l, self._delay_table_index_l)
            self._delay_table_index_l = (self._delay_table_index_l + 1) % table_length

            output_right[t] = self._read_delayed(self._buffer_r, self._delay_table_index_r)
            self._delay_table_index_r = (self._delay_table_index_r + 1) % table_length

            self._buffer_l[self._buffer_index] = input_left[t]
            self._buffer_r[self._buffer_index] = input_right[t]
            self._buffer_index = (self._buffer_index + 1) % buffer_length

    def mute(self) -> None:
        """Clear both delay lines."""
        self._buffer_l = [0.0] * len(self._buffer_l)
        self._buffer_r = [0.0] * len(self._buffer_r)