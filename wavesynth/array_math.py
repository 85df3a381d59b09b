"""In-place multiply-accumulate helpers for sample blocks."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import accumulate, repeat


def multiply_add(a: float, x: Sequence[float], destination: MutableSequence[float]) -> None:
    """Add ``a * x`` to ``destination`` over their common length."""
    n = min(len(x), len(destination))
    destination[:n] = [d + a * v for d, v in zip(destination, x)]


def multiply_add_slope(
    a: float, step: float, x: Sequence[float], destination: MutableSequence[float]
) -> None:
    """Add ``x`` scaled by a gain that starts at ``a`` and grows by ``step`` per sample."""
    n = min(len(x), len(destination))
    gains = accumulate(repeat(step), initial=a)
    destination[:n] = [d + g * v for d, v, g in zip(destination, x, gains)]