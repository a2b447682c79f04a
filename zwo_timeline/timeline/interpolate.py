"""Discretised ramps between two bounds, one value per second."""

from __future__ import annotations

import numpy as np


def int_step_linspace(start: int, end: int, length: int) -> np.ndarray:
    """Staircase from ``start`` to ``end`` (inclusive) over ``length`` samples.

    Every integer in the range is held for ``length // n`` samples, where n is
    the number of integers in the range; the remainder goes one sample each to
    the earliest values. Descending ranges step downward.

    - start == end: flat sequence
    - length shorter than the range: rounded evenly spaced values, so both
      endpoints are still present
    - length <= 0: empty
    """
    length = int(length)
    if length <= 0:
        return np.empty(0, dtype=np.int64)
    start, end = int(start), int(end)
    if start == end:
        return np.full(length, start, dtype=np.int64)
    step = 1 if end > start else -1
    values = np.arange(start, end + step, step, dtype=np.int64)
    if length < len(values):
        return np.rint(np.linspace(start, end, length)).astype(np.int64)
    base, extra = divmod(length, len(values))
    counts = np.full(len(values), base, dtype=np.int64)
    counts[:extra] += 1
    return np.repeat(values, counts)


def float_linspace(start: float, end: float, length: int) -> np.ndarray:
    """Evenly spaced values with both endpoints exact; ``[start]`` when length is 1."""
    length = int(length)
    if length <= 0:
        return np.empty(0, dtype=np.float64)
    out = np.linspace(float(start), float(end), length, dtype=np.float64)
    out[0] = float(start)
    if length > 1:
        out[-1] = float(end)
    return out
