"""Interpolation helpers and the per-second time-series compiler."""

from .compiler import compile_segment, compile_workout
from .interpolate import float_linspace, int_step_linspace

__all__ = [
    "compile_segment",
    "compile_workout",
    "float_linspace",
    "int_step_linspace",
]
