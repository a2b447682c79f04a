"""Parser and per-second timeline compiler for Zwift .zwo workout files.

Modules:
- io: Loading workout files as raw text
- models: Typed segments, annotations, workouts and time series
- parsing: Tag scanning, attribute decoding and document assembly
- timeline: Interpolation helpers and the time-series compiler
- storage: Export helpers
- cli: Command line interface
"""

from .errors import MissingEssentialFieldError, ZwoTimelineError
from .models.types import RawDocument, TagOccurrence, TimeSeries, Workout
from .parsing.assembler import assemble_workout, parse_workout, read_workout
from .timeline.compiler import compile_segment, compile_workout

__version__ = "0.1.0"

__all__ = [
    "RawDocument",
    "TagOccurrence",
    "TimeSeries",
    "Workout",
    "assemble_workout",
    "parse_workout",
    "read_workout",
    "compile_segment",
    "compile_workout",
    "MissingEssentialFieldError",
    "ZwoTimelineError",
]
