"""Typed domain objects: segments, annotations, workouts and time series."""

from .annotations import Annotation, TextEvent, TextEventAlt, TextNotification, UnknownAnnotation
from .segments import (
    Cooldown,
    FreeRide,
    Freeride,
    IntervalsT,
    MaxEffort,
    Ramp,
    RestDay,
    Segment,
    SolidState,
    SteadyState,
    UnknownSegment,
    Warmup,
)
from .types import RawDocument, TagOccurrence, TimeSeries, Workout

__all__ = [
    "Annotation",
    "TextEvent",
    "TextEventAlt",
    "TextNotification",
    "UnknownAnnotation",
    "Segment",
    "Warmup",
    "SteadyState",
    "Cooldown",
    "FreeRide",
    "Freeride",
    "IntervalsT",
    "MaxEffort",
    "Ramp",
    "RestDay",
    "SolidState",
    "UnknownSegment",
    "RawDocument",
    "TagOccurrence",
    "TimeSeries",
    "Workout",
]
