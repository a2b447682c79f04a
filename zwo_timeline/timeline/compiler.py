"""Turn assembled segments into one per-second control timeline.

Each segment compiles on its own to a TimeSeries whose elapsed time starts at
0; the workout timeline is those series joined in document order. A segment
that lacks its duration, a cadence target or a power target stops the whole
compile with MissingEssentialFieldError: there is no partial timeline.

A target is either a constant (``Cadence``/``Power``) or a complete
``(low, high)`` pair expanded into a ramp over the segment. When both are
present the ramp wins.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..config import CompileSettings, get_settings
from ..errors import MissingEssentialFieldError
from ..models.segments import (
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
from ..models.types import TimeSeries, Workout
from .interpolate import float_linspace, int_step_linspace

logger = logging.getLogger(__name__)

# (constant field, low field, high field); None where the segment kind has no such field
TargetFields = Tuple[Optional[str], Optional[str], Optional[str]]
# A resolved target: (constant, None, None) or (None, low, high)
Target = Tuple[Optional[float], Optional[float], Optional[float]]

_CADENCE_FIELDS: TargetFields = ("cadence", "cadence_low", "cadence_high")
_POWER_FIELDS: TargetFields = ("power", "power_low", "power_high")
_NO_FIELDS: TargetFields = (None, None, None)

# Segment kinds compiled as one block: cadence fields, power fields
BLOCK_TARGETS: Dict[type, Tuple[TargetFields, TargetFields]] = {
    Warmup: (_CADENCE_FIELDS, _POWER_FIELDS),
    SteadyState: (_CADENCE_FIELDS, _POWER_FIELDS),
    Cooldown: (_CADENCE_FIELDS, _POWER_FIELDS),
    FreeRide: (_CADENCE_FIELDS, ("power", None, None)),
    Ramp: (("cadence", None, None), _POWER_FIELDS),
    # No cadence or power attributes at all: these can never compile
    Freeride: (_NO_FIELDS, _NO_FIELDS),
    MaxEffort: (_NO_FIELDS, _NO_FIELDS),
    SolidState: (_NO_FIELDS, ("power", None, None)),
}


def _resolve_target(segment: Segment, fields: TargetFields) -> Optional[Target]:
    const_field, low_field, high_field = fields
    low = getattr(segment, low_field) if low_field else None
    high = getattr(segment, high_field) if high_field else None
    if low is not None and high is not None:
        return None, low, high
    const = getattr(segment, const_field) if const_field else None
    if const is not None:
        return const, None, None
    return None


def _whole_seconds(duration: float) -> int:
    return max(0, int(duration))


def _cadence_series(target: Target, n: int) -> np.ndarray:
    const, low, high = target
    if const is not None:
        return np.full(n, int(const), dtype=np.int64)
    return int_step_linspace(int(low), int(high), n)


def _power_series(target: Target, n: int) -> np.ndarray:
    const, low, high = target
    if const is not None:
        return np.full(n, float(const), dtype=np.float64)
    return float_linspace(low, high, n)


def _block(duration: float, cadence: Target, power: Target) -> TimeSeries:
    n = _whole_seconds(duration)
    return TimeSeries(time=np.arange(n), cadence=_cadence_series(cadence, n), power=_power_series(power, n))


def _compile_block(segment: Segment) -> TimeSeries:
    cadence_fields, power_fields = BLOCK_TARGETS[type(segment)]
    duration = getattr(segment, "duration", None)
    if duration is None:
        raise MissingEssentialFieldError(segment.tag, "Duration")
    cadence = _resolve_target(segment, cadence_fields)
    if cadence is None:
        raise MissingEssentialFieldError(segment.tag, "Cadence (or CadenceLow and CadenceHigh)")
    power = _resolve_target(segment, power_fields)
    if power is None:
        raise MissingEssentialFieldError(segment.tag, "Power (or PowerLow and PowerHigh)")
    return _block(duration, cadence, power)


def _compile_intervals(segment: IntervalsT) -> TimeSeries:
    """Expand Repeat x (on block, off block).

    The off block holds CadenceResting when given, otherwise the on cadence.
    The blocks share one clock, so elapsed time runs 0..total-1 across the
    whole segment.
    """
    for attr_name, value in (
        ("Repeat", segment.repeat),
        ("OnDuration", segment.on_duration),
        ("OffDuration", segment.off_duration),
    ):
        if value is None:
            raise MissingEssentialFieldError(segment.tag, attr_name)
    cadence = _resolve_target(segment, _CADENCE_FIELDS)
    if cadence is None:
        raise MissingEssentialFieldError(segment.tag, "Cadence (or CadenceLow and CadenceHigh)")
    on_power = _resolve_target(segment, ("on_power", "power_on_low", "power_on_high"))
    if on_power is None:
        raise MissingEssentialFieldError(segment.tag, "OnPower (or PowerOnLow and PowerOnHigh)")
    off_power = _resolve_target(segment, ("off_power", "power_off_low", "power_off_high"))
    if off_power is None:
        raise MissingEssentialFieldError(segment.tag, "OffPower (or PowerOffLow and PowerOffHigh)")
    off_cadence = cadence if segment.cadence_resting is None else (segment.cadence_resting, None, None)

    blocks: List[TimeSeries] = []
    for _ in range(max(0, segment.repeat)):
        blocks.append(_block(segment.on_duration, cadence, on_power))
        blocks.append(_block(segment.off_duration, off_cadence, off_power))
    return TimeSeries.concat(blocks, continuous_time=True)


def compile_segment(segment: Segment) -> Optional[TimeSeries]:
    """Compile one segment; None for segments that never produce output (RestDay, unknown tags)."""
    if isinstance(segment, (RestDay, UnknownSegment)):
        return None
    if isinstance(segment, IntervalsT):
        return _compile_intervals(segment)
    if type(segment) in BLOCK_TARGETS:
        return _compile_block(segment)
    raise TypeError(f"Not a segment: {segment!r}")


def compile_workout(workout: Workout, settings: Optional[CompileSettings] = None) -> TimeSeries:
    """Compile every segment and join them in document order.

    Raises MissingEssentialFieldError (tagged with the segment's index) on the
    first segment that cannot be compiled.
    """
    settings = settings or get_settings()
    parts: List[TimeSeries] = []
    for idx, segment in enumerate(workout.segments):
        try:
            series = compile_segment(segment)
        except MissingEssentialFieldError as e:
            logger.debug(f"Segment #{idx} ({segment.tag}) failed to compile: {e}")
            raise MissingEssentialFieldError(e.segment_tag, e.field_name, segment_index=idx) from e
        if series is None:
            logger.debug(f"Segment #{idx} ({segment.tag}) contributes no samples")
            continue
        logger.debug(f"Segment #{idx} ({segment.tag}): {len(series)} samples")
        parts.append(series)
    timeline = TimeSeries.concat(parts, continuous_time=settings.continuous_time)
    logger.info(f"Compiled {len(parts)} of {workout.segment_count} segments into {len(timeline)} samples")
    return timeline
