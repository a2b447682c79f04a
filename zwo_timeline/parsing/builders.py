from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config import BACKREF_MIN_LEVEL
from ..models.annotations import Annotation, TextEvent, TextEventAlt, TextNotification, UnknownAnnotation
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
from .attributes import attribute_bool, attribute_float, attribute_int, attribute_str

logger = logging.getLogger(__name__)

Accessor = Callable[[str, str, int], Any]
# (attribute name as written in the file, dataclass field, typed accessor)
AttributeTable = List[Tuple[str, str, Accessor]]

# Quote search starts after the attribute name (+1) or len(name) before it (-1)
AFTER_NAME = 1
BEFORE_NAME = -1

_CADENCE: AttributeTable = [
    ("Cadence", "cadence", attribute_int),
    ("CadenceHigh", "cadence_high", attribute_int),
    ("CadenceLow", "cadence_low", attribute_int),
    ("CadenceResting", "cadence_resting", attribute_int),
]

_POWER: AttributeTable = [
    ("Power", "power", attribute_float),
    ("PowerHigh", "power_high", attribute_float),
    ("PowerLow", "power_low", attribute_float),
]

_REPLACEMENT: AttributeTable = [
    ("replacement_prescription", "replacement_prescription", attribute_str),
    ("replacement_verb", "replacement_verb", attribute_str),
]

WARMUP_ATTRIBUTES: AttributeTable = _CADENCE + [
    ("Duration", "duration", attribute_float),
    ("pace", "pace", attribute_int),
] + _POWER + [
    ("Quantize", "quantize", attribute_int),
] + _REPLACEMENT + [
    ("Text", "text", attribute_str),
    ("units", "units", attribute_int),
    ("Zone", "zone", attribute_int),
]

STEADY_STATE_ATTRIBUTES: AttributeTable = _CADENCE + [
    ("Duration", "duration", attribute_float),
    ("FailThresholdDuration", "fail_threshold_duration", attribute_float),
    ("Forced_Performance_Test", "forced_performance_test", attribute_int),
    ("forced_performance_test", "forced_performance_test_lower", attribute_int),
    ("NeverFails", "never_fails", attribute_bool),
    ("OffPower", "off_power", attribute_float),
    ("pace", "pace", attribute_int),
] + _POWER + [
    ("ramptest", "ramp_test", attribute_bool),
] + _REPLACEMENT + [
    ("show_avg", "show_average", attribute_bool),
    ("Target", "target", attribute_float),
    ("Text", "text", attribute_str),
    ("units", "units", attribute_int),
    ("Zone", "zone", attribute_int),
]

COOLDOWN_ATTRIBUTES: AttributeTable = _CADENCE + [
    ("Duration", "duration", attribute_float),
    ("end_at_road_time", "end_at_road_time", attribute_float),
    ("pace", "pace", attribute_int),
    ("Pace", "pace_upper", attribute_int),
] + _POWER + _REPLACEMENT + [
    ("units", "units", attribute_int),
    ("Zone", "zone", attribute_int),
]

FREE_RIDE_ATTRIBUTES: AttributeTable = _CADENCE[:3] + [
    ("Duration", "duration", attribute_float),
    ("FailThresholdDuration", "fail_threshold_duration", attribute_float),
    ("FlatRoad", "flat_road", attribute_bool),
    ("ftptest", "ftp_test", attribute_bool),
    ("Power", "power", attribute_float),
    ("ramptest", "ramp_test", attribute_bool),
    ("show_avg", "show_average", attribute_bool),
]

FREERIDE_ATTRIBUTES: AttributeTable = [
    ("Duration", "duration", attribute_float),
    ("FlatRoad", "flat_road", attribute_bool),
    ("ftptest", "ftp_test", attribute_bool),
]

INTERVALS_T_ATTRIBUTES: AttributeTable = _CADENCE + [
    ("FlatRoad", "flat_road", attribute_bool),
    ("OffDuration", "off_duration", attribute_float),
    ("OffPower", "off_power", attribute_float),
    ("OnDuration", "on_duration", attribute_float),
    ("OnPower", "on_power", attribute_float),
    ("OverUnder", "over_under", attribute_bool),
    ("pace", "pace", attribute_int),
    ("PowerOffHigh", "power_off_high", attribute_float),
    ("PowerOffLow", "power_off_low", attribute_float),
    ("PowerOffZone", "power_off_zone", attribute_int),
    ("PowerOnHigh", "power_on_high", attribute_float),
    ("PowerOnLow", "power_on_low", attribute_float),
    ("PowerOnZone", "power_on_zone", attribute_int),
    ("Repeat", "repeat", attribute_int),
    ("units", "units", attribute_int),
]

MAX_EFFORT_ATTRIBUTES: AttributeTable = [
    ("Duration", "duration", attribute_float),
]

RAMP_ATTRIBUTES: AttributeTable = [
    ("Cadence", "cadence", attribute_int),
    ("CadenceResting", "cadence_resting", attribute_int),
    ("Duration", "duration", attribute_float),
    ("pace", "pace", attribute_int),
] + _POWER + [
    ("show_avg", "show_average", attribute_bool),
]

SOLID_STATE_ATTRIBUTES: AttributeTable = [
    ("Duration", "duration", attribute_float),
    ("Power", "power", attribute_float),
]

TEXT_EVENT_ATTRIBUTES: AttributeTable = [
    ("Duration", "duration", attribute_int),
    ("message", "message", attribute_str),
    ("TimeOffset", "time_offset", attribute_int),
    ("timeoffset", "time_offset_alt", attribute_int),
]

TEXT_EVENT_ALT_ATTRIBUTES: AttributeTable = [
    ("distoffset", "dist_offset", attribute_int),
    ("duration", "duration", attribute_int),
    ("message", "message", attribute_str),
    ("textscale", "text_scale", attribute_float),
    ("timeoffset", "time_offset", attribute_int),
]

TEXT_NOTIFICATION_ATTRIBUTES: AttributeTable = [
    ("duration", "duration", attribute_int),
    ("text", "text", attribute_str),
    ("timeoffset", "time_offset", attribute_int),
]

# tag -> (segment class, attribute table, quote search direction)
SEGMENT_BUILDERS: Dict[str, Tuple[type, AttributeTable, int]] = {
    "Warmup": (Warmup, WARMUP_ATTRIBUTES, AFTER_NAME),
    "SteadyState": (SteadyState, STEADY_STATE_ATTRIBUTES, AFTER_NAME),
    "Cooldown": (Cooldown, COOLDOWN_ATTRIBUTES, AFTER_NAME),
    "FreeRide": (FreeRide, FREE_RIDE_ATTRIBUTES, AFTER_NAME),
    "Freeride": (Freeride, FREERIDE_ATTRIBUTES, AFTER_NAME),
    "IntervalsT": (IntervalsT, INTERVALS_T_ATTRIBUTES, AFTER_NAME),
    "MaxEffort": (MaxEffort, MAX_EFFORT_ATTRIBUTES, BEFORE_NAME),
    "Ramp": (Ramp, RAMP_ATTRIBUTES, AFTER_NAME),
    "RestDay": (RestDay, [], AFTER_NAME),
    "SolidState": (SolidState, SOLID_STATE_ATTRIBUTES, BEFORE_NAME),
}

ANNOTATION_BUILDERS: Dict[str, Tuple[type, AttributeTable, int]] = {
    "TextEvent": (TextEvent, TEXT_EVENT_ATTRIBUTES, BEFORE_NAME),
    "textevent": (TextEventAlt, TEXT_EVENT_ALT_ATTRIBUTES, AFTER_NAME),
    "TextNotification": (TextNotification, TEXT_NOTIFICATION_ATTRIBUTES, BEFORE_NAME),
}


def _search_order(table: AttributeTable) -> AttributeTable:
    # Longest names first; ties keep table order
    return sorted(table, key=lambda entry: len(entry[0]), reverse=True)


def decode_attributes(chunk: str, table: AttributeTable, offset_sign: int) -> Dict[str, Any]:
    """Decode every attribute in ``table`` that can be read from ``chunk``.

    Names are tried longest first. Once a name has been looked up, its first
    occurrence is blanked out so a shorter name that is a prefix of it
    ("Power" in "PowerHigh") moves on to its own occurrence. Values are left
    untouched, so a name inside another attribute's value can still be hit.
    """
    values: Dict[str, Any] = {}
    remaining = chunk
    for attr_name, field_name, accessor in _search_order(table):
        pos = remaining.find(attr_name)
        if pos < 0:
            continue
        value = accessor(remaining, attr_name, offset_sign)
        if value is not None:
            values[field_name] = value
        remaining = remaining[:pos] + " " * len(attr_name) + remaining[pos + len(attr_name):]
    return values


def build_segment(tag: str, chunk: str) -> Segment:
    """Build the Segment for one tag chunk (text from ``<Tag`` up to its first ``>``)."""
    builder = SEGMENT_BUILDERS.get(tag)
    if builder is None:
        logger.debug(f"No segment builder for tag {tag!r}")
        return UnknownSegment()
    cls, table, offset_sign = builder
    return cls(**decode_attributes(chunk, table, offset_sign))


def build_annotation(tag: str, chunk: str, level: int = 0, segment_count: int = 0) -> Annotation:
    """Build the Annotation for one tag chunk.

    ``level`` is the nesting level of the tag; past ``BACKREF_MIN_LEVEL`` the
    annotation belongs to a segment and records ``segment_count`` (segments
    assembled so far) as its back-reference.
    """
    previous_segment: Optional[int] = segment_count if level > BACKREF_MIN_LEVEL else None
    builder = ANNOTATION_BUILDERS.get(tag)
    if builder is None:
        logger.debug(f"No annotation builder for tag {tag!r}")
        return UnknownAnnotation(level=level, previous_segment=previous_segment)
    cls, table, offset_sign = builder
    fields = decode_attributes(chunk, table, offset_sign)
    return cls(level=level, previous_segment=previous_segment, **fields)
