from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

# Every field is optional: the file format never guarantees an attribute is present.
# Durations are seconds and may be fractional in the source; power values are
# fractions of FTP.


@dataclass
class Warmup:
    tag: ClassVar[str] = "Warmup"
    cadence: Optional[int] = None
    cadence_high: Optional[int] = None
    cadence_low: Optional[int] = None
    cadence_resting: Optional[int] = None
    duration: Optional[float] = None
    pace: Optional[int] = None
    power: Optional[float] = None
    power_high: Optional[float] = None
    power_low: Optional[float] = None
    quantize: Optional[int] = None
    replacement_prescription: Optional[str] = None
    replacement_verb: Optional[str] = None
    text: Optional[str] = None
    units: Optional[int] = None
    zone: Optional[int] = None


@dataclass
class SteadyState:
    tag: ClassVar[str] = "SteadyState"
    cadence: Optional[int] = None
    cadence_high: Optional[int] = None
    cadence_low: Optional[int] = None
    cadence_resting: Optional[int] = None
    duration: Optional[float] = None
    fail_threshold_duration: Optional[float] = None
    # Both spellings show up in real files; kept apart
    forced_performance_test: Optional[int] = None
    forced_performance_test_lower: Optional[int] = None
    never_fails: Optional[bool] = None
    off_power: Optional[float] = None
    pace: Optional[int] = None
    power: Optional[float] = None
    power_high: Optional[float] = None
    power_low: Optional[float] = None
    ramp_test: Optional[bool] = None
    replacement_prescription: Optional[str] = None
    replacement_verb: Optional[str] = None
    show_average: Optional[bool] = None
    target: Optional[float] = None
    text: Optional[str] = None
    units: Optional[int] = None
    zone: Optional[int] = None


@dataclass
class Cooldown:
    tag: ClassVar[str] = "Cooldown"
    cadence: Optional[int] = None
    cadence_high: Optional[int] = None
    cadence_low: Optional[int] = None
    cadence_resting: Optional[int] = None
    duration: Optional[float] = None
    end_at_road_time: Optional[float] = None
    pace: Optional[int] = None
    pace_upper: Optional[int] = None  # "Pace", distinct from "pace"
    power: Optional[float] = None
    power_high: Optional[float] = None
    power_low: Optional[float] = None
    replacement_prescription: Optional[str] = None
    replacement_verb: Optional[str] = None
    units: Optional[int] = None
    zone: Optional[int] = None


@dataclass
class FreeRide:
    tag: ClassVar[str] = "FreeRide"
    cadence: Optional[int] = None
    cadence_high: Optional[int] = None
    cadence_low: Optional[int] = None
    duration: Optional[float] = None
    fail_threshold_duration: Optional[float] = None
    flat_road: Optional[bool] = None
    ftp_test: Optional[bool] = None
    power: Optional[float] = None
    ramp_test: Optional[bool] = None
    show_average: Optional[bool] = None


@dataclass
class Freeride:
    tag: ClassVar[str] = "Freeride"
    duration: Optional[float] = None
    flat_road: Optional[bool] = None
    ftp_test: Optional[bool] = None


@dataclass
class IntervalsT:
    tag: ClassVar[str] = "IntervalsT"
    cadence: Optional[int] = None
    cadence_high: Optional[int] = None
    cadence_low: Optional[int] = None
    cadence_resting: Optional[int] = None
    flat_road: Optional[bool] = None
    off_duration: Optional[float] = None
    off_power: Optional[float] = None
    on_duration: Optional[float] = None
    on_power: Optional[float] = None
    over_under: Optional[bool] = None
    pace: Optional[int] = None
    power_off_high: Optional[float] = None
    power_off_low: Optional[float] = None
    power_off_zone: Optional[int] = None
    power_on_high: Optional[float] = None
    power_on_low: Optional[float] = None
    power_on_zone: Optional[int] = None
    repeat: Optional[int] = None
    units: Optional[int] = None


@dataclass
class MaxEffort:
    tag: ClassVar[str] = "MaxEffort"
    duration: Optional[float] = None


@dataclass
class Ramp:
    tag: ClassVar[str] = "Ramp"
    cadence: Optional[int] = None
    cadence_resting: Optional[int] = None
    duration: Optional[float] = None
    pace: Optional[int] = None
    power: Optional[float] = None
    power_high: Optional[float] = None
    power_low: Optional[float] = None
    show_average: Optional[bool] = None


@dataclass
class RestDay:
    tag: ClassVar[str] = "RestDay"


@dataclass
class SolidState:
    tag: ClassVar[str] = "SolidState"
    duration: Optional[float] = None
    power: Optional[float] = None


@dataclass
class UnknownSegment:
    tag: ClassVar[str] = "Unknown"


Segment = Union[
    Warmup,
    SteadyState,
    Cooldown,
    FreeRide,
    Freeride,
    IntervalsT,
    MaxEffort,
    Ramp,
    RestDay,
    SolidState,
    UnknownSegment,
]
