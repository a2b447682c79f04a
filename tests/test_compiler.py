import numpy as np
import pytest

from zwo_timeline.config import CompileSettings
from zwo_timeline.errors import MissingEssentialFieldError
from zwo_timeline.models.segments import (
    FreeRide,
    Freeride,
    MaxEffort,
    Ramp,
    RestDay,
    SolidState,
    SteadyState,
    UnknownSegment,
    Warmup,
)
from zwo_timeline.models.types import Workout
from zwo_timeline.parsing.assembler import parse_workout
from zwo_timeline.timeline.compiler import compile_segment, compile_workout


def test_constant_warmup():
    series = compile_workout(parse_workout('<Warmup Duration="600" Cadence="90" Power="0.5"/>'))
    assert len(series) == 600
    assert np.all(series.cadence == 90)
    assert np.all(series.power == 0.5)
    assert series.time.tolist() == list(range(600))


def test_steady_state_power_ramp():
    series = compile_workout(parse_workout('<SteadyState Duration="300" Cadence="85" PowerLow="0.6" PowerHigh="0.9"/>'))
    assert len(series) == 300
    assert series.power[0] == 0.6
    assert series.power[299] == 0.9
    assert np.all(series.cadence == 85)


def test_rest_day_contributes_nothing():
    series = compile_workout(parse_workout('<RestDay/><Cooldown Duration="120" Cadence="70" Power="0.3"/>'))
    assert len(series) == 120
    assert np.all(series.power == 0.3)


def test_malformed_tag_compiles_to_empty_timeline():
    series = compile_workout(parse_workout('<Warmup Duration="600" Cadence="90" Power="0.5"'))
    assert len(series) == 0


def test_cadence_range():
    seg = Warmup(duration=10, cadence_low=80, cadence_high=84, power=0.5)
    series = compile_segment(seg)
    assert series.cadence[0] == 80
    assert series.cadence[-1] == 84
    assert series.cadence.tolist() == [80, 80, 81, 81, 82, 82, 83, 83, 84, 84]


def test_range_wins_over_constant():
    seg = SteadyState(duration=5, cadence=90, power=0.7, power_low=0.5, power_high=0.9)
    series = compile_segment(seg)
    assert series.power[0] == 0.5
    assert series.power[-1] == 0.9


def test_fractional_duration_truncated():
    series = compile_segment(Warmup(duration=90.7, cadence=85, power=0.5))
    assert len(series) == 90


@pytest.mark.parametrize(
    "segment, missing",
    [
        (Warmup(cadence=90, power=0.5), "Duration"),
        (Warmup(duration=60, power=0.5), "Cadence"),
        (Warmup(duration=60, cadence_low=80, power=0.5), "Cadence"),
        (Warmup(duration=60, cadence=90, power_high=0.8), "Power"),
        (Freeride(duration=600), "Cadence"),
        (MaxEffort(duration=30), "Cadence"),
        (SolidState(duration=120, power=0.9), "Cadence"),
        (FreeRide(duration=60, cadence=90), "Power"),
        (Ramp(duration=60, power_low=0.5, power_high=0.8), "Cadence"),
    ],
)
def test_missing_essential_field(segment, missing):
    with pytest.raises(MissingEssentialFieldError) as exc:
        compile_segment(segment)
    assert exc.value.field_name.startswith(missing)
    assert exc.value.segment_tag == segment.tag


def test_one_bad_segment_fails_whole_workout():
    workout = Workout(segments=(Warmup(duration=60, cadence=85, power=0.5), SteadyState(duration=60, cadence=90)))
    with pytest.raises(MissingEssentialFieldError) as exc:
        compile_workout(workout)
    assert exc.value.segment_index == 1
    assert "Missing essential field" in str(exc.value)


def test_rest_day_and_unknown_compile_to_none():
    assert compile_segment(RestDay()) is None
    assert compile_segment(UnknownSegment()) is None


def test_intervals_expand_on_off_blocks():
    seg = parse_workout(
        '<IntervalsT Repeat="2" OnDuration="3" OffDuration="2" OnPower="1.2" OffPower="0.5" Cadence="100" CadenceResting="80"/>'
    ).segments[0]
    series = compile_segment(seg)
    assert len(series) == 10
    assert series.power.tolist() == [1.2, 1.2, 1.2, 0.5, 0.5, 1.2, 1.2, 1.2, 0.5, 0.5]
    assert series.cadence.tolist() == [100, 100, 100, 80, 80, 100, 100, 100, 80, 80]
    assert series.time.tolist() == list(range(10))


def test_intervals_missing_repeat():
    seg = parse_workout('<IntervalsT OnDuration="30" OffDuration="30" OnPower="1.1" OffPower="0.5" Cadence="95"/>').segments[0]
    with pytest.raises(MissingEssentialFieldError) as exc:
        compile_segment(seg)
    assert exc.value.field_name == "Repeat"


def test_sample_timeline(sample_zwo_text):
    series = compile_workout(parse_workout(sample_zwo_text))
    assert len(series) == 1410

    # warmup ramp
    assert series.power[0] == 0.4
    assert series.power[299] == 0.7
    # local clock restarts at each segment
    assert series.time[300] == 0
    assert series.power[300] == 0.8
    # first interval on/off
    assert series.power[900] == 1.2 and series.cadence[900] == 100
    assert series.power[960] == 0.5 and series.cadence[960] == 80
    # cooldown ramps down
    assert series.power[1170] == 0.6 and series.power[-1] == 0.3
    assert series.cadence[1170] == 85 and series.cadence[-1] == 70


def test_continuous_time_option(sample_zwo_text):
    series = compile_workout(parse_workout(sample_zwo_text), CompileSettings(continuous_time=True))
    assert series.time.tolist() == list(range(1410))


def test_global_settings_used_when_none_given(sample_zwo_text):
    from zwo_timeline import config

    config.get_settings().continuous_time = True
    try:
        series = compile_workout(parse_workout(sample_zwo_text))
        assert series.time[-1] == 1409
    finally:
        settings = config.reset_settings()
    assert settings.continuous_time is False
    assert config.get_settings() is settings


def test_intervals_keep_one_clock_with_continuous_time():
    workout = parse_workout(
        '<Warmup Duration="4" Cadence="85" Power="0.5"/>'
        '<IntervalsT Repeat="2" OnDuration="3" OffDuration="2" OnPower="1.2" OffPower="0.5" Cadence="100"/>'
    )
    default = compile_workout(workout)
    assert default.time.tolist() == [0, 1, 2, 3] + list(range(10))

    continuous = compile_workout(workout, CompileSettings(continuous_time=True))
    assert continuous.time.tolist() == list(range(14))


def test_free_ride_cadence_range_with_constant_power():
    series = compile_segment(FreeRide(duration=4, cadence_low=80, cadence_high=81, power=0.6))
    assert series.cadence.tolist() == [80, 80, 81, 81]
    assert np.all(series.power == 0.6)


def test_ramp_constant_cadence_with_power_range():
    series = compile_segment(Ramp(duration=5, cadence=95, power_low=0.5, power_high=0.9))
    assert np.all(series.cadence == 95)
    assert np.allclose(series.power, [0.5, 0.6, 0.7, 0.8, 0.9])


@pytest.mark.parametrize(
    "tag",
    [
        '<MaxEffort Duration="30"/>',
        '<SolidState Duration="120" Power="0.9"/>',
        '<Freeride Duration="600" FlatRoad="1"/>',
    ],
)
def test_segments_without_cadence_never_compile(tag):
    with pytest.raises(MissingEssentialFieldError) as exc:
        compile_workout(parse_workout(tag))
    assert exc.value.segment_index == 0
