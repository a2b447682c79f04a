import pytest


SAMPLE_ZWO = """<workout_file>
    <author>Test Coach</author>
    <name>Sample Session</name>
    <sportType>bike</sportType>
    <workout>
        <Warmup Duration="300" PowerLow="0.40" PowerHigh="0.70" Cadence="85"/>
        <SteadyState Duration="600" Power="0.80" Cadence="90">
            <textevent timeoffset="10" message="Settle in"/>
        </SteadyState>
        <IntervalsT Repeat="3" OnDuration="60" OffDuration="30" OnPower="1.2" OffPower="0.5" Cadence="100" CadenceResting="80"/>
        <Cooldown Duration="240" PowerLow="0.6" PowerHigh="0.3" CadenceLow="85" CadenceHigh="70"/>
    </workout>
</workout_file>
"""


@pytest.fixture
def sample_zwo_text():
    return SAMPLE_ZWO


@pytest.fixture
def sample_zwo_path(tmp_path):
    path = tmp_path / "sample.zwo"
    path.write_text(SAMPLE_ZWO, encoding="utf-8")
    return path


@pytest.fixture
def broken_zwo_path(tmp_path):
    # SteadyState without any power target
    path = tmp_path / "broken.zwo"
    path.write_text(
        '<workout_file><workout>'
        '<Warmup Duration="60" Cadence="85" Power="0.5"/>'
        '<SteadyState Duration="120" Cadence="90"/>'
        '</workout></workout_file>',
        encoding="utf-8",
    )
    return path
