import pandas as pd

from zwo_timeline.cli import main
from zwo_timeline.parsing.assembler import parse_workout
from zwo_timeline.storage.export import export_timeline_csv, workout_summary_frame
from zwo_timeline.timeline.compiler import compile_workout


def test_timeline_frame_and_csv(tmp_path):
    series = compile_workout(parse_workout('<Warmup Duration="60" Cadence="90" Power="0.5"/>'))
    df = series.to_frame(ftp_watts=200)
    assert list(df.columns) == ["elapsed_s", "cadence_rpm", "power_frac", "power_w"]
    assert (df["power_w"] == 100.0).all()

    out = tmp_path / "timeline.csv"
    export_timeline_csv(series, str(out))
    back = pd.read_csv(out)
    assert len(back) == 60
    assert "power_w" not in back.columns


def test_workout_summary_frame(sample_zwo_text):
    df = workout_summary_frame(parse_workout(sample_zwo_text))
    assert df["kind"].tolist() == ["segment"] * 4 + ["annotation"]
    assert df["tag"].tolist() == ["Warmup", "SteadyState", "IntervalsT", "Cooldown", "textevent"]


def test_cli_compile(sample_zwo_path, tmp_path, capsys):
    out = tmp_path / "out.csv"
    code = main(["compile", str(sample_zwo_path), "--output", str(out), "--ftp", "250", "--continuous-time"])
    assert code == 0
    df = pd.read_csv(out)
    assert len(df) == 1410
    assert df["elapsed_s"].iloc[-1] == 1409
    assert df["power_w"].iloc[0] == 100.0
    assert "1410 samples" in capsys.readouterr().out


def test_cli_summary(sample_zwo_path, tmp_path):
    out = tmp_path / "summary.csv"
    assert main(["summary", str(sample_zwo_path), "--output", str(out)]) == 0
    assert len(pd.read_csv(out)) == 5


def test_cli_reports_missing_field(broken_zwo_path, tmp_path, capsys):
    code = main(["compile", str(broken_zwo_path), "--output", str(tmp_path / "x.csv")])
    assert code == 1
    assert "Missing essential field" in capsys.readouterr().out
    assert not (tmp_path / "x.csv").exists()


def test_timeline_export_uses_settings_ftp(tmp_path):
    from zwo_timeline import config

    series = compile_workout(parse_workout('<Warmup Duration="10" Cadence="90" Power="0.5"/>'))
    config.get_settings().ftp_watts = 300.0
    try:
        out = tmp_path / "timeline.csv"
        export_timeline_csv(series, str(out))
    finally:
        config.reset_settings()
    back = pd.read_csv(out)
    assert (back["power_w"] == 150.0).all()
