from __future__ import annotations

from dataclasses import fields
from typing import Optional

import pandas as pd

from ..config import get_settings
from ..models.types import TimeSeries, Workout


def export_timeline_csv(series: TimeSeries, path: str, ftp_watts: Optional[float] = None) -> None:
    """Write the timeline as CSV; ftp_watts falls back to the global settings."""
    if ftp_watts is None:
        ftp_watts = get_settings().ftp_watts
    df = series.to_frame(ftp_watts=ftp_watts)
    df.to_csv(path, index=False)


def workout_summary_frame(workout: Workout) -> pd.DataFrame:
    """One row per segment and annotation, in file order within each kind.

    Columns: kind, index, tag, plus one column per decoded field (NaN/None where
    the tag kind lacks the field or the file did not provide it).
    """
    rows = []
    for idx, seg in enumerate(workout.segments):
        row = {"kind": "segment", "index": idx, "tag": seg.tag}
        row.update({f.name: getattr(seg, f.name) for f in fields(seg)})
        rows.append(row)
    for idx, ann in enumerate(workout.annotations):
        row = {"kind": "annotation", "index": idx, "tag": ann.tag}
        row.update({f.name: getattr(ann, f.name) for f in fields(ann)})
        rows.append(row)
    return pd.DataFrame(rows, columns=None if rows else ["kind", "index", "tag"])


def export_workout_summary_csv(workout: Workout, path: str) -> None:
    df = workout_summary_frame(workout)
    df.to_csv(path, index=False)
