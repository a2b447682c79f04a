from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from .annotations import Annotation
from .segments import IntervalsT, Segment


@dataclass(frozen=True)
class RawDocument:
    text: str
    source_path: Optional[str] = None

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class TagOccurrence:
    name: str
    offset: int  # index of the "<" that opens the tag


@dataclass(frozen=True)
class Workout:
    """Segments and annotations in file order.

    The only link between the two sequences is ``previous_segment`` on an
    annotation, an index into ``segments``.
    """
    segments: Tuple[Segment, ...] = ()
    annotations: Tuple[Annotation, ...] = ()
    source_path: Optional[str] = None

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def planned_duration_s(self) -> int:
        """Whole seconds declared by the segments, ignoring segments without a duration."""
        total = 0
        for seg in self.segments:
            if isinstance(seg, IntervalsT):
                if seg.repeat is not None and seg.on_duration is not None and seg.off_duration is not None:
                    total += seg.repeat * (int(seg.on_duration) + int(seg.off_duration))
                continue
            duration = getattr(seg, "duration", None)
            if duration is not None and duration > 0:
                total += int(duration)
        return total


@dataclass(eq=False)
class TimeSeries:
    """Per-second targets: elapsed seconds, cadence (rpm) and power (fraction of FTP)."""
    time: np.ndarray
    cadence: np.ndarray
    power: np.ndarray

    def __post_init__(self) -> None:
        self.time = np.asarray(self.time, dtype=np.int64)
        self.cadence = np.asarray(self.cadence, dtype=np.int64)
        self.power = np.asarray(self.power, dtype=np.float64)
        if not (len(self.time) == len(self.cadence) == len(self.power)):
            raise ValueError(
                f"TimeSeries arrays differ in length: time={len(self.time)}, "
                f"cadence={len(self.cadence)}, power={len(self.power)}"
            )

    def __len__(self) -> int:
        return len(self.time)

    @classmethod
    def empty(cls) -> "TimeSeries":
        return cls(time=np.empty(0), cadence=np.empty(0), power=np.empty(0))

    @classmethod
    def concat(cls, parts: Iterable["TimeSeries"], continuous_time: bool = False) -> "TimeSeries":
        """Join series end to end.

        By default each part keeps its own 0-based clock, so elapsed time
        restarts at every segment boundary. ``continuous_time`` shifts each
        part to start one second after the previous one ends.
        """
        parts = list(parts)
        if not parts:
            return cls.empty()
        times = []
        shift = 0
        for p in parts:
            if continuous_time:
                times.append(p.time + shift)
                shift += len(p)
            else:
                times.append(p.time)
        return cls(
            time=np.concatenate(times),
            cadence=np.concatenate([p.cadence for p in parts]),
            power=np.concatenate([p.power for p in parts]),
        )

    def to_frame(self, ftp_watts: Optional[float] = None) -> pd.DataFrame:
        """Render as a DataFrame, one row per second.

        Columns: elapsed_s, cadence_rpm, power_frac (+ power_w when ftp_watts is given)
        """
        df = pd.DataFrame(
            {
                "elapsed_s": self.time,
                "cadence_rpm": self.cadence,
                "power_frac": self.power,
            }
        )
        if ftp_watts is not None:
            df["power_w"] = df["power_frac"] * float(ftp_watts)
        return df
