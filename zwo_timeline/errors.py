from __future__ import annotations

from typing import Optional


class ZwoTimelineError(Exception):
    """Base class for workout parsing and compile errors."""


class MissingEssentialFieldError(ZwoTimelineError, ValueError):
    """A segment lacks a field needed to build its time series.

    Fatal for the whole workout compile; no partial timeline is returned.
    """

    def __init__(self, segment_tag: str, field_name: str, segment_index: Optional[int] = None):
        self.segment_tag = segment_tag
        self.field_name = field_name
        self.segment_index = segment_index
        where = f"{segment_tag} segment" if segment_index is None else f"{segment_tag} segment #{segment_index}"
        super().__init__(f"Missing essential field: {where} has no usable {field_name}")
