from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import ANNOTATION_TAGS, SEGMENT_TAGS
from ..io.zwo_loader import load_document
from ..models.annotations import Annotation
from ..models.segments import Segment
from ..models.types import RawDocument, Workout
from .builders import build_annotation, build_segment
from .scanner import nesting_level, scan_tags

logger = logging.getLogger(__name__)


def _tag_chunk(text: str, start: int, end: int) -> Optional[str]:
    """Text of one tag from its "<" up to (not including) the first ">".

    None when the span holds no ">" at all.
    """
    span = text[start:end]
    close = span.find(">")
    if close < 0:
        return None
    return span[:close]


def assemble_workout(
    document: RawDocument,
    segment_tags: Iterable[str] = SEGMENT_TAGS,
    annotation_tags: Iterable[str] = ANNOTATION_TAGS,
) -> Workout:
    """Split the document at every recognised tag and build the Workout.

    Each tag's span runs to the next recognised tag anywhere in the file
    (nested or not), the last one to the end of the text. Spans that never
    reach a ">" are dropped.
    """
    text = document.text
    occurrences = [(occ, True) for occ in scan_tags(text, segment_tags)]
    occurrences += [(occ, False) for occ in scan_tags(text, annotation_tags)]
    occurrences.sort(key=lambda item: item[0].offset)

    segments: List[Segment] = []
    annotations: List[Annotation] = []
    dropped = 0
    for i, (occ, is_segment) in enumerate(occurrences):
        end = occurrences[i + 1][0].offset if i + 1 < len(occurrences) else len(text)
        chunk = _tag_chunk(text, occ.offset, end)
        if chunk is None:
            logger.debug(f"Dropping unterminated <{occ.name} at offset {occ.offset}")
            dropped += 1
            continue
        if is_segment:
            segments.append(build_segment(occ.name, chunk))
        else:
            level = nesting_level(text, occ.offset)
            annotations.append(build_annotation(occ.name, chunk, level=level, segment_count=len(segments)))

    logger.info(
        f"Assembled workout{' from ' + document.source_path if document.source_path else ''}: "
        f"{len(segments)} segments, {len(annotations)} annotations, {dropped} dropped tags"
    )
    return Workout(segments=tuple(segments), annotations=tuple(annotations), source_path=document.source_path)


def parse_workout(text: str, source_path: Optional[str] = None) -> Workout:
    """Build a Workout from raw .zwo text."""
    return assemble_workout(RawDocument(text=text, source_path=source_path))


def read_workout(file_path: Union[str, Path]) -> Workout:
    """Load a .zwo file and build its Workout."""
    return assemble_workout(load_document(file_path))
