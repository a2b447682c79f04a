from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


@dataclass
class TextEvent:
    """On-screen message from a ``<TextEvent`` tag."""
    tag: ClassVar[str] = "TextEvent"
    duration: Optional[int] = None
    message: Optional[str] = None
    time_offset: Optional[int] = None  # "TimeOffset"
    time_offset_alt: Optional[int] = None  # "timeoffset", kept separately
    level: int = 0
    previous_segment: Optional[int] = None


@dataclass
class TextEventAlt:
    """Lower-case ``<textevent`` tag; not a spelling variant, it has its own fields."""
    tag: ClassVar[str] = "textevent"
    dist_offset: Optional[int] = None
    duration: Optional[int] = None
    message: Optional[str] = None
    text_scale: Optional[float] = None
    time_offset: Optional[int] = None
    level: int = 0
    previous_segment: Optional[int] = None


@dataclass
class TextNotification:
    tag: ClassVar[str] = "TextNotification"
    duration: Optional[int] = None
    text: Optional[str] = None
    time_offset: Optional[int] = None
    level: int = 0
    previous_segment: Optional[int] = None


@dataclass
class UnknownAnnotation:
    tag: ClassVar[str] = "Unknown"
    level: int = 0
    previous_segment: Optional[int] = None


Annotation = Union[TextEvent, TextEventAlt, TextNotification, UnknownAnnotation]
