"""Tag scanning, attribute decoding and document assembly for .zwo text."""

from .assembler import assemble_workout, parse_workout, read_workout
from .attributes import attribute_bool, attribute_float, attribute_int, attribute_str, raw_attribute
from .builders import build_annotation, build_segment
from .scanner import nesting_level, scan_tags

__all__ = [
    "assemble_workout",
    "parse_workout",
    "read_workout",
    "attribute_bool",
    "attribute_float",
    "attribute_int",
    "attribute_str",
    "raw_attribute",
    "build_annotation",
    "build_segment",
    "nesting_level",
    "scan_tags",
]
