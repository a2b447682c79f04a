"""Lenient attribute lookup on a raw tag chunk.

A lookup finds the first occurrence of the attribute name anywhere in the
chunk (not only at a token boundary), steps over the name, then takes the
text between the next two double quotes. Any failure gives ``None``.

``offset_sign`` selects where the quote search starts: ``+1`` starts just
after the name, ``-1`` starts ``len(name)`` characters before the match.
The latter only finds the right value when no other quoted value sits in
that window; some tag kinds have always been read that way and are kept so.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_INT_RE = re.compile(r"[+-]?[0-9]+")


def raw_attribute(chunk: str, name: str, offset_sign: int = 1) -> Optional[str]:
    pos = chunk.find(name)
    if pos < 0:
        return None
    start = max(0, pos + offset_sign * len(name))
    first_quote = chunk.find('"', start)
    if first_quote < 0:
        return None
    second_quote = chunk.find('"', first_quote + 1)
    if second_quote < 0:
        return None
    return chunk[first_quote + 1 : second_quote]


def attribute_str(chunk: str, name: str, offset_sign: int = 1) -> Optional[str]:
    return raw_attribute(chunk, name, offset_sign)


def attribute_int(chunk: str, name: str, offset_sign: int = 1) -> Optional[int]:
    raw = raw_attribute(chunk, name, offset_sign)
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def attribute_float(chunk: str, name: str, offset_sign: int = 1) -> Optional[float]:
    raw = raw_attribute(chunk, name, offset_sign)
    if raw is None or raw != raw.strip() or "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def attribute_bool(chunk: str, name: str, offset_sign: int = 1) -> Optional[bool]:
    raw = raw_attribute(chunk, name, offset_sign)
    if raw == "1":
        return True
    if raw == "0":
        return False
    return None
