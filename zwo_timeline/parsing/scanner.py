from __future__ import annotations

import re
from typing import Iterable, List

from ..models.types import TagOccurrence


def scan_tags(text: str, names: Iterable[str]) -> List[TagOccurrence]:
    """Find every ``<Name`` in the text, nested or not.

    Results are grouped by name, not sorted by offset.
    """
    found: List[TagOccurrence] = []
    for name in names:
        pattern = re.compile(re.escape("<" + name))
        found.extend(TagOccurrence(name=name, offset=m.start()) for m in pattern.finditer(text))
    return found


def nesting_level(text: str, offset: int) -> int:
    """Approximate tag depth at ``offset`` from substring counts.

    Every "<" opens a level, "</" closes one (and was also counted as an
    opener, hence the factor of two), "/>" closes one. This is not a parse
    tree; malformed input can give odd results. Never below zero.
    """
    before = text[:offset]
    opens = before.count("<")
    closes = before.count("</")
    self_closes = before.count("/>")
    return max(0, opens - (2 * closes + self_closes))
