from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from ..config import FILE_ENCODING
from ..models.types import RawDocument

logger = logging.getLogger(__name__)


def load_document(file_path: Union[str, Path]) -> RawDocument:
    """Read a .zwo file in full.

    Undecodable bytes are replaced rather than rejected; tag and attribute
    names are plain ASCII so substring search is unaffected.
    """
    path = str(file_path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Workout file not found: {path}")
    with open(path, "r", encoding=FILE_ENCODING, errors="replace") as f:
        text = f.read()
    logger.info(f"Loaded workout file {path} ({len(text)} chars)")
    return RawDocument(text=text, source_path=path)
