"""Central config: tag tables and compile defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Rider Parameters
FTP_WATTS: float = 250.0

# Workout file reading
FILE_ENCODING: str = "utf-8"

# Tags that become Segments, in the order the segment kinds are declared
SEGMENT_TAGS: Tuple[str, ...] = (
    "Warmup",
    "SteadyState",
    "Cooldown",
    "FreeRide",
    "Freeride",  # distinct tag from FreeRide, different field set
    "IntervalsT",
    "MaxEffort",
    "Ramp",
    "RestDay",
    "SolidState",
)

# Tags that become Annotations
ANNOTATION_TAGS: Tuple[str, ...] = (
    "textevent",
    "TextEvent",
    "TextNotification",
)

# Annotations nested deeper than this point back at the preceding segment
BACKREF_MIN_LEVEL: int = 2


@dataclass
class CompileSettings:
    """Options for turning a Workout into a timeline."""
    continuous_time: bool = False  # re-base elapsed time across segments
    ftp_watts: Optional[float] = None  # adds a power_w column on timeline export when set


settings = CompileSettings()


def get_settings() -> CompileSettings:
    """Get the global compile settings instance."""
    return settings


def reset_settings() -> CompileSettings:
    """Reset compile settings to defaults."""
    global settings
    settings = CompileSettings()
    return settings
