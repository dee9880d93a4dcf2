"""Orthodox Easter and the movable observances derived from it."""

from .easter import (
    InvalidYear,
    compute_easter,
    orthodox_easter,
    next_or_same_sunday,
    offset,
    days_from_easter,
    resolve_saint_george,
    resolve_mark_evangelist,
)
from .observances import Observance, OBSERVANCES, OBSERVANCE_OFFSETS
from .engine import EasterEngine
from .calendar_flags import (
    ObservanceConfig,
    config_from_env,
    observances_frame,
    observances_range,
    add_observance_flags,
)

__all__ = [
    "InvalidYear",
    "compute_easter",
    "orthodox_easter",
    "next_or_same_sunday",
    "offset",
    "days_from_easter",
    "resolve_saint_george",
    "resolve_mark_evangelist",
    "Observance",
    "OBSERVANCES",
    "OBSERVANCE_OFFSETS",
    "EasterEngine",
    "ObservanceConfig",
    "config_from_env",
    "observances_frame",
    "observances_range",
    "add_observance_flags",
]
