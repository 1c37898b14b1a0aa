"""humanized — human-readable relative time phrases."""
from .exc import MagnitudeTableError
from .magnitudes import (
    CHINESE_MAGNITUDES,
    DAY,
    DEFAULT_MAGNITUDES,
    FOREVER,
    HOUR,
    LONG_TIME,
    MINUTE,
    MONTH,
    RESOLUTION,
    SECOND,
    WEEK,
    YEAR,
    RelTimeMagnitude,
    magnitude_table,
)
from .reltime import (
    DEFAULT_FUTURE_LABEL,
    DEFAULT_PAST_LABEL,
    custom_rel_time,
    rel_time,
    time_since,
)

__all__ = [
    "CHINESE_MAGNITUDES",
    "DAY",
    "DEFAULT_FUTURE_LABEL",
    "DEFAULT_MAGNITUDES",
    "DEFAULT_PAST_LABEL",
    "FOREVER",
    "HOUR",
    "LONG_TIME",
    "MINUTE",
    "MONTH",
    "MagnitudeTableError",
    "RESOLUTION",
    "RelTimeMagnitude",
    "SECOND",
    "WEEK",
    "YEAR",
    "custom_rel_time",
    "magnitude_table",
    "rel_time",
    "time_since",
]
