"""
Leap Calendar Engine

Конверсия абсолютный день ↔ гражданская дата (пролептический григорианский
календарь) поверх floor-деления.
"""

from src.core.calendar.engine import (
    LEAP_MCM,
    UNIX_EPOCH_DAY,
    NormalizationDivergenceError,
    absolute_day_from_date,
    date_from_absolute_day,
    date_from_leap_offset,
    date_from_offset,
    days_between_years,
    leap_day,
    leap_thru,
    normalize_day_offset,
    offset_from_date,
)

__all__ = [
    # Constants
    "LEAP_MCM",
    "UNIX_EPOCH_DAY",
    # Exceptions
    "NormalizationDivergenceError",
    # Absolute days
    "days_between_years",
    "leap_day",
    "leap_thru",
    # Normalization
    "normalize_day_offset",
    # Date conversion
    "absolute_day_from_date",
    "date_from_absolute_day",
    "date_from_leap_offset",
    "date_from_offset",
    "offset_from_date",
]
