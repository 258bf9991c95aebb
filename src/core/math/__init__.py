"""
Core math modules для календарного ядра

Целочисленные примитивы: floor-деление, контроль ширины целых,
правила високосного года и таблицы месяцев.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    # Bounds
    DEFAULT_INT_BITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    # Exceptions
    IntegerOverflowError,
    # Checks
    check_int_range,
    checked_add,
    checked_mul,
    int_bounds,
    is_int_value,
    validate_int,
)

# Floor Division
from src.core.math.floor_division import (
    QuoMod,
    floor_mod,
    floor_quo,
    quo_mod,
)

# Leap Rules
from src.core.math.leap_rules import (
    DAYS_PER_COMMON_YEAR,
    DAYS_PER_LEAP_YEAR,
    FEBRUARY,
    MONTH_DAYS,
    MONTH_START_DAYS,
    MONTHS_PER_YEAR,
    day_of_year_start,
    days_in_month,
    days_in_year,
    is_leap,
    leap_add,
    normalize_month,
)

__all__ = [
    # Integer Safeguards — Bounds
    "DEFAULT_INT_BITS",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    # Integer Safeguards — Exceptions
    "IntegerOverflowError",
    # Integer Safeguards — Checks
    "check_int_range",
    "checked_add",
    "checked_mul",
    "int_bounds",
    "is_int_value",
    "validate_int",
    # Floor Division
    "QuoMod",
    "floor_mod",
    "floor_quo",
    "quo_mod",
    # Leap Rules — Constants
    "DAYS_PER_COMMON_YEAR",
    "DAYS_PER_LEAP_YEAR",
    "FEBRUARY",
    "MONTH_DAYS",
    "MONTH_START_DAYS",
    "MONTHS_PER_YEAR",
    # Leap Rules — Functions
    "day_of_year_start",
    "days_in_month",
    "days_in_year",
    "is_leap",
    "leap_add",
    "normalize_month",
]
