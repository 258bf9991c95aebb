"""
Leap Rules — Proleptic Gregorian Year & Month Rules

Листовой слой календаря: правило високосного года и таблицы месяцев.
Зависит только от floor_division; не знает ни об абсолютных днях,
ни о нормализации смещений (это src.core.calendar.engine).

Правило високосного года применяется ко всем целым, включая 0 и
отрицательные годы: год 0 — високосный (делится на 4 и на 400).

Номер месяца вне [1, 12] переносится в соседние годы через quo_mod:
месяц 0 — декабрь предыдущего года, месяц 13 — январь следующего.
"""

from typing import Final

from src.core.math.floor_division import quo_mod
from src.core.math.integer_safeguards import validate_int

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12
DAYS_PER_COMMON_YEAR: Final[int] = 365
DAYS_PER_LEAP_YEAR: Final[int] = 366

FEBRUARY: Final[int] = 2

# Длины месяцев невисокосного года, индекс — месяц с нуля
MONTH_DAYS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Смещение первого дня месяца от начала невисокосного года
MONTH_START_DAYS: Final[tuple[int, ...]] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)


# =============================================================================
# ВИСОКОСНЫЙ ГОД
# =============================================================================


def is_leap(year: int) -> bool:
    """
    Является ли год високосным.

    Год високосный, если делится на 4, кроме годов, делящихся на 100,
    если они не делятся также на 400.

    Examples:
        >>> is_leap(2000)
        True
        >>> is_leap(1900)
        False
        >>> is_leap(0)
        True
    """
    validate_int(year, "year")
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leap_add(year: int) -> int:
    """Дни, добавляемые к 365-дневному году: 1 для високосного, иначе 0."""
    return 1 if is_leap(year) else 0


def days_in_year(year: int) -> int:
    """Длина года в днях: 366 или 365."""
    return DAYS_PER_COMMON_YEAR + leap_add(year)


# =============================================================================
# МЕСЯЦЫ
# =============================================================================


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """
    Перенос месяца в диапазон [1, 12] со сдвигом года.

    Args:
        year: Год
        month: Месяц с единицы, любое целое

    Returns:
        (year', month') с month' в [1, 12]

    Examples:
        >>> normalize_month(2024, 0)
        (2023, 12)
        >>> normalize_month(2024, 13)
        (2025, 1)
        >>> normalize_month(2024, -11)
        (2023, 1)
    """
    validate_int(year, "year")
    validate_int(month, "month")
    qm = quo_mod(month - 1, MONTHS_PER_YEAR)
    return year + qm.quo, qm.mod + 1


def days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце с учётом високосного февраля.

    Месяц вне [1, 12] переносится в соседний год, и проверка
    високосности выполняется уже для перенесённого года.

    Args:
        year: Год
        month: Месяц с единицы, любое целое

    Returns:
        Длина месяца в днях (28..31)

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(1900, 2)
        28
        >>> days_in_month(2024, 14)  # февраль 2025
        28
    """
    resolved_year, resolved_month = normalize_month(year, month)
    days = MONTH_DAYS[resolved_month - 1]
    if resolved_month == FEBRUARY and is_leap(resolved_year):
        days += 1
    return days


def day_of_year_start(year: int, month: int) -> int:
    """
    Смещение (с нуля) первого дня месяца от начала года.

    Смещение отсчитывается от начала ПЕРЕНЕСЁННОГО года: для month=13
    результат равен 0 (январь следующего года).

    Args:
        year: Год
        month: Месяц с единицы, любое целое

    Returns:
        День года (с нуля) первого числа месяца

    Examples:
        >>> day_of_year_start(2023, 3)
        59
        >>> day_of_year_start(2024, 3)
        60
    """
    resolved_year, resolved_month = normalize_month(year, month)
    start = MONTH_START_DAYS[resolved_month - 1]
    if resolved_month > FEBRUARY and is_leap(resolved_year):
        start += 1
    return start
