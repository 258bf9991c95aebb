"""
Leap Calendar Engine — Absolute Day ↔ Civil Date

Модуль обеспечивает двунаправленную конверсию:
- Абсолютный день (смещение от первого дня года 0) ↔ гражданская дата
- Произвольное смещение дня относительно года → нормализованная пара
  (год, день года)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. leap_day(0) == 0: якорь +1 компенсирует високосность года 0
2. leap_day(y + 1) - leap_day(y) == days_in_year(y) для любого y
3. После нормализации: 0 <= day < days_in_year(year)
4. Нормализация завершается за <= 2 прохода для переходов на один год;
   число проходов ограничено limits.max_normalize_iterations
5. absolute_day_from_date(date_from_absolute_day(d)) == d

ФОРМУЛЫ:
    leap_thru(y) = ⌊y/4⌋ - ⌊y/100⌋ + ⌊y/400⌋     (високосные годы в (0, y])
    leap_day(y)  = 365·y + leap_thru(y - 1) + 1

    Проход нормализации (days = длина текущего года):
        year0 = year + ⌊day / days⌋
        day   = day + leap_day(year) - leap_day(year0)
        year  = year0

Все функции чистые: без I/O и без общего изменяемого состояния,
безопасны для конкурентного вызова.
"""

import logging
from typing import Final

from src.core.config import DEFAULT_LIMITS, CalendarLimits
from src.core.domain.calendar_values import CivilDate, LeapOffset
from src.core.math.floor_division import quo_mod
from src.core.math.integer_safeguards import (
    check_int_range,
    checked_add,
    checked_mul,
    validate_int,
)
from src.core.math.leap_rules import (
    DAYS_PER_COMMON_YEAR,
    MONTHS_PER_YEAR,
    day_of_year_start,
    days_in_month,
    days_in_year,
    normalize_month,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NormalizationDivergenceError(RuntimeError):
    """
    Нормализация смещения не сошлась за limits.max_normalize_iterations.

    Означает регрессию логики нормализации, а не плохой ввод:
    вычисление прерывается, результат не возвращается.
    """

    pass


# =============================================================================
# АБСОЛЮТНЫЕ ДНИ
# =============================================================================


def leap_thru(year: int) -> int:
    """
    Количество високосных лет в (0, year].

    Год 0 не учитывается: его добавляет якорь +1 в leap_day, так что
    leap_thru(year - 1) + 1 — число високосных лет в [0, year). Для
    отрицательных лет результат — минус число високосных лет в (year, 0];
    floor-деление сохраняет формулу непрерывной через ноль.

    Examples:
        >>> leap_thru(4)
        1
        >>> leap_thru(100)
        24
        >>> leap_thru(400)
        97
    """
    validate_int(year, "year")
    return quo_mod(year, 4).quo - quo_mod(year, 100).quo + quo_mod(year, 400).quo


def leap_day(year: int, *, limits: CalendarLimits = DEFAULT_LIMITS) -> int:
    """
    Абсолютный номер первого дня года.

    День 0 — первый день года 0. Без якоря +1 leap_day(0) был бы -1,
    так как leap_thru(-1) == -1 (год 0 високосный).

    Args:
        year: Год
        limits: Ограничения (ширина целых)

    Returns:
        Абсолютный день 1 января года

    Raises:
        IntegerOverflowError: Если 365 * year или результат вне ширины

    Examples:
        >>> leap_day(0)
        0
        >>> leap_day(1)
        366
        >>> leap_day(1900)
        693961
    """
    validate_int(year, "year")
    base = checked_mul(year, DAYS_PER_COMMON_YEAR, "year * 365", limits.int_bits)
    return checked_add(base, leap_thru(year - 1) + 1, "leap_day", limits.int_bits)


def _year_start(year: int) -> int:
    # leap_day без проверки ширины: для промежуточных значений
    return DAYS_PER_COMMON_YEAR * year + leap_thru(year - 1) + 1


def days_between_years(year1: int, year0: int, *, limits: CalendarLimits = DEFAULT_LIMITS) -> int:
    """Число дней от 1 января year0 до 1 января year1 (знаковое)."""
    return leap_day(year1, limits=limits) - leap_day(year0, limits=limits)


# Абсолютный день 1900-01-01
LEAP_MCM: Final[int] = leap_day(1900)

# Абсолютный день 1970-01-01 (эпоха Unix)
UNIX_EPOCH_DAY: Final[int] = leap_day(1970)


# =============================================================================
# НОРМАЛИЗАЦИЯ СМЕЩЕНИЯ
# =============================================================================


def normalize_day_offset(
    year: int,
    day: int,
    *,
    limits: CalendarLimits = DEFAULT_LIMITS,
) -> LeapOffset:
    """
    Нормализация смещения дня относительно года.

    Находит единственную пару (year', day') с 0 <= day' < days_in_year(year'),
    обозначающую тот же абсолютный день. Переход на целые годы выполняется
    floor-делением на длину текущего года; разница длин 365/366 может дать
    перескок на один год, поэтому проходов может быть несколько.

    Args:
        year: Год отсчёта
        day: Смещение дня (может быть отрицательным или больше длины года)
        limits: Ограничения (ширина целых, cap проходов)

    Returns:
        LeapOffset(year', day')

    Raises:
        TypeError: Если year или day не int
        IntegerOverflowError: Если year, day или итоговый абсолютный день
            выходят за ширину
        NormalizationDivergenceError: Если превышен cap проходов

    Examples:
        >>> normalize_day_offset(1, -1)
        LeapOffset(year=0, day=365)
        >>> normalize_day_offset(1900, 1000)
        LeapOffset(year=1902, day=270)
    """
    validate_int(year, "year")
    validate_int(day, "day")
    check_int_range(year, "year", limits.int_bits)
    check_int_range(day, "day", limits.int_bits)

    days = days_in_year(year)
    passes = 0
    while day < 0 or day >= days:
        if passes >= limits.max_normalize_iterations:
            logger.critical(
                "Day offset normalization diverged after %d passes: year=%d day=%d",
                passes,
                year,
                day,
            )
            raise NormalizationDivergenceError(
                f"normalize_day_offset did not converge within "
                f"{limits.max_normalize_iterations} passes (year={year}, day={day})"
            )
        passes += 1

        # Промежуточный year0 может перескочить итоговый год на единицу;
        # ширину проверяет только итоговый абсолютный день
        year0 = year + quo_mod(day, days).quo
        day += _year_start(year) - _year_start(year0)
        year = year0
        days = days_in_year(year)

    check_int_range(_year_start(year) + day, "absolute_day", limits.int_bits)

    if passes > 1:
        logger.debug("Day offset normalized in %d passes: year=%d day=%d", passes, year, day)

    return LeapOffset(year=year, day=day)


# =============================================================================
# КОНВЕРСИЯ ДАТ
# =============================================================================


def date_from_leap_offset(offset: LeapOffset) -> CivilDate:
    """
    Гражданская дата из УЖЕ нормализованной пары.

    Последовательно вычитает длины месяцев; нормализация гарантирует
    завершение не более чем за 12 шагов. Принимает и обычный кортеж
    (year, day).

    Raises:
        ValueError: Если пара не нормализована
    """
    offset = LeapOffset(*offset)
    year, day = offset
    if not offset.is_normalized:
        raise ValueError(
            f"LeapOffset not normalized: day {day} outside [0, {days_in_year(year)}) of {year}"
        )

    for month in range(1, MONTHS_PER_YEAR + 1):
        length = days_in_month(year, month)
        if day < length:
            return CivilDate(year=year, month=month, day=day + 1)
        day -= length

    raise RuntimeError(f"Month scan exhausted for normalized offset {offset!r}")


def date_from_offset(
    year: int,
    day_offset: int,
    *,
    limits: CalendarLimits = DEFAULT_LIMITS,
) -> CivilDate:
    """
    Гражданская дата по смещению дня от начала года.

    Examples:
        >>> str(date_from_offset(1900, 364))
        '1900-12-31'
        >>> str(date_from_offset(1, 365))
        '0002-01-01'
    """
    return date_from_leap_offset(normalize_day_offset(year, day_offset, limits=limits))


def offset_from_date(
    year: int,
    month: int,
    day: int,
    *,
    limits: CalendarLimits = DEFAULT_LIMITS,
) -> LeapOffset:
    """
    Нормализованная пара (год, день года) для даты.

    Месяц 0 или 13, а также день 0 или отрицательный день переносятся
    в соседние месяцы и годы.

    Args:
        year: Год
        month: Месяц с единицы (любое целое)
        day: День месяца с единицы (любое целое)
        limits: Ограничения

    Returns:
        LeapOffset(year', day')

    Examples:
        >>> offset_from_date(2024, 0, 0)
        LeapOffset(year=2023, day=333)
    """
    validate_int(day, "day")
    resolved_year, resolved_month = normalize_month(year, month)
    day_offset = day_of_year_start(resolved_year, resolved_month) + day - 1
    return normalize_day_offset(resolved_year, day_offset, limits=limits)


def absolute_day_from_date(
    year: int,
    month: int,
    day: int,
    *,
    limits: CalendarLimits = DEFAULT_LIMITS,
) -> int:
    """
    Абсолютный день для даты.

    Examples:
        >>> absolute_day_from_date(0, 1, 1)
        0
        >>> absolute_day_from_date(1970, 1, 1) - absolute_day_from_date(1900, 1, 1)
        25567
    """
    offset = offset_from_date(year, month, day, limits=limits)
    # Ширина уже проверена нормализацией: 1 января года offset.year
    # может лежать ниже нижней границы, сам день нет
    return _year_start(offset.year) + offset.day


def date_from_absolute_day(day: int, *, limits: CalendarLimits = DEFAULT_LIMITS) -> CivilDate:
    """Гражданская дата для абсолютного дня (смещение от года 0)."""
    return date_from_offset(0, day, limits=limits)
