"""
Floor Division — Quotient & Remainder Primitive

Модуль предоставляет целочисленное деление с floor-семантикой:
- Остаток всегда имеет знак делителя (или равен нулю)
- Частное округляется к минус бесконечности, а не к нулю
- Все календарные вычисления (високосные годы, перенос месяцев,
  нормализация смещений) строятся поверх этого примитива

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x == y * quo + mod для любых x и y != 0
2. mod == 0 или sign(mod) == sign(y)
3. |mod| < |y|
4. y == 0 → ZeroDivisionError (нарушение контракта, не восстанавливается)

ФОРМУЛЫ:
    r = x rem y            (усекающий остаток, знак числителя)
    mod = r + y            если r != 0 и sign(r) != sign(y)
    mod = r                иначе
    quo = (x - mod) / y    (деление точное: x - mod кратно y)
"""

from typing import NamedTuple

from src.core.math.integer_safeguards import validate_int


# =============================================================================
# TYPES
# =============================================================================


class QuoMod(NamedTuple):
    """Частное и остаток floor-деления."""

    quo: int
    mod: int


# =============================================================================
# FLOOR DIVISION
# =============================================================================


def _truncated_rem(x: int, y: int) -> int:
    # Остаток усекающего деления: знак совпадает со знаком числителя
    r = abs(x) % abs(y)
    return -r if x < 0 else r


def quo_mod(x: int, y: int) -> QuoMod:
    """
    Целочисленное деление с остатком знака делителя.

    Усекающий остаток корректируется в сторону знака делителя; без этой
    коррекции переход через целые годы для отрицательных смещений дня
    давал бы неверный год.

    Args:
        x: Числитель
        y: Делитель (не равен нулю)

    Returns:
        QuoMod(quo, mod), где x == y * quo + mod

    Raises:
        ZeroDivisionError: Если y == 0
        TypeError: Если x или y не int

    Examples:
        >>> quo_mod(7, 3)
        QuoMod(quo=2, mod=1)
        >>> quo_mod(-7, 3)
        QuoMod(quo=-3, mod=2)
        >>> quo_mod(7, -3)
        QuoMod(quo=-3, mod=-2)
        >>> quo_mod(-1, 12)
        QuoMod(quo=-1, mod=11)
    """
    validate_int(x, "x")
    validate_int(y, "y")
    if y == 0:
        raise ZeroDivisionError(f"quo_mod divisor must be non-zero (x={x})")

    r = _truncated_rem(x, y)
    mod = r + y if r != 0 and (r < 0) != (y < 0) else r

    # Деление точное, поэтому floor и усечение совпадают
    quo = (x - mod) // y
    return QuoMod(quo=quo, mod=mod)


def floor_quo(x: int, y: int) -> int:
    """Частное floor-деления (см. quo_mod)."""
    return quo_mod(x, y).quo


def floor_mod(x: int, y: int) -> int:
    """Остаток floor-деления, знак делителя (см. quo_mod)."""
    return quo_mod(x, y).mod
