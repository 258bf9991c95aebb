"""
Integer Safeguards — Integer Domain Guards

Модуль обеспечивает контроль целочисленного домена календарной арифметики:
- Проверка типа аргументов (int, но не bool/float)
- Границы знаковых целых фиксированной ширины (32/64 бит)
- Проверенное умножение и сложение с fail-fast при выходе за ширину

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Python int не переполняется, поэтому переполнение эмулируется явно:
   любое значение вне выбранной ширины → IntegerOverflowError
2. Wraparound никогда не происходит (ни в debug, ни в release)
3. bool не считается целым числом домена (True + 1 — ошибка ввода)
4. Все операции детерминированы и не имеют состояния
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ ЗНАКОВЫХ ЦЕЛЫХ
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Ширина по умолчанию для всех календарных вычислений
DEFAULT_INT_BITS: Final[int] = 64

_BOUNDS: Final[dict[int, tuple[int, int]]] = {
    32: (INT32_MIN, INT32_MAX),
    64: (INT64_MIN, INT64_MAX),
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflowError(OverflowError):
    """
    Значение вышло за пределы выбранной знаковой ширины.

    Документированное поведение переполнения: вычисление прерывается
    немедленно, результат с wraparound никогда не возвращается.
    """

    pass


# =============================================================================
# ПРОВЕРКИ ТИПА
# =============================================================================


def int_bounds(bits: int = DEFAULT_INT_BITS) -> tuple[int, int]:
    """
    Границы знакового целого заданной ширины.

    Args:
        bits: Ширина в битах (32 или 64)

    Returns:
        (min, max) включительно

    Raises:
        ValueError: Если ширина не поддерживается

    Examples:
        >>> int_bounds(32)
        (-2147483648, 2147483647)
    """
    try:
        return _BOUNDS[bits]
    except KeyError:
        raise ValueError(f"bits must be 32 or 64, got {bits}") from None


def is_int_value(value: object) -> bool:
    """
    Является ли значение целым числом домена.

    bool — подкласс int в Python, но в календарной арифметике это почти
    всегда ошибка вызывающего кода, поэтому bool отклоняется.

    Examples:
        >>> is_int_value(5)
        True
        >>> is_int_value(True)
        False
        >>> is_int_value(5.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int(value: object, name: str) -> int:
    """
    Валидация, что значение — целое число домена.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if not is_int_value(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return value  # type: ignore[return-value]


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def check_int_range(value: int, name: str, bits: int = DEFAULT_INT_BITS) -> int:
    """
    Проверка, что целое помещается в знаковую ширину.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        bits: Ширина в битах

    Returns:
        value без изменений

    Raises:
        IntegerOverflowError: Если value вне [min, max] для ширины

    Examples:
        >>> check_int_range(2**31 - 1, "x", bits=32)
        2147483647
    """
    lo, hi = int_bounds(bits)
    if value < lo or value > hi:
        raise IntegerOverflowError(
            f"{name}={value} overflows signed {bits}-bit range [{lo}, {hi}]"
        )
    return value


def checked_mul(a: int, b: int, name: str, bits: int = DEFAULT_INT_BITS) -> int:
    """Произведение a * b с проверкой ширины."""
    return check_int_range(a * b, name, bits)


def checked_add(a: int, b: int, name: str, bits: int = DEFAULT_INT_BITS) -> int:
    """Сумма a + b с проверкой ширины."""
    return check_int_range(a + b, name, bits)
