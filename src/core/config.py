"""
Calendar Limits — Engine Configuration

Immutable Pydantic модель ограничений календарного движка.

Конфигурация передаётся явно (keyword `limits=`) в операции движка;
глобального изменяемого состояния нет. DEFAULT_LIMITS покрывает весь
64-битный диапазон дней.
"""

from typing import Final, Literal

from pydantic import BaseModel, Field

# Минимально допустимый cap: переход через один год может потребовать
# второго прохода (перескок на год из-за разницы длин 365/366)
MIN_NORMALIZE_ITERATIONS: Final[int] = 2

# Каждый проход сокращает остаточную ошибку примерно в 365 раз:
# для смещений порядка 2**63 дней достаточно ~9 проходов
DEFAULT_NORMALIZE_ITERATIONS: Final[int] = 16


class CalendarLimits(BaseModel):
    """
    Ограничения календарного движка.

    Immutable модель (frozen=True): экземпляр безопасно разделяется
    между потоками.
    """

    int_bits: Literal[32, 64] = Field(
        64, description="Знаковая ширина целых, за пределами которой — IntegerOverflowError"
    )
    max_normalize_iterations: int = Field(
        DEFAULT_NORMALIZE_ITERATIONS,
        ge=MIN_NORMALIZE_ITERATIONS,
        description="Cap на число проходов нормализации смещения дня",
    )

    model_config = {"frozen": True, "strict": True}  # Immutable


DEFAULT_LIMITS: Final[CalendarLimits] = CalendarLimits()
