"""
Calendar Values — Значения календарного ядра

LeapOffset: нормализованная пара (год, день года с нуля).
CivilDate: гражданская дата (год, месяц, день месяца с единицы).

Оба типа — неизменяемые значения без владения и без общего состояния.
LeapOffset — NamedTuple (эфемерный результат нормализации, сравнивается
с обычным кортежем). CivilDate — frozen Pydantic модель с проверкой
длины месяца (високосный февраль учитывается).
"""

from functools import total_ordering
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.validators import (
    CIVIL_DATE_CONTRACT,
    LEAP_OFFSET_CONTRACT,
    check_contract,
)
from src.core.math.leap_rules import days_in_month, days_in_year


# =============================================================================
# LEAP OFFSET
# =============================================================================


class LeapOffset(NamedTuple):
    """
    Пара (год, смещение дня от начала года).

    После нормализации: 0 <= day < days_in_year(year).
    """

    year: int
    day: int

    @property
    def is_normalized(self) -> bool:
        """Выполняется ли инвариант 0 <= day < days_in_year(year)."""
        return 0 <= self.day < days_in_year(self.year)

    def to_contract(self) -> dict[str, int]:
        """
        Представление для leap_offset контракта.

        Raises:
            ValueError: Если пара не нормализована
        """
        if not self.is_normalized:
            raise ValueError(f"LeapOffset not normalized: {tuple(self)!r}")
        payload = self._asdict()
        check_contract(LEAP_OFFSET_CONTRACT, payload)
        return payload

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "LeapOffset":
        """
        Создание из leap_offset контракта.

        Схема допускает day == 365 для любого года; 365 в невисокосном
        году отсекается проверкой нормализации.

        Raises:
            jsonschema.ValidationError: Если payload нарушает контракт
            ValueError: Если пара не нормализована
        """
        check_contract(LEAP_OFFSET_CONTRACT, data)
        offset = cls(year=data["year"], day=data["day"])
        if not offset.is_normalized:
            raise ValueError(f"LeapOffset not normalized: {tuple(offset)!r}")
        return offset


# =============================================================================
# CIVIL DATE MODEL
# =============================================================================


@total_ordering
class CivilDate(BaseModel):
    """
    Гражданская дата пролептического григорианского календаря.

    Immutable модель (frozen=True). Поля строго целые (strict=True):
    float и строки не приводятся молча.

    Годы не ограничены снизу: год 0 и отрицательные годы допустимы
    и следуют тем же правилам високосности.
    """

    year: int = Field(..., description="Год (любое целое, год 0 — високосный)")
    month: int = Field(..., ge=1, le=12, description="Месяц с единицы")
    day: int = Field(..., ge=1, le=31, description="День месяца с единицы")

    model_config = {"frozen": True, "strict": True}  # Immutable

    @field_validator("day")
    @classmethod
    def validate_day_in_month(cls, v: int, info) -> int:
        """
        Проверка, что день не превышает длину месяца.

        Февраль високосного года — 29 дней, иначе 28.
        """
        if "year" not in info.data or "month" not in info.data:
            return v

        year = info.data["year"]
        month = info.data["month"]
        limit = days_in_month(year, month)
        if v > limit:
            raise ValueError(f"day {v} exceeds {limit} days of {year:04d}-{month:02d}")
        return v

    def as_tuple(self) -> tuple[int, int, int]:
        """(year, month, day)"""
        return (self.year, self.month, self.day)

    def to_contract(self) -> dict[str, int]:
        """
        Представление для civil_date контракта.

        Raises:
            jsonschema.ValidationError: Год вне 64-битного диапазона контракта
        """
        payload = self.model_dump()
        check_contract(CIVIL_DATE_CONTRACT, payload)
        return payload

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "CivilDate":
        """
        Создание из civil_date контракта.

        Сначала форма по схеме, затем длина месяца по модели.

        Raises:
            jsonschema.ValidationError: Если payload нарушает контракт
            pydantic.ValidationError: Если день превышает длину месяца
        """
        return cls.model_validate(check_contract(CIVIL_DATE_CONTRACT, data))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
