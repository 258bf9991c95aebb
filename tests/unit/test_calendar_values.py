"""
Тесты для календарных значений: LeapOffset, CivilDate

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Длину месяца с учётом високосного февраля
3. Immutability (frozen=True) и strict-типы
4. Сравнение, хеширование, порядок
5. Сериализацию в контракт и обратно
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import CivilDate, LeapOffset


# =============================================================================
# LEAP OFFSET TESTS
# =============================================================================


class TestLeapOffset:
    """Тесты для LeapOffset"""

    def test_compares_with_plain_tuple(self) -> None:
        assert LeapOffset(2024, 365) == (2024, 365)
        assert LeapOffset(year=1900, day=0) == (1900, 0)

    def test_is_normalized(self) -> None:
        assert LeapOffset(2024, 365).is_normalized
        assert not LeapOffset(2023, 365).is_normalized
        assert not LeapOffset(2023, -1).is_normalized
        assert LeapOffset(0, 365).is_normalized  # год 0 високосный

    def test_as_dict(self) -> None:
        assert LeapOffset(2024, 59)._asdict() == {"year": 2024, "day": 59}


# =============================================================================
# CIVIL DATE TESTS
# =============================================================================


class TestCivilDate:
    """Тесты для модели CivilDate"""

    @pytest.fixture
    def leap_day_2024(self) -> CivilDate:
        """29 февраля високосного года"""
        return CivilDate(year=2024, month=2, day=29)

    def test_valid_leap_day(self, leap_day_2024: CivilDate) -> None:
        assert leap_day_2024.as_tuple() == (2024, 2, 29)

    def test_february_29_of_common_year_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceeds 28 days"):
            CivilDate(year=2023, month=2, day=29)

    def test_century_rule(self) -> None:
        """1900 не високосный, 2000 високосный"""
        with pytest.raises(ValidationError):
            CivilDate(year=1900, month=2, day=29)
        assert CivilDate(year=2000, month=2, day=29).day == 29

    def test_short_months(self) -> None:
        with pytest.raises(ValidationError):
            CivilDate(year=2024, month=4, day=31)
        assert CivilDate(year=2024, month=3, day=31).day == 31

    def test_month_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            CivilDate(year=2024, month=0, day=1)
        with pytest.raises(ValidationError):
            CivilDate(year=2024, month=13, day=1)

    def test_day_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            CivilDate(year=2024, month=1, day=0)
        with pytest.raises(ValidationError):
            CivilDate(year=2024, month=1, day=32)

    def test_negative_and_zero_years(self) -> None:
        assert CivilDate(year=0, month=2, day=29).year == 0
        assert CivilDate(year=-1, month=12, day=31).year == -1
        with pytest.raises(ValidationError):
            CivilDate(year=-1, month=2, day=29)

    def test_strict_types(self) -> None:
        """float и строки не приводятся молча"""
        with pytest.raises(ValidationError):
            CivilDate(year=2024.0, month=1, day=1)
        with pytest.raises(ValidationError):
            CivilDate(year=2024, month="1", day=1)

    def test_immutable(self, leap_day_2024: CivilDate) -> None:
        with pytest.raises(ValidationError):
            leap_day_2024.day = 1

    def test_equality_and_hash(self, leap_day_2024: CivilDate) -> None:
        same = CivilDate(year=2024, month=2, day=29)
        assert leap_day_2024 == same
        assert hash(leap_day_2024) == hash(same)
        assert len({leap_day_2024, same}) == 1

    def test_ordering(self) -> None:
        a = CivilDate(year=2023, month=12, day=31)
        b = CivilDate(year=2024, month=1, day=1)
        c = CivilDate(year=2024, month=1, day=2)
        assert a < b < c
        assert c > a
        assert a <= a
        assert sorted([c, a, b]) == [a, b, c]

    def test_str(self, leap_day_2024: CivilDate) -> None:
        assert str(leap_day_2024) == "2024-02-29"
        assert str(CivilDate(year=1, month=1, day=1)) == "0001-01-01"

    def test_contract_round_trip(self, leap_day_2024: CivilDate) -> None:
        payload = leap_day_2024.to_contract()
        assert payload == {"year": 2024, "month": 2, "day": 29}
        assert CivilDate.from_contract(json.loads(json.dumps(payload))) == leap_day_2024

    def test_from_contract_rejects_invalid_day(self) -> None:
        with pytest.raises(ValidationError):
            CivilDate.from_contract({"year": 2023, "month": 2, "day": 29})
