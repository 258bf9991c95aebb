"""
Перекрёстная проверка ядра против календаря стандартной библиотеки

Коллаборатор tests/support/host_calendar считает дни через
calendar.timegm и datetime.date, независимо от ядра.

Проверяет:
1. Расстояния между 1 января лет y0 в [1970, 2025) и y0 + s, s в [1, 50)
2. Расстояния до 1970 года (timegm работает и с отрицательными секундами)
3. Абсолютные дни и даты против date.toordinal на годах 1..9999
"""

from datetime import date

from src.core.calendar import (
    UNIX_EPOCH_DAY,
    absolute_day_from_date,
    date_from_absolute_day,
    leap_day,
)
from tests.support.host_calendar import (
    ORDINAL_TO_ABSOLUTE_SHIFT,
    diff_days,
    host_absolute_day,
    mkdays,
)


class TestHostYearDistances:
    """Расстояния между годами: ядро против timegm"""

    def test_spans_from_unix_epoch_years(self) -> None:
        for y0 in range(1970, 2025):
            for span in range(1, 50):
                assert diff_days(y0 + span, y0) == 0, (y0, span)

    def test_spans_before_1970(self) -> None:
        for y0 in range(1800, 1970, 7):
            for span in range(1, 50, 3):
                assert diff_days(y0 + span, y0) == 0, (y0, span)

    def test_mkdays_epoch(self) -> None:
        assert mkdays(1970, 1, 1) == 0
        assert mkdays(1970, 2, 1) == 31

    def test_absolute_day_minus_epoch_matches_mkdays(self) -> None:
        for year in (1900, 1970, 2000, 2024, 2038):
            for month in range(1, 13):
                core = absolute_day_from_date(year, month, 15) - leap_day(1970)
                assert core == mkdays(year, month, 15)


class TestHostOrdinals:
    """Абсолютные дни: ядро против date.toordinal"""

    def test_shift(self) -> None:
        assert leap_day(1) == date(1, 1, 1).toordinal() + ORDINAL_TO_ABSOLUTE_SHIFT
        assert UNIX_EPOCH_DAY == host_absolute_day(1970, 1, 1)

    def test_date_from_absolute_day_matches_fromordinal(self) -> None:
        for d in range(leap_day(1), leap_day(10000), 997):
            civil = date_from_absolute_day(d)
            host = date.fromordinal(d - ORDINAL_TO_ABSOLUTE_SHIFT)
            assert civil.as_tuple() == (host.year, host.month, host.day), d

    def test_absolute_day_from_date_matches_toordinal(self) -> None:
        for year in range(1, 10000, 37):
            for month in (1, 2, 3, 12):
                for day in (1, 15, 28):
                    assert absolute_day_from_date(year, month, day) == host_absolute_day(
                        year, month, day
                    )
