from datetime import date
from decimal import Decimal

import pytest

from booking_engine.domain.errors import InvalidDateFormatError, InvalidDateRangeError
from booking_engine.domain.value_objects import DateRange, Money, count_days, parse_day


def test_count_days_is_inclusive():
    assert count_days(date(2026, 3, 3), date(2026, 3, 5)) == 3
    assert count_days(date(2026, 3, 3), date(2026, 3, 3)) == 1


def test_date_range_days_and_count_agree():
    date_range = DateRange(date(2026, 3, 30), date(2026, 4, 2))
    days = list(date_range.days())
    assert len(days) == date_range.days_count == 4
    assert days[0] == date(2026, 3, 30)
    assert days[-1] == date(2026, 4, 2)


def test_date_range_rejects_end_before_start():
    with pytest.raises(InvalidDateRangeError):
        DateRange(date(2026, 3, 5), date(2026, 3, 4))


def test_overlap_counts_shared_boundary_day():
    first = DateRange(date(2026, 3, 3), date(2026, 3, 5))
    assert first.overlaps_with(DateRange(date(2026, 3, 5), date(2026, 3, 7)))
    assert not first.overlaps_with(DateRange(date(2026, 3, 6), date(2026, 3, 7)))


def test_intersection():
    first = DateRange(date(2026, 3, 3), date(2026, 3, 5))
    assert first.intersection(DateRange(date(2026, 3, 4), date(2026, 3, 9))) == DateRange(
        date(2026, 3, 4), date(2026, 3, 5)
    )
    assert first.intersection(DateRange(date(2026, 3, 6), date(2026, 3, 9))) is None


@pytest.mark.parametrize("value", ["2026-13-01", "03/04/2026", "", "tomorrow", "20260304", "2026-W10-3"])
def test_parse_day_rejects_malformed_values(value):
    with pytest.raises(InvalidDateFormatError) as exc_info:
        parse_day(value)
    assert exc_info.value.message == "Invalid date format. Use YYYY-MM-DD."


def test_parse_day():
    assert parse_day("2026-03-04") == date(2026, 3, 4)


def test_money_rounds_half_up_to_cents():
    assert Money(Decimal("2.345")).amount == Decimal("2.35")
    assert Money(Decimal("45")).percentage(Decimal("0.20")).amount == Decimal("9.00")
