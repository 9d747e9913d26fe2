"""Value Objects of the booking domain."""

from booking_engine.domain.value_objects.date_range import DateRange, count_days, parse_day
from booking_engine.domain.value_objects.money import Money, round_money

__all__ = [
    "DateRange",
    "Money",
    "count_days",
    "parse_day",
    "round_money",
]
