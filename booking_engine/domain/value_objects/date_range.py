"""Value Object DateRange - inclusive range of whole calendar days."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta

from booking_engine.domain.errors import InvalidDateFormatError, InvalidDateRangeError

_DAY_FORMAT = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a date."""
    if not isinstance(value, str) or not _DAY_FORMAT.fullmatch(value.strip()):
        raise InvalidDateFormatError(value)
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise InvalidDateFormatError(value) from None


def count_days(start: date, end: date) -> int:
    """Number of days in the inclusive range ``[start, end]``."""
    return (end - start).days + 1


@dataclass(frozen=True)
class DateRange:
    """
    Immutable inclusive range of calendar days.

    Both ``start`` and ``end`` belong to the range, so a booking from the
    3rd to the 5th covers three days.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidDateRangeError(
                f"End date {self.end.isoformat()} is before start date {self.start.isoformat()}."
            )

    @property
    def days_count(self) -> int:
        return count_days(self.start, self.end)

    def days(self) -> Iterator[date]:
        """Yield every day of the range in order."""
        for offset in range(self.days_count):
            yield self.start + timedelta(days=offset)

    def overlaps_with(self, other: "DateRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def intersection(self, other: "DateRange") -> "DateRange | None":
        if not self.overlaps_with(other):
            return None
        return DateRange(start=max(self.start, other.start), end=min(self.end, other.end))

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"
