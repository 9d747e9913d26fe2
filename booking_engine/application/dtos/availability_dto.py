from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass
class AvailabilityResult:
    """Outcome of an availability check for an inclusive date range."""

    is_available: bool
    available_dates: list[date] = field(default_factory=list)
    unavailable_dates: list[date] = field(default_factory=list)
    price_per_day: Decimal = Decimal("0")
    error_message: str | None = None
    error_code: str | None = None

    @classmethod
    def rejected(cls, message: str, code: str) -> "AvailabilityResult":
        return cls(is_available=False, error_message=message, error_code=code)


@dataclass(frozen=True)
class PriceQuote:
    offer_id: int
    start_date: date
    end_date: date
    days_count: int
    price_per_day: Decimal
    total_price: Decimal
