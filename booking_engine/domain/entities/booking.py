"""Booking entity - one reservation of an offer for an inclusive date range."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from booking_engine.domain.errors import InvalidBookingStatusError
from booking_engine.domain.value_objects.date_range import DateRange


class BookingStatus(str, Enum):
    """Bookings are confirmed on creation; there is no pending state."""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


@dataclass
class Booking:
    """
    Entry of the booking ledger.

    Holds ids of its offer and customer, never the objects themselves.
    """

    offer_id: int
    customer_id: int
    start_date: date
    end_date: date
    total_price: Decimal
    days_count: int
    created_at: datetime
    id: int | None = None
    status: BookingStatus = BookingStatus.CONFIRMED
    confirmed_at: datetime | None = None

    # Legal consent
    terms_accepted: bool = False
    terms_accepted_at: datetime | None = None
    withdrawal_right_acknowledged: bool = False
    withdrawal_right_acknowledged_at: datetime | None = None

    # Cancellation audit
    cancellation_reason: str | None = None
    cancelled_at: datetime | None = None

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    @property
    def is_confirmed(self) -> bool:
        return self.status == BookingStatus.CONFIRMED

    @property
    def can_be_cancelled(self) -> bool:
        return self.status == BookingStatus.CONFIRMED

    def cancel(self, cancelled_at: datetime, reason: str | None = None) -> None:
        if not self.can_be_cancelled:
            raise InvalidBookingStatusError(self.id or 0, self.status.value, "cancel")
        self.status = BookingStatus.CANCELLED
        self.cancelled_at = cancelled_at
        self.cancellation_reason = reason

    def complete(self) -> None:
        """Marks the booking as completed (driven by an external job)."""
        if self.status != BookingStatus.CONFIRMED:
            raise InvalidBookingStatusError(self.id or 0, self.status.value, "complete")
        self.status = BookingStatus.COMPLETED

    @classmethod
    def confirmed(
        cls,
        offer_id: int,
        customer_id: int,
        date_range: DateRange,
        price_per_day: Decimal,
        now: datetime,
    ) -> "Booking":
        """Creates an auto-confirmed booking with both consents recorded at ``now``."""
        days_count = date_range.days_count
        return cls(
            offer_id=offer_id,
            customer_id=customer_id,
            start_date=date_range.start,
            end_date=date_range.end,
            total_price=price_per_day * days_count,
            days_count=days_count,
            status=BookingStatus.CONFIRMED,
            created_at=now,
            confirmed_at=now,
            terms_accepted=True,
            terms_accepted_at=now,
            withdrawal_right_acknowledged=True,
            withdrawal_right_acknowledged_at=now,
        )
