"""User-facing texts of the booking flows."""

from decimal import Decimal

from booking_engine.domain.constants import MAX_BOOKING_DAYS, MIN_BOOKING_DAYS, SAME_DAY_CUTOFF_HOUR
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.value_objects.money import Money

OFFER_NOT_FOUND = "Offer not found."
OFFER_INACTIVE = "Offer is not active."
START_IN_PAST = "Start date cannot be in the past."
SAME_DAY_CUTOFF = f"Same-day bookings are only possible until {SAME_DAY_CUTOFF_HOUR}:00."
END_BEFORE_START = "End date must not be before the start date."
RANGE_LENGTH = f"Bookings must be between {MIN_BOOKING_DAYS} and {MAX_BOOKING_DAYS} days."
NOT_AVAILABLE = "Selected period is not available."
TERMS_REQUIRED = "You must accept the terms and conditions to make a booking."
WITHDRAWAL_REQUIRED = "You must acknowledge the withdrawal right notice."
SELF_BOOKING = "You cannot book your own offer."
BOOKING_NOT_FOUND = "Booking not found."
CANCEL_FORBIDDEN = "You are not allowed to cancel this booking."
NOT_CANCELLABLE = "This booking can no longer be cancelled."
BOOKING_FAILED = "Could not complete the booking."
CANCEL_FAILED = "Could not cancel the booking."

DATE_FORMAT = "%d.%m.%Y"


def _format_price(amount: Decimal, currency_code: str) -> str:
    return str(Money(amount, currency_code))


def booking_confirmed_text(
    offer_title: str,
    booking: Booking,
    customer_name: str,
    currency_code: str = "EUR",
) -> str:
    return (
        f"New booking for '{offer_title}' confirmed!\n\n"
        f"Period: {booking.start_date:{DATE_FORMAT}} to {booking.end_date:{DATE_FORMAT}}\n"
        f"Duration: {booking.days_count} day(s)\n"
        f"Total price: {_format_price(booking.total_price, currency_code)}\n"
        f"Customer: {customer_name}\n\n"
        "The booking was confirmed automatically and the period is now blocked."
    )


def booking_cancelled_text(
    offer_title: str,
    booking: Booking,
    provider_name: str,
    reason: str | None = None,
    currency_code: str = "EUR",
) -> str:
    text = (
        f"Booking cancelled: '{offer_title}'\n\n"
        f"Period: {booking.start_date:{DATE_FORMAT}} to {booking.end_date:{DATE_FORMAT}}\n"
        f"Duration: {booking.days_count} day(s)\n"
        f"Total price: {_format_price(booking.total_price, currency_code)}\n"
        f"Provider: {provider_name}\n"
        f"Booking ID: #{booking.id}\n\n"
        "This booking was cancelled by the provider. The period is available again."
    )
    if reason and reason.strip():
        text += f"\n\nReason: {reason.strip()}"
    return text
