from dataclasses import dataclass

from booking_engine.domain.entities.booking import Booking

# Result codes shared by the booking flows
CODE_VALIDATION = "VALIDATION_ERROR"
CODE_OFFER_NOT_FOUND = "OFFER_NOT_FOUND"
CODE_OFFER_INACTIVE = "OFFER_INACTIVE"
CODE_SELF_BOOKING = "SELF_BOOKING"
CODE_NOT_AVAILABLE = "NOT_AVAILABLE"
CODE_PRICING = "PRICING_ERROR"
CODE_BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
CODE_FORBIDDEN = "FORBIDDEN"
CODE_INVALID_STATUS = "INVALID_BOOKING_STATUS"
CODE_INFRASTRUCTURE = "INFRASTRUCTURE_ERROR"


@dataclass
class BookingResult:
    """Structured result of the booking orchestrator's write operations."""

    success: bool
    booking: Booking | None = None
    error_message: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, booking: Booking) -> "BookingResult":
        return cls(success=True, booking=booking)

    @classmethod
    def failure(cls, message: str, code: str) -> "BookingResult":
        return cls(success=False, error_message=message, error_code=code)
