from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, constr

from booking_engine.domain.entities.booking import BookingStatus

# Dates stay strings here so malformed values get the engine's own message.
DayString = constr(strip_whitespace=True, min_length=1, max_length=32)


class AvailabilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_available: bool
    available_dates: list[date]
    unavailable_dates: list[date]
    price_per_day: Decimal
    error_message: str | None = None
    error_code: str | None = None


class BookedDatesResponse(BaseModel):
    offer_id: int
    booked_dates: list[date]


class PriceQuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    offer_id: int
    start_date: date
    end_date: date
    days_count: int
    price_per_day: Decimal
    total_price: Decimal


class CreateBookingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start_date: DayString
    end_date: DayString
    terms_accepted: bool = False
    withdrawal_right_acknowledged: bool = False


class CancelBookingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    reason: constr(strip_whitespace=True, max_length=500) | None = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    offer_id: int
    customer_id: int
    start_date: date
    end_date: date
    days_count: int
    total_price: Decimal
    status: BookingStatus
    created_at: datetime
    confirmed_at: datetime | None = None
    terms_accepted: bool
    terms_accepted_at: datetime | None = None
    withdrawal_right_acknowledged: bool
    withdrawal_right_acknowledged_at: datetime | None = None
    cancellation_reason: str | None = None
    cancelled_at: datetime | None = None


class BookingResultResponse(BaseModel):
    success: bool
    booking: BookingResponse | None = None
    error_message: str | None = None
    error_code: str | None = None


class BlockDatesRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start_date: DayString
    end_date: DayString
    reason: constr(strip_whitespace=True, max_length=200) | None = None


class BlockDatesResponse(BaseModel):
    offer_id: int
    start_date: date
    end_date: date
    days: int = Field(description="Days blocked, or override rows removed when unblocking")
