"""Data Transfer Objects returned by the use cases."""

from booking_engine.application.dtos.availability_dto import AvailabilityResult, PriceQuote
from booking_engine.application.dtos.booking_dto import BookingResult
from booking_engine.application.dtos.contract_dto import RenderedContract

__all__ = [
    "AvailabilityResult",
    "BookingResult",
    "PriceQuote",
    "RenderedContract",
]
