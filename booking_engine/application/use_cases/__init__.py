"""Use cases of the booking engine."""

from booking_engine.application.use_cases.calculate_price import CalculatePriceUseCase
from booking_engine.application.use_cases.cancel_booking import CancelBookingUseCase
from booking_engine.application.use_cases.check_availability import CheckAvailabilityUseCase
from booking_engine.application.use_cases.create_booking import CreateBookingUseCase
from booking_engine.application.use_cases.generate_contract import GenerateContractUseCase
from booking_engine.application.use_cases.get_booked_dates import GetBookedDatesUseCase
from booking_engine.application.use_cases.get_bookings import (
    GetBookingUseCase,
    ListCustomerBookingsUseCase,
    ListProviderBookingsUseCase,
)
from booking_engine.application.use_cases.manage_blocked_dates import (
    BlockDatesUseCase,
    UnblockDatesUseCase,
)
from booking_engine.application.use_cases.manage_contract import (
    CancelContractUseCase,
    GetContractUseCase,
    ListUserContractsUseCase,
    RenderContractUseCase,
    SignContractUseCase,
)

__all__ = [
    # Availability resolver
    "CheckAvailabilityUseCase",
    "GetBookedDatesUseCase",
    "CalculatePriceUseCase",
    # Booking orchestrator
    "CreateBookingUseCase",
    "CancelBookingUseCase",
    "BlockDatesUseCase",
    "UnblockDatesUseCase",
    "GetBookingUseCase",
    "ListCustomerBookingsUseCase",
    "ListProviderBookingsUseCase",
    # Contract generator
    "GenerateContractUseCase",
    "SignContractUseCase",
    "CancelContractUseCase",
    "RenderContractUseCase",
    "GetContractUseCase",
    "ListUserContractsUseCase",
]
