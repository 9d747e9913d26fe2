"""
Domain layer of the booking engine.

Pure business logic without framework dependencies.

Structure:
- entities/: bookings, availability overrides, rental contracts, offer and user snapshots
- value_objects/: immutable values (DateRange, Money)
- errors.py: domain exceptions
- constants.py: business constants
- contract_terms.py: standard contract terms per offer type
"""

from booking_engine.domain.entities import (
    AvailabilityOverride,
    Booking,
    BookingStatus,
    ContractParty,
    ContractStatus,
    OfferSnapshot,
    RentalContract,
    UserProfile,
    derive_contract_status,
)
from booking_engine.domain.errors import (
    BookingAccessDeniedError,
    BookingNotFoundError,
    BookingOverlapError,
    ContractAlreadySignedError,
    ContractNotFoundError,
    DomainError,
    InvalidBookingStatusError,
    InvalidContractStatusError,
    InvalidDateFormatError,
    InvalidDateRangeError,
    NotContractPartyError,
    NotOfferOwnerError,
    OfferNotFoundError,
    PricingError,
    UserNotFoundError,
)
from booking_engine.domain.value_objects import DateRange, Money

__all__ = [
    # Entities
    "AvailabilityOverride",
    "Booking",
    "BookingStatus",
    "ContractParty",
    "ContractStatus",
    "OfferSnapshot",
    "RentalContract",
    "UserProfile",
    "derive_contract_status",
    # Value Objects
    "DateRange",
    "Money",
    # Errors
    "DomainError",
    "OfferNotFoundError",
    "BookingNotFoundError",
    "ContractNotFoundError",
    "UserNotFoundError",
    "NotOfferOwnerError",
    "NotContractPartyError",
    "BookingAccessDeniedError",
    "ContractAlreadySignedError",
    "InvalidContractStatusError",
    "InvalidBookingStatusError",
    "PricingError",
    "InvalidDateRangeError",
    "InvalidDateFormatError",
    "BookingOverlapError",
]
