"""Entities of the booking domain."""

from booking_engine.domain.entities.availability_override import AvailabilityOverride
from booking_engine.domain.entities.booking import Booking, BookingStatus
from booking_engine.domain.entities.offer import OfferSnapshot
from booking_engine.domain.entities.rental_contract import (
    ContractParty,
    ContractStatus,
    RentalContract,
    derive_contract_status,
)
from booking_engine.domain.entities.user import UserProfile

__all__ = [
    # Booking
    "Booking",
    "BookingStatus",
    # Availability
    "AvailabilityOverride",
    # Offer / identity
    "OfferSnapshot",
    "UserProfile",
    # Contract
    "RentalContract",
    "ContractStatus",
    "ContractParty",
    "derive_contract_status",
]
