"""Interfaces (ports) of the application layer."""

from booking_engine.application.interfaces.availability_repo import AvailabilityRepo
from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.clock import Clock, FakeClock, SystemClock
from booking_engine.application.interfaces.contract_renderer import ContractRenderer
from booking_engine.application.interfaces.contract_repo import ContractRepo
from booking_engine.application.interfaces.notifier import Notifier
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.application.interfaces.user_directory import UserDirectory

__all__ = [
    # Repositories
    "AvailabilityRepo",
    "BookingRepo",
    "ContractRepo",
    "OfferRepo",
    "UserDirectory",
    # Collaborators
    "ContractRenderer",
    "Notifier",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
