"""In-memory adapters for development mode and tests."""

from booking_engine.infrastructure.in_memory.availability_repo import InMemoryAvailabilityRepo
from booking_engine.infrastructure.in_memory.booking_repo import InMemoryBookingRepo
from booking_engine.infrastructure.in_memory.contract_repo import InMemoryContractRepo
from booking_engine.infrastructure.in_memory.notifier import InMemoryNotifier, SentMessage
from booking_engine.infrastructure.in_memory.offer_repo import InMemoryOfferRepo
from booking_engine.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager
from booking_engine.infrastructure.in_memory.user_directory import InMemoryUserDirectory

__all__ = [
    # Repositories
    "InMemoryAvailabilityRepo",
    "InMemoryBookingRepo",
    "InMemoryContractRepo",
    "InMemoryOfferRepo",
    "InMemoryUserDirectory",
    # Collaborators
    "InMemoryNotifier",
    "SentMessage",
    # Infrastructure
    "InMemoryTransactionManager",
]
