"""
Shared fixtures.

- FakeClock pinned to a Monday morning
- in-memory adapters seeded with two users and a handful of offers
- the full set of use cases wired on top of them
"""

from datetime import datetime
from decimal import Decimal

import pytest

from booking_engine.api.dependencies import build_use_cases
from booking_engine.application.interfaces.clock import FakeClock
from booking_engine.domain.entities.offer import OfferSnapshot
from booking_engine.domain.entities.user import UserProfile
from booking_engine.infrastructure.in_memory import (
    InMemoryAvailabilityRepo,
    InMemoryBookingRepo,
    InMemoryContractRepo,
    InMemoryNotifier,
    InMemoryOfferRepo,
    InMemoryTransactionManager,
    InMemoryUserDirectory,
)
from booking_engine.infrastructure.rendering.jinja_renderer import JinjaContractRenderer

NOW = datetime(2026, 3, 2, 10, 0)  # Monday, before the same-day cutoff

OWNER_ID = 1
CUSTOMER_ID = 2
OTHER_USER_ID = 3

ITEM_OFFER_ID = 10  # 15.00 per day
SERVICE_OFFER_ID = 11  # 5.00 per hour
INACTIVE_OFFER_ID = 12
UNPRICED_OFFER_ID = 13


def seed_users(directory) -> None:
    directory.add(UserProfile(OWNER_ID, "Anna", "Berger", "anna@example.com"))
    directory.add(UserProfile(CUSTOMER_ID, "Jonas", "Keller", "jonas@example.com"))
    directory.add(UserProfile(OTHER_USER_ID, "Mia", "Wolf", "mia@example.com"))


def seed_offers(offer_repo) -> None:
    offer_repo.add(
        OfferSnapshot(
            id=ITEM_OFFER_ID,
            owner_id=OWNER_ID,
            title="Cordless drill",
            description="18V drill with two batteries",
            price_per_day=Decimal("15.00"),
        )
    )
    offer_repo.add(
        OfferSnapshot(
            id=SERVICE_OFFER_ID,
            owner_id=OWNER_ID,
            title="Garden help",
            description="Hedge trimming and lawn care",
            is_service=True,
            price_per_hour=Decimal("5.00"),
        )
    )
    offer_repo.add(
        OfferSnapshot(
            id=INACTIVE_OFFER_ID,
            owner_id=OWNER_ID,
            title="Old ladder",
            price_per_day=Decimal("3.00"),
            is_active=False,
        )
    )
    offer_repo.add(OfferSnapshot(id=UNPRICED_OFFER_ID, owner_id=OWNER_ID, title="Free advice"))


@pytest.fixture
def clock():
    return FakeClock(NOW)


@pytest.fixture
def bundle():
    offer_repo = InMemoryOfferRepo()
    user_directory = InMemoryUserDirectory()
    seed_offers(offer_repo)
    seed_users(user_directory)
    return {
        "offer_repo": offer_repo,
        "user_directory": user_directory,
        "booking_repo": InMemoryBookingRepo(),
        "availability_repo": InMemoryAvailabilityRepo(),
        "contract_repo": InMemoryContractRepo(),
        "notifier": InMemoryNotifier(),
        "tx_manager": InMemoryTransactionManager(),
    }


@pytest.fixture
def use_cases(bundle, clock):
    return build_use_cases(
        **bundle,
        clock=clock,
        renderer=JinjaContractRenderer(),
        currency_code="EUR",
    )
