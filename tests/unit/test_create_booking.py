import asyncio
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from booking_engine.api.dependencies import build_use_cases
from booking_engine.application import messages
from booking_engine.application.dtos.booking_dto import (
    CODE_INFRASTRUCTURE,
    CODE_NOT_AVAILABLE,
    CODE_OFFER_NOT_FOUND,
    CODE_SELF_BOOKING,
    CODE_VALIDATION,
)
from booking_engine.config import Settings
from booking_engine.domain.entities.availability_override import AvailabilityOverride
from booking_engine.domain.entities.booking import BookingStatus
from booking_engine.infrastructure.rendering.jinja_renderer import JinjaContractRenderer
from tests.conftest import CUSTOMER_ID, ITEM_OFFER_ID, NOW, OTHER_USER_ID, OWNER_ID, SERVICE_OFFER_ID


async def _book(use_cases, customer_id=CUSTOMER_ID, offer_id=ITEM_OFFER_ID,
                start=date(2026, 3, 3), end=date(2026, 3, 5), **consents):
    return await use_cases["create_booking"].execute(
        offer_id=offer_id,
        customer_id=customer_id,
        start_date=start,
        end_date=end,
        terms_accepted=consents.get("terms_accepted", True),
        withdrawal_right_acknowledged=consents.get("withdrawal_right_acknowledged", True),
    )


async def test_booking_is_confirmed_and_priced(use_cases):
    result = await _book(use_cases)

    assert result.success
    booking = result.booking
    assert booking.id is not None
    assert booking.status == BookingStatus.CONFIRMED
    assert booking.days_count == 3
    assert booking.total_price == Decimal("45.00")
    assert booking.confirmed_at is not None
    assert booking.terms_accepted and booking.withdrawal_right_acknowledged
    assert booking.terms_accepted_at == booking.withdrawal_right_acknowledged_at == booking.created_at


async def test_hourly_offer_total(use_cases):
    result = await _book(use_cases, offer_id=SERVICE_OFFER_ID, end=date(2026, 3, 4))
    assert result.booking.total_price == Decimal("80.00")


async def test_terms_must_be_accepted(use_cases, bundle):
    result = await _book(use_cases, terms_accepted=False)

    assert not result.success
    assert result.error_code == CODE_VALIDATION
    assert result.error_message == messages.TERMS_REQUIRED
    assert await bundle["booking_repo"].list_by_offer(ITEM_OFFER_ID) == []


async def test_withdrawal_notice_must_be_acknowledged(use_cases):
    result = await _book(use_cases, withdrawal_right_acknowledged=False)
    assert result.error_message == messages.WITHDRAWAL_REQUIRED


async def test_owner_cannot_book_own_offer(use_cases):
    result = await _book(use_cases, customer_id=OWNER_ID)
    assert result.error_code == CODE_SELF_BOOKING


async def test_unknown_offer(use_cases):
    result = await _book(use_cases, offer_id=404)
    assert result.error_code == CODE_OFFER_NOT_FOUND


async def test_overlapping_request_is_rejected(use_cases):
    first = await _book(use_cases)
    second = await _book(use_cases, customer_id=OTHER_USER_ID, start=date(2026, 3, 5), end=date(2026, 3, 6))

    assert first.success
    assert not second.success
    assert second.error_code == CODE_NOT_AVAILABLE
    assert second.error_message == messages.NOT_AVAILABLE


async def test_adjacent_ranges_both_succeed(use_cases):
    first = await _book(use_cases, end=date(2026, 3, 4))
    second = await _book(use_cases, customer_id=OTHER_USER_ID, start=date(2026, 3, 5), end=date(2026, 3, 6))
    assert first.success and second.success


async def test_blocked_day_is_rejected(use_cases, bundle):
    await bundle["availability_repo"].create(
        AvailabilityOverride(offer_id=ITEM_OFFER_ID, day=date(2026, 3, 4))
    )
    result = await _book(use_cases)
    assert result.error_code == CODE_NOT_AVAILABLE


async def test_owner_is_notified(use_cases, bundle):
    result = await _book(use_cases)

    sent = bundle["notifier"].sent_to(OWNER_ID)
    assert len(sent) == 1
    assert sent[0].sender_id == CUSTOMER_ID
    assert sent[0].offer_id == ITEM_OFFER_ID
    assert "Cordless drill" in sent[0].text
    assert "03.03.2026 to 05.03.2026" in sent[0].text
    assert "45.00 EUR" in sent[0].text
    assert "Jonas Keller" in sent[0].text
    assert result.success


async def test_notification_failure_does_not_fail_booking(use_cases, bundle):
    bundle["notifier"].fail_with = ConnectionError("message store down")

    result = await _book(use_cases)

    assert result.success
    assert len(await bundle["booking_repo"].list_by_offer(ITEM_OFFER_ID)) == 1


async def test_unformattable_notification_does_not_fail_booking(bundle, clock):
    use_cases = build_use_cases(
        **bundle, clock=clock, renderer=JinjaContractRenderer(), currency_code="EURO"
    )

    result = await _book(use_cases)

    assert result.success
    assert len(await bundle["booking_repo"].list_by_offer(ITEM_OFFER_ID)) == 1
    assert bundle["notifier"].messages == []


def test_settings_reject_malformed_currency_code():
    with pytest.raises(ValidationError):
        Settings(currency_code="EURO")


async def test_storage_failure_returns_generic_error(use_cases, bundle, monkeypatch):
    async def broken_create(booking):
        raise RuntimeError("disk full")

    monkeypatch.setattr(bundle["booking_repo"], "create", broken_create)

    result = await _book(use_cases)

    assert not result.success
    assert result.error_code == CODE_INFRASTRUCTURE
    assert result.error_message == messages.BOOKING_FAILED


async def test_concurrent_overlapping_requests_yield_one_booking(use_cases, bundle):
    customers = [CUSTOMER_ID, OTHER_USER_ID] * 5
    results = await asyncio.gather(
        *(
            _book(use_cases, customer_id=customer, start=date(2026, 3, 3 + i % 3), end=date(2026, 3, 6))
            for i, customer in enumerate(customers)
        )
    )

    assert sum(r.success for r in results) == 1
    confirmed = [
        b for b in await bundle["booking_repo"].list_by_offer(ITEM_OFFER_ID) if b.is_confirmed
    ]
    assert len(confirmed) == 1


async def test_timestamps_come_from_clock(use_cases):
    result = await _book(use_cases)
    assert result.booking.created_at.replace(tzinfo=None) == NOW
