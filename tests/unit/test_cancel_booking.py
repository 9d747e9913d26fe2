from datetime import date

from booking_engine.api.dependencies import build_use_cases
from booking_engine.application import messages
from booking_engine.application.dtos.booking_dto import (
    CODE_BOOKING_NOT_FOUND,
    CODE_FORBIDDEN,
    CODE_INVALID_STATUS,
)
from booking_engine.domain.entities.booking import BookingStatus
from booking_engine.infrastructure.rendering.jinja_renderer import JinjaContractRenderer
from tests.conftest import CUSTOMER_ID, ITEM_OFFER_ID, OTHER_USER_ID, OWNER_ID


async def _confirmed_booking(use_cases, customer_id=CUSTOMER_ID):
    result = await use_cases["create_booking"].execute(
        offer_id=ITEM_OFFER_ID,
        customer_id=customer_id,
        start_date=date(2026, 3, 3),
        end_date=date(2026, 3, 5),
        terms_accepted=True,
        withdrawal_right_acknowledged=True,
    )
    assert result.success
    return result.booking


async def test_owner_cancels_and_days_free_up(use_cases, bundle):
    booking = await _confirmed_booking(use_cases)
    bundle["notifier"].clear()

    result = await use_cases["cancel_booking"].execute(booking.id, OWNER_ID, "Drill is broken")

    assert result.success
    assert result.booking.status == BookingStatus.CANCELLED
    assert result.booking.cancellation_reason == "Drill is broken"
    assert result.booking.cancelled_at is not None

    availability = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 5)
    )
    assert availability.is_available

    again = await _confirmed_booking(use_cases, customer_id=OTHER_USER_ID)
    assert again.id != booking.id


async def test_customer_is_notified_with_reason(use_cases, bundle):
    booking = await _confirmed_booking(use_cases)
    bundle["notifier"].clear()

    await use_cases["cancel_booking"].execute(booking.id, OWNER_ID, "Drill is broken")

    sent = bundle["notifier"].sent_to(CUSTOMER_ID)
    assert len(sent) == 1
    assert sent[0].sender_id == OWNER_ID
    assert f"#{booking.id}" in sent[0].text
    assert sent[0].text.endswith("Reason: Drill is broken")


async def test_only_owner_may_cancel(use_cases, bundle):
    booking = await _confirmed_booking(use_cases)

    result = await use_cases["cancel_booking"].execute(booking.id, CUSTOMER_ID)

    assert result.error_code == CODE_FORBIDDEN
    assert result.error_message == messages.CANCEL_FORBIDDEN
    stored = await bundle["booking_repo"].get_by_id(booking.id)
    assert stored.status == BookingStatus.CONFIRMED


async def test_unknown_booking(use_cases):
    result = await use_cases["cancel_booking"].execute(999, OWNER_ID)
    assert result.error_code == CODE_BOOKING_NOT_FOUND


async def test_cancelled_booking_cannot_be_cancelled_again(use_cases):
    booking = await _confirmed_booking(use_cases)
    await use_cases["cancel_booking"].execute(booking.id, OWNER_ID)

    result = await use_cases["cancel_booking"].execute(booking.id, OWNER_ID)

    assert result.error_code == CODE_INVALID_STATUS
    assert result.error_message == messages.NOT_CANCELLABLE


async def test_notification_failure_does_not_undo_cancel(use_cases, bundle):
    booking = await _confirmed_booking(use_cases)
    bundle["notifier"].fail_with = TimeoutError()

    result = await use_cases["cancel_booking"].execute(booking.id, OWNER_ID)

    assert result.success
    stored = await bundle["booking_repo"].get_by_id(booking.id)
    assert stored.status == BookingStatus.CANCELLED


async def test_unformattable_notification_does_not_undo_cancel(bundle, clock):
    use_cases = build_use_cases(
        **bundle, clock=clock, renderer=JinjaContractRenderer(), currency_code="EURO"
    )
    booking = await _confirmed_booking(use_cases)

    result = await use_cases["cancel_booking"].execute(booking.id, OWNER_ID, "Broken")

    assert result.success
    stored = await bundle["booking_repo"].get_by_id(booking.id)
    assert stored.status == BookingStatus.CANCELLED
    assert bundle["notifier"].messages == []


async def test_booking_lists_and_access(use_cases):
    booking = await _confirmed_booking(use_cases)

    assert [b.id for b in await use_cases["list_customer_bookings"].execute(CUSTOMER_ID)] == [booking.id]
    assert [b.id for b in await use_cases["list_provider_bookings"].execute(OWNER_ID)] == [booking.id]
    assert await use_cases["list_provider_bookings"].execute(CUSTOMER_ID) == []

    assert (await use_cases["get_booking"].execute(booking.id, OWNER_ID)).id == booking.id
    assert (await use_cases["get_booking"].execute(booking.id, CUSTOMER_ID)).id == booking.id
