from datetime import date, datetime
from decimal import Decimal

from booking_engine.application import messages
from booking_engine.domain.entities.availability_override import AvailabilityOverride
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.value_objects.date_range import DateRange
from tests.conftest import (
    CUSTOMER_ID,
    INACTIVE_OFFER_ID,
    ITEM_OFFER_ID,
    SERVICE_OFFER_ID,
    UNPRICED_OFFER_ID,
)


async def _store_booking(bundle, start: date, end: date, offer_id: int = ITEM_OFFER_ID) -> Booking:
    booking = Booking.confirmed(
        offer_id=offer_id,
        customer_id=CUSTOMER_ID,
        date_range=DateRange(start, end),
        price_per_day=Decimal("15.00"),
        now=datetime(2026, 3, 1, 9, 0),
    )
    return await bundle["booking_repo"].create(booking)


async def test_free_range_is_available_with_daily_price(use_cases):
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 5)
    )

    assert result.is_available
    assert result.available_dates == [date(2026, 3, 3), date(2026, 3, 4), date(2026, 3, 5)]
    assert result.unavailable_dates == []
    assert result.price_per_day == Decimal("15.00")
    assert result.error_message is None


async def test_hourly_price_becomes_eight_hour_day(use_cases):
    result = await use_cases["check_availability"].execute(
        SERVICE_OFFER_ID, date(2026, 3, 3), date(2026, 3, 4)
    )
    assert result.price_per_day == Decimal("40.00")


async def test_unknown_offer(use_cases):
    result = await use_cases["check_availability"].execute(999, date(2026, 3, 3), date(2026, 3, 4))
    assert not result.is_available
    assert result.error_message == messages.OFFER_NOT_FOUND


async def test_inactive_offer(use_cases):
    result = await use_cases["check_availability"].execute(
        INACTIVE_OFFER_ID, date(2026, 3, 3), date(2026, 3, 4)
    )
    assert not result.is_available
    assert result.error_message == messages.OFFER_INACTIVE


async def test_start_in_the_past(use_cases):
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 1), date(2026, 3, 4)
    )
    assert result.error_message == messages.START_IN_PAST


async def test_same_day_allowed_before_cutoff(use_cases, clock):
    clock.set_time(datetime(2026, 3, 2, 17, 59))
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 2), date(2026, 3, 2)
    )
    assert result.is_available


async def test_same_day_rejected_from_cutoff_on(use_cases, clock):
    clock.set_time(datetime(2026, 3, 2, 18, 0))
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 2), date(2026, 3, 3)
    )
    assert not result.is_available
    assert result.error_message == messages.SAME_DAY_CUTOFF


async def test_cutoff_does_not_apply_to_tomorrow(use_cases, clock):
    clock.set_time(datetime(2026, 3, 2, 21, 0))
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 3)
    )
    assert result.is_available


async def test_end_before_start(use_cases):
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 5), date(2026, 3, 4)
    )
    assert result.error_message == messages.END_BEFORE_START


async def test_fourteen_days_allowed_fifteen_rejected(use_cases):
    fourteen = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 16)
    )
    fifteen = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 17)
    )

    assert fourteen.is_available
    assert len(fourteen.available_dates) == 14
    assert not fifteen.is_available
    assert fifteen.error_message == messages.RANGE_LENGTH


async def test_offer_without_price(use_cases):
    result = await use_cases["check_availability"].execute(
        UNPRICED_OFFER_ID, date(2026, 3, 3), date(2026, 3, 4)
    )
    assert not result.is_available
    assert result.error_message == "Offer has no valid price."


async def test_booked_and_blocked_days_are_partitioned(use_cases, bundle):
    await _store_booking(bundle, date(2026, 3, 4), date(2026, 3, 5))
    await bundle["availability_repo"].create(
        AvailabilityOverride(offer_id=ITEM_OFFER_ID, day=date(2026, 3, 7), reason="Repair")
    )

    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 8)
    )

    assert not result.is_available
    assert result.error_message == messages.NOT_AVAILABLE
    assert result.unavailable_dates == [date(2026, 3, 4), date(2026, 3, 5), date(2026, 3, 7)]
    assert result.available_dates == [date(2026, 3, 3), date(2026, 3, 6), date(2026, 3, 8)]


async def test_cancelled_bookings_do_not_block(use_cases, bundle):
    booking = await _store_booking(bundle, date(2026, 3, 4), date(2026, 3, 5))
    booking.cancel(cancelled_at=datetime(2026, 3, 2, 9, 0))
    await bundle["booking_repo"].save(booking)

    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 4), date(2026, 3, 5)
    )
    assert result.is_available


async def test_override_marked_available_does_not_block(use_cases, bundle):
    await bundle["availability_repo"].create(
        AvailabilityOverride(offer_id=ITEM_OFFER_ID, day=date(2026, 3, 4), is_available=True)
    )
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 4), date(2026, 3, 4)
    )
    assert result.is_available


async def test_exclude_booking_id_ignores_that_booking(use_cases, bundle):
    booking = await _store_booking(bundle, date(2026, 3, 4), date(2026, 3, 5))
    result = await use_cases["check_availability"].execute(
        ITEM_OFFER_ID, date(2026, 3, 4), date(2026, 3, 5), exclude_booking_id=booking.id
    )
    assert result.is_available


async def test_booked_dates_feed(use_cases, bundle):
    await _store_booking(bundle, date(2026, 3, 4), date(2026, 3, 5))
    await bundle["availability_repo"].create(
        AvailabilityOverride(offer_id=ITEM_OFFER_ID, day=date(2026, 3, 9))
    )
    # Outside the one-year horizon of the feed
    await bundle["availability_repo"].create(
        AvailabilityOverride(offer_id=ITEM_OFFER_ID, day=date(2027, 6, 1))
    )

    days = await use_cases["get_booked_dates"].execute(ITEM_OFFER_ID)

    assert days == [date(2026, 3, 4), date(2026, 3, 5), date(2026, 3, 9)]


async def test_price_quote(use_cases):
    item = await use_cases["calculate_price"].execute(
        ITEM_OFFER_ID, date(2026, 3, 3), date(2026, 3, 5)
    )
    service = await use_cases["calculate_price"].execute(
        SERVICE_OFFER_ID, date(2026, 3, 3), date(2026, 3, 4)
    )

    assert item.days_count == 3
    assert item.total_price == Decimal("45.00")
    assert service.total_price == Decimal("80.00")
