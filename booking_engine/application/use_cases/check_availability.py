from datetime import date
from decimal import Decimal

from booking_engine.application import messages
from booking_engine.application.dtos.availability_dto import AvailabilityResult
from booking_engine.application.dtos.booking_dto import (
    CODE_NOT_AVAILABLE,
    CODE_OFFER_INACTIVE,
    CODE_OFFER_NOT_FOUND,
    CODE_PRICING,
    CODE_VALIDATION,
)
from booking_engine.application.interfaces.availability_repo import AvailabilityRepo
from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.clock import Clock
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.domain.constants import MAX_BOOKING_DAYS, MIN_BOOKING_DAYS, SAME_DAY_CUTOFF_HOUR
from booking_engine.domain.entities.booking import BookingStatus
from booking_engine.domain.entities.offer import OfferSnapshot
from booking_engine.domain.errors import PricingError
from booking_engine.domain.value_objects.date_range import DateRange, count_days


class CheckAvailabilityUseCase:
    """
    Availability resolver.

    Decides whether ``[start_date, end_date]`` can be booked as a whole and
    lists the available and unavailable days of the range. Read only.
    """

    def __init__(
        self,
        offer_repo: OfferRepo,
        booking_repo: BookingRepo,
        availability_repo: AvailabilityRepo,
        clock: Clock,
    ) -> None:
        self._offer_repo = offer_repo
        self._booking_repo = booking_repo
        self._availability_repo = availability_repo
        self._clock = clock

    async def execute(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
        exclude_booking_id: int | None = None,
    ) -> AvailabilityResult:
        offer = await self._offer_repo.get_offer(offer_id)
        if offer is None:
            return AvailabilityResult.rejected(messages.OFFER_NOT_FOUND, CODE_OFFER_NOT_FOUND)
        if not offer.is_active:
            return AvailabilityResult.rejected(messages.OFFER_INACTIVE, CODE_OFFER_INACTIVE)

        rejection = self._validate_range(start_date, end_date)
        if rejection is not None:
            return rejection

        try:
            price_per_day = offer.daily_price()
        except PricingError as exc:
            return AvailabilityResult.rejected(exc.message, CODE_PRICING)

        date_range = DateRange(start=start_date, end=end_date)
        blocked = await self.unavailable_days(offer, date_range, exclude_booking_id)

        available_dates = [day for day in date_range.days() if day not in blocked]
        unavailable_dates = [day for day in date_range.days() if day in blocked]

        result = AvailabilityResult(
            is_available=not unavailable_dates,
            available_dates=available_dates,
            unavailable_dates=unavailable_dates,
            price_per_day=Decimal(price_per_day),
        )
        if unavailable_dates:
            result.error_message = messages.NOT_AVAILABLE
            result.error_code = CODE_NOT_AVAILABLE
        return result

    def _validate_range(self, start_date: date, end_date: date) -> AvailabilityResult | None:
        today = self._clock.today()
        if start_date < today:
            return AvailabilityResult.rejected(messages.START_IN_PAST, CODE_VALIDATION)

        if start_date == today and self._clock.local_now().hour >= SAME_DAY_CUTOFF_HOUR:
            return AvailabilityResult.rejected(messages.SAME_DAY_CUTOFF, CODE_VALIDATION)

        if end_date < start_date:
            return AvailabilityResult.rejected(messages.END_BEFORE_START, CODE_VALIDATION)

        days_count = count_days(start_date, end_date)
        if days_count < MIN_BOOKING_DAYS or days_count > MAX_BOOKING_DAYS:
            return AvailabilityResult.rejected(messages.RANGE_LENGTH, CODE_VALIDATION)
        return None

    async def unavailable_days(
        self,
        offer: OfferSnapshot,
        date_range: DateRange,
        exclude_booking_id: int | None = None,
    ) -> set[date]:
        """Days of the range covered by confirmed bookings or blocked by the provider."""
        unavailable: set[date] = set()

        bookings = await self._booking_repo.list_overlapping(
            offer.id,
            date_range.start,
            date_range.end,
            statuses=(BookingStatus.CONFIRMED,),
        )
        for booking in bookings:
            if exclude_booking_id is not None and booking.id == exclude_booking_id:
                continue
            overlap = booking.date_range.intersection(date_range)
            if overlap is not None:
                unavailable.update(overlap.days())

        overrides = await self._availability_repo.list_in_range(
            offer.id, date_range.start, date_range.end
        )
        unavailable.update(o.day for o in overrides if o.is_blocked)
        return unavailable
