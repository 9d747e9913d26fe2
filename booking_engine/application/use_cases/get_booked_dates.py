from datetime import date, timedelta

from booking_engine.application.interfaces.availability_repo import AvailabilityRepo
from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.clock import Clock
from booking_engine.domain.constants import BOOKED_DATES_HORIZON_DAYS


class GetBookedDatesUseCase:
    """Calendar feed: every day of an offer that cannot be booked."""

    def __init__(
        self,
        booking_repo: BookingRepo,
        availability_repo: AvailabilityRepo,
        clock: Clock,
    ) -> None:
        self._booking_repo = booking_repo
        self._availability_repo = availability_repo
        self._clock = clock

    async def execute(self, offer_id: int) -> list[date]:
        booked: set[date] = set()

        for booking in await self._booking_repo.list_by_offer(offer_id):
            if booking.is_confirmed:
                booked.update(booking.date_range.days())

        today = self._clock.today()
        overrides = await self._availability_repo.list_in_range(
            offer_id, today, today + timedelta(days=BOOKED_DATES_HORIZON_DAYS)
        )
        booked.update(o.day for o in overrides if o.is_blocked)

        return sorted(booked)
