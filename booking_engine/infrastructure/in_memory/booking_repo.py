"""In-memory booking ledger."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.domain.entities.booking import Booking, BookingStatus
from booking_engine.domain.errors import BookingNotFoundError, BookingOverlapError


class InMemoryBookingRepo(BookingRepo):
    """
    Stores copies, so callers only change the ledger through ``save``.

    ``create`` re-checks overlap itself, mirroring the unique day index of
    the SQL ledger.
    """

    def __init__(self) -> None:
        self._bookings: dict[int, Booking] = {}
        self._next_id = 1

    async def get_by_id(self, booking_id: int) -> Booking | None:
        booking = self._bookings.get(booking_id)
        return replace(booking) if booking else None

    async def list_by_offer(self, offer_id: int) -> list[Booking]:
        found = [b for b in self._bookings.values() if b.offer_id == offer_id]
        return [replace(b) for b in sorted(found, key=lambda b: b.start_date)]

    async def list_overlapping(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
        statuses: Sequence[BookingStatus] = (BookingStatus.CONFIRMED,),
    ) -> list[Booking]:
        found = [
            b
            for b in self._bookings.values()
            if b.offer_id == offer_id
            and b.status in statuses
            and b.start_date <= end_date
            and b.end_date >= start_date
        ]
        return [replace(b) for b in sorted(found, key=lambda b: b.start_date)]

    async def list_by_customer(self, customer_id: int) -> list[Booking]:
        found = [b for b in self._bookings.values() if b.customer_id == customer_id]
        return [replace(b) for b in sorted(found, key=lambda b: b.created_at, reverse=True)]

    async def list_by_offer_ids(self, offer_ids: Sequence[int]) -> list[Booking]:
        wanted = set(offer_ids)
        found = [b for b in self._bookings.values() if b.offer_id in wanted]
        return [replace(b) for b in sorted(found, key=lambda b: b.created_at, reverse=True)]

    async def create(self, booking: Booking) -> Booking:
        if booking.is_confirmed:
            clashes = await self.list_overlapping(
                booking.offer_id, booking.start_date, booking.end_date
            )
            if clashes:
                raise BookingOverlapError(booking.offer_id)
        booking.id = self._next_id
        self._next_id += 1
        self._bookings[booking.id] = replace(booking)
        return booking

    async def save(self, booking: Booking) -> Booking:
        if booking.id is None or booking.id not in self._bookings:
            raise BookingNotFoundError(booking.id or 0)
        self._bookings[booking.id] = replace(booking)
        return booking
