from collections.abc import Sequence
from datetime import date

from booking_engine.domain.entities.booking import Booking, BookingStatus


class BookingRepo:
    """
    Booking ledger.

    ``create`` must refuse to store a confirmed booking that shares a day
    with another confirmed booking of the same offer, raising
    ``BookingOverlapError``.
    """

    async def get_by_id(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    async def list_by_offer(self, offer_id: int) -> list[Booking]:
        raise NotImplementedError

    async def list_overlapping(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
        statuses: Sequence[BookingStatus] = (BookingStatus.CONFIRMED,),
    ) -> list[Booking]:
        raise NotImplementedError

    async def list_by_customer(self, customer_id: int) -> list[Booking]:
        raise NotImplementedError

    async def list_by_offer_ids(self, offer_ids: Sequence[int]) -> list[Booking]:
        raise NotImplementedError

    async def create(self, booking: Booking) -> Booking:
        raise NotImplementedError

    async def save(self, booking: Booking) -> Booking:
        raise NotImplementedError
