import logging
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.domain.entities.booking import Booking, BookingStatus
from booking_engine.domain.errors import BookingNotFoundError, BookingOverlapError
from booking_engine.infrastructure.db.tables import booking_days, bookings

logger = logging.getLogger(__name__)


def _row_to_booking(row) -> Booking:
    return Booking(
        id=row["id"],
        offer_id=row["offer_id"],
        customer_id=row["customer_id"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        total_price=Decimal(row["total_price"]),
        days_count=row["days_count"],
        status=BookingStatus(row["status"]),
        created_at=row["created_at"],
        confirmed_at=row["confirmed_at"],
        terms_accepted=bool(row["terms_accepted"]),
        terms_accepted_at=row["terms_accepted_at"],
        withdrawal_right_acknowledged=bool(row["withdrawal_right_acknowledged"]),
        withdrawal_right_acknowledged_at=row["withdrawal_right_acknowledged_at"],
        cancellation_reason=row["cancellation_reason"],
        cancelled_at=row["cancelled_at"],
    )


def _booking_values(booking: Booking) -> dict:
    return {
        "offer_id": booking.offer_id,
        "customer_id": booking.customer_id,
        "start_date": booking.start_date,
        "end_date": booking.end_date,
        "total_price": booking.total_price,
        "days_count": booking.days_count,
        "status": booking.status.value,
        "created_at": booking.created_at,
        "confirmed_at": booking.confirmed_at,
        "terms_accepted": booking.terms_accepted,
        "terms_accepted_at": booking.terms_accepted_at,
        "withdrawal_right_acknowledged": booking.withdrawal_right_acknowledged,
        "withdrawal_right_acknowledged_at": booking.withdrawal_right_acknowledged_at,
        "cancellation_reason": booking.cancellation_reason,
        "cancelled_at": booking.cancelled_at,
    }


class BookingRepoSQL(BookingRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _fetch(self, stmt) -> list[Booking]:
        result = await self._session.execute(stmt)
        return [_row_to_booking(row) for row in result.mappings().all()]

    async def get_by_id(self, booking_id: int) -> Booking | None:
        found = await self._fetch(select(bookings).where(bookings.c.id == booking_id).limit(1))
        return found[0] if found else None

    async def list_by_offer(self, offer_id: int) -> list[Booking]:
        return await self._fetch(
            select(bookings).where(bookings.c.offer_id == offer_id).order_by(bookings.c.start_date)
        )

    async def list_overlapping(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
        statuses: Sequence[BookingStatus] = (BookingStatus.CONFIRMED,),
    ) -> list[Booking]:
        stmt = (
            select(bookings)
            .where(bookings.c.offer_id == offer_id)
            .where(bookings.c.status.in_([s.value for s in statuses]))
            .where(bookings.c.start_date <= end_date)
            .where(bookings.c.end_date >= start_date)
            .order_by(bookings.c.start_date)
        )
        return await self._fetch(stmt)

    async def list_by_customer(self, customer_id: int) -> list[Booking]:
        return await self._fetch(
            select(bookings)
            .where(bookings.c.customer_id == customer_id)
            .order_by(bookings.c.created_at.desc())
        )

    async def list_by_offer_ids(self, offer_ids: Sequence[int]) -> list[Booking]:
        if not offer_ids:
            return []
        return await self._fetch(
            select(bookings)
            .where(bookings.c.offer_id.in_(list(offer_ids)))
            .order_by(bookings.c.created_at.desc())
        )

    async def create(self, booking: Booking) -> Booking:
        result = await self._session.execute(insert(bookings).values(_booking_values(booking)))
        booking.id = result.inserted_primary_key[0]
        if booking.is_confirmed:
            await self._occupy_days(booking)
        return booking

    async def _occupy_days(self, booking: Booking) -> None:
        rows = [
            {"booking_id": booking.id, "offer_id": booking.offer_id, "day": day}
            for day in booking.date_range.days()
        ]
        # Savepoint keeps the surrounding transaction usable after a conflict.
        try:
            async with self._session.begin_nested():
                await self._session.execute(insert(booking_days), rows)
        except IntegrityError as exc:
            logger.info(
                "Booking day already occupied",
                extra={"offer_id": booking.offer_id, "booking_id": booking.id},
            )
            raise BookingOverlapError(booking.offer_id) from exc

    async def save(self, booking: Booking) -> Booking:
        if booking.id is None:
            raise BookingNotFoundError(0)
        result = await self._session.execute(
            update(bookings).where(bookings.c.id == booking.id).values(_booking_values(booking))
        )
        if result.rowcount == 0:
            raise BookingNotFoundError(booking.id)
        if not booking.is_confirmed:
            # Cancelled or completed bookings release their days.
            await self._session.execute(
                delete(booking_days).where(booking_days.c.booking_id == booking.id)
            )
        return booking
