import logging
from datetime import date

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.application.interfaces.availability_repo import AvailabilityRepo
from booking_engine.domain.entities.availability_override import AvailabilityOverride
from booking_engine.infrastructure.db.tables import availability_overrides

logger = logging.getLogger(__name__)


def _row_to_override(row) -> AvailabilityOverride:
    return AvailabilityOverride(
        id=row["id"],
        offer_id=row["offer_id"],
        day=row["day"],
        is_available=bool(row["is_available"]),
        reason=row["reason"],
        created_at=row["created_at"],
    )


class AvailabilityRepoSQL(AvailabilityRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, offer_id: int, day: date) -> AvailabilityOverride | None:
        stmt = (
            select(availability_overrides)
            .where(availability_overrides.c.offer_id == offer_id)
            .where(availability_overrides.c.day == day)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _row_to_override(row) if row else None

    async def list_in_range(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
    ) -> list[AvailabilityOverride]:
        stmt = (
            select(availability_overrides)
            .where(availability_overrides.c.offer_id == offer_id)
            .where(availability_overrides.c.day >= start_date)
            .where(availability_overrides.c.day <= end_date)
            .order_by(availability_overrides.c.day)
        )
        result = await self._session.execute(stmt)
        return [_row_to_override(row) for row in result.mappings().all()]

    async def create(self, override: AvailabilityOverride) -> AvailabilityOverride:
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(
                    insert(availability_overrides).values(
                        offer_id=override.offer_id,
                        day=override.day,
                        is_available=override.is_available,
                        reason=override.reason,
                        created_at=override.created_at,
                    )
                )
        except IntegrityError:
            # A concurrent request stored the same day first; last writer wins.
            logger.info(
                "Availability override already present, overwriting",
                extra={"offer_id": override.offer_id, "day": override.day.isoformat()},
            )
            await self.update(override)
            stmt = (
                select(availability_overrides.c.id)
                .where(availability_overrides.c.offer_id == override.offer_id)
                .where(availability_overrides.c.day == override.day)
                .with_for_update(read=True)
            )
            override.id = (await self._session.execute(stmt)).scalar_one()
            return override
        override.id = result.inserted_primary_key[0]
        return override

    async def update(self, override: AvailabilityOverride) -> AvailabilityOverride:
        await self._session.execute(
            update(availability_overrides)
            .where(availability_overrides.c.offer_id == override.offer_id)
            .where(availability_overrides.c.day == override.day)
            .values(is_available=override.is_available, reason=override.reason)
        )
        return override

    async def delete(self, offer_id: int, day: date) -> bool:
        result = await self._session.execute(
            delete(availability_overrides)
            .where(availability_overrides.c.offer_id == offer_id)
            .where(availability_overrides.c.day == day)
        )
        return result.rowcount > 0
