from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.domain.entities.offer import OfferSnapshot
from booking_engine.infrastructure.db.tables import offers


def _optional_decimal(value) -> Decimal | None:
    return Decimal(value) if value is not None else None


class OfferRepoSQL(OfferRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_offer(self, offer_id: int) -> OfferSnapshot | None:
        stmt = select(offers).where(offers.c.id == offer_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return OfferSnapshot(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row["description"] or "",
            is_service=bool(row["is_service"]),
            price_per_day=_optional_decimal(row["price_per_day"]),
            price_per_hour=_optional_decimal(row["price_per_hour"]),
            is_active=bool(row["is_active"]),
        )

    async def list_offer_ids_by_owner(self, owner_id: int) -> list[int]:
        stmt = select(offers.c.id).where(offers.c.owner_id == owner_id).order_by(offers.c.id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
