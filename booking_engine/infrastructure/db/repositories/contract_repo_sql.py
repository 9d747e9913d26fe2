import logging
from decimal import Decimal

from sqlalchemy import insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.application.interfaces.contract_repo import ContractRepo
from booking_engine.domain.entities.rental_contract import RentalContract
from booking_engine.domain.errors import ContractNotFoundError
from booking_engine.infrastructure.db.tables import rental_contracts

logger = logging.getLogger(__name__)

_SNAPSHOT_FIELDS = (
    "booking_id",
    "lessor_id",
    "lessee_id",
    "offer_title",
    "offer_description",
    "offer_type",
    "rental_start_date",
    "rental_end_date",
    "rental_days",
    "total_price",
    "deposit_amount",
    "price_per_day",
    "lessor_name",
    "lessor_email",
    "lessee_name",
    "lessee_email",
    "terms_and_conditions",
    "special_conditions",
    "created_at",
)

# Only these columns change after generation.
_MUTABLE_FIELDS = (
    "signed_by_lessor_at",
    "signed_by_lessee_at",
    "last_modified_at",
    "cancellation_reason",
    "cancelled_at",
    "completed_at",
)


def _row_to_contract(row) -> RentalContract:
    values = {name: row[name] for name in _SNAPSHOT_FIELDS + _MUTABLE_FIELDS}
    for money_field in ("total_price", "deposit_amount", "price_per_day"):
        values[money_field] = Decimal(values[money_field])
    return RentalContract(id=row["id"], **values)


class ContractRepoSQL(ContractRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _first(self, stmt) -> RentalContract | None:
        result = await self._session.execute(stmt.limit(1))
        row = result.mappings().first()
        return _row_to_contract(row) if row else None

    async def get_by_id(self, contract_id: int) -> RentalContract | None:
        return await self._first(select(rental_contracts).where(rental_contracts.c.id == contract_id))

    async def get_by_booking_id(self, booking_id: int) -> RentalContract | None:
        return await self._first(
            select(rental_contracts).where(rental_contracts.c.booking_id == booking_id)
        )

    async def list_by_user(self, user_id: int) -> list[RentalContract]:
        stmt = (
            select(rental_contracts)
            .where(
                or_(
                    rental_contracts.c.lessor_id == user_id,
                    rental_contracts.c.lessee_id == user_id,
                )
            )
            .order_by(rental_contracts.c.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [_row_to_contract(row) for row in result.mappings().all()]

    async def create(self, contract: RentalContract) -> RentalContract:
        values = {name: getattr(contract, name) for name in _SNAPSHOT_FIELDS + _MUTABLE_FIELDS}
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(insert(rental_contracts).values(values))
        except IntegrityError:
            # Another request generated the contract first. The locking read
            # sees its committed row even under a repeatable-read snapshot.
            existing = await self._first(
                select(rental_contracts)
                .where(rental_contracts.c.booking_id == contract.booking_id)
                .with_for_update(read=True)
            )
            if existing is None:
                raise
            logger.info(
                "Contract insert lost to a concurrent request",
                extra={"booking_id": contract.booking_id, "contract_id": existing.id},
            )
            return existing
        contract.id = result.inserted_primary_key[0]
        return contract

    async def update(self, contract: RentalContract) -> RentalContract:
        values = {name: getattr(contract, name) for name in _MUTABLE_FIELDS}
        result = await self._session.execute(
            update(rental_contracts).where(rental_contracts.c.id == contract.id).values(values)
        )
        if result.rowcount == 0:
            raise ContractNotFoundError(contract_id=contract.id)
        return contract
