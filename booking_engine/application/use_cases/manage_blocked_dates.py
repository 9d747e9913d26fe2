import logging
from datetime import date

from booking_engine.application.interfaces.availability_repo import AvailabilityRepo
from booking_engine.application.interfaces.clock import Clock
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.domain.constants import MAX_BLOCK_RANGE_DAYS
from booking_engine.domain.entities.availability_override import AvailabilityOverride
from booking_engine.domain.errors import InvalidDateRangeError, NotOfferOwnerError
from booking_engine.domain.value_objects.date_range import DateRange


async def _owned_range(
    offer_repo: OfferRepo,
    offer_id: int,
    provider_id: int,
    start_date: date,
    end_date: date,
    action: str,
) -> DateRange:
    offer = await offer_repo.get_offer(offer_id)
    if offer is None or not offer.is_owned_by(provider_id):
        raise NotOfferOwnerError(offer_id, provider_id, action)

    date_range = DateRange(start=start_date, end=end_date)
    if date_range.days_count > MAX_BLOCK_RANGE_DAYS:
        raise InvalidDateRangeError(
            f"A date range can span at most {MAX_BLOCK_RANGE_DAYS} days."
        )
    return date_range


class BlockDatesUseCase:
    """
    Marks every day of a range as unavailable for an offer.

    Idempotent: re-blocking a blocked day only refreshes its reason.
    """

    def __init__(
        self,
        offer_repo: OfferRepo,
        availability_repo: AvailabilityRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._offer_repo = offer_repo
        self._availability_repo = availability_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        offer_id: int,
        provider_id: int,
        start_date: date,
        end_date: date,
        reason: str | None = None,
    ) -> int:
        """Returns the number of days in the blocked range."""
        async with self._transaction_manager.start():
            date_range = await _owned_range(
                self._offer_repo, offer_id, provider_id, start_date, end_date, "block dates"
            )
            now = self._clock.now()
            for day in date_range.days():
                existing = await self._availability_repo.get(offer_id, day)
                if existing is None:
                    await self._availability_repo.create(
                        AvailabilityOverride(
                            offer_id=offer_id,
                            day=day,
                            is_available=False,
                            reason=reason,
                            created_at=now,
                        )
                    )
                elif existing.is_available or existing.reason != reason:
                    existing.is_available = False
                    existing.reason = reason
                    await self._availability_repo.update(existing)

        self._logger.info(
            "Dates blocked",
            extra={
                "offer_id": offer_id,
                "provider_id": provider_id,
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )
        return date_range.days_count


class UnblockDatesUseCase:
    """Deletes the overrides of a range; absence of a row means available."""

    def __init__(
        self,
        offer_repo: OfferRepo,
        availability_repo: AvailabilityRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._offer_repo = offer_repo
        self._availability_repo = availability_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        offer_id: int,
        provider_id: int,
        start_date: date,
        end_date: date,
    ) -> int:
        """Returns the number of override rows removed."""
        removed = 0
        async with self._transaction_manager.start():
            date_range = await _owned_range(
                self._offer_repo, offer_id, provider_id, start_date, end_date, "unblock dates"
            )
            for day in date_range.days():
                if await self._availability_repo.delete(offer_id, day):
                    removed += 1

        self._logger.info(
            "Dates unblocked",
            extra={"offer_id": offer_id, "provider_id": provider_id, "removed": removed},
        )
        return removed
