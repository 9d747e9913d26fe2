from datetime import date

from booking_engine.domain.entities.availability_override import AvailabilityOverride


class AvailabilityRepo:
    """Availability ledger: one override row per ``(offer_id, day)``."""

    async def get(self, offer_id: int, day: date) -> AvailabilityOverride | None:
        raise NotImplementedError

    async def list_in_range(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
    ) -> list[AvailabilityOverride]:
        raise NotImplementedError

    async def create(self, override: AvailabilityOverride) -> AvailabilityOverride:
        """Stores the override; a row already present for the day is overwritten."""
        raise NotImplementedError

    async def update(self, override: AvailabilityOverride) -> AvailabilityOverride:
        raise NotImplementedError

    async def delete(self, offer_id: int, day: date) -> bool:
        """Deletes the override of the day; returns whether a row existed."""
        raise NotImplementedError
