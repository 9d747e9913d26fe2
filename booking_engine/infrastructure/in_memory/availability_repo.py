"""In-memory availability ledger keyed by ``(offer_id, day)``."""

from dataclasses import replace
from datetime import date

from booking_engine.application.interfaces.availability_repo import AvailabilityRepo
from booking_engine.domain.entities.availability_override import AvailabilityOverride


class InMemoryAvailabilityRepo(AvailabilityRepo):
    def __init__(self) -> None:
        self._overrides: dict[tuple[int, date], AvailabilityOverride] = {}
        self._next_id = 1

    async def get(self, offer_id: int, day: date) -> AvailabilityOverride | None:
        override = self._overrides.get((offer_id, day))
        return replace(override) if override else None

    async def list_in_range(
        self,
        offer_id: int,
        start_date: date,
        end_date: date,
    ) -> list[AvailabilityOverride]:
        found = [
            o
            for (oid, day), o in self._overrides.items()
            if oid == offer_id and start_date <= day <= end_date
        ]
        return [replace(o) for o in sorted(found, key=lambda o: o.day)]

    async def create(self, override: AvailabilityOverride) -> AvailabilityOverride:
        key = (override.offer_id, override.day)
        existing = self._overrides.get(key)
        if existing is not None:
            override.id = existing.id
        else:
            override.id = self._next_id
            self._next_id += 1
        self._overrides[key] = replace(override)
        return override

    async def update(self, override: AvailabilityOverride) -> AvailabilityOverride:
        key = (override.offer_id, override.day)
        if key not in self._overrides:
            raise ValueError(f"No override for offer {override.offer_id} on {override.day}")
        self._overrides[key] = replace(override)
        return override

    async def delete(self, offer_id: int, day: date) -> bool:
        return self._overrides.pop((offer_id, day), None) is not None
