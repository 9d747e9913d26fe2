"""In-memory offer store."""

from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.domain.entities.offer import OfferSnapshot


class InMemoryOfferRepo(OfferRepo):
    def __init__(self) -> None:
        self._offers: dict[int, OfferSnapshot] = {}

    def add(self, offer: OfferSnapshot) -> OfferSnapshot:
        """Seeds an offer (the engine itself never writes offers)."""
        self._offers[offer.id] = offer
        return offer

    async def get_offer(self, offer_id: int) -> OfferSnapshot | None:
        return self._offers.get(offer_id)

    async def list_offer_ids_by_owner(self, owner_id: int) -> list[int]:
        return sorted(o.id for o in self._offers.values() if o.owner_id == owner_id)
