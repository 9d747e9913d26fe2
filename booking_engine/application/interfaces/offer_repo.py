from booking_engine.domain.entities.offer import OfferSnapshot


class OfferRepo:
    """Read access to the offer store."""

    async def get_offer(self, offer_id: int) -> OfferSnapshot | None:
        raise NotImplementedError

    async def list_offer_ids_by_owner(self, owner_id: int) -> list[int]:
        raise NotImplementedError
