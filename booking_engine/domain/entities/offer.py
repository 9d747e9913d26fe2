"""Offer snapshot as seen by the booking engine."""

from dataclasses import dataclass
from decimal import Decimal

from booking_engine.domain.constants import (
    HOURS_PER_RENTAL_DAY,
    OFFER_TYPE_ITEM,
    OFFER_TYPE_SERVICE,
)
from booking_engine.domain.errors import PricingError


@dataclass(frozen=True)
class OfferSnapshot:
    """
    Read-only view of a listing owned by the offer store.

    The engine never writes offers; it only reads pricing, ownership and
    the active flag.
    """

    id: int
    owner_id: int
    title: str = ""
    description: str = ""
    is_service: bool = False
    price_per_day: Decimal | None = None
    price_per_hour: Decimal | None = None
    is_active: bool = True

    @property
    def offer_type(self) -> str:
        return OFFER_TYPE_SERVICE if self.is_service else OFFER_TYPE_ITEM

    @property
    def has_price(self) -> bool:
        return self.price_per_day is not None or self.price_per_hour is not None

    def daily_price(self) -> Decimal:
        """
        Price of one rental day.

        Business rule: the daily price wins; an hourly price is converted
        with an 8-hour rental day.

        Raises:
            PricingError: the offer carries no price at all.
        """
        if self.price_per_day is not None:
            return Decimal(self.price_per_day)
        if self.price_per_hour is not None:
            return Decimal(self.price_per_hour) * HOURS_PER_RENTAL_DAY
        raise PricingError(self.id)

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id
