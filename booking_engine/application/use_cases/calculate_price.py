from datetime import date

from booking_engine.application.dtos.availability_dto import PriceQuote
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.domain.errors import OfferNotFoundError
from booking_engine.domain.value_objects.date_range import DateRange


class CalculatePriceUseCase:
    def __init__(self, offer_repo: OfferRepo) -> None:
        self._offer_repo = offer_repo

    async def execute(self, offer_id: int, start_date: date, end_date: date) -> PriceQuote:
        """
        Quotes the total price of a range without checking availability.

        Raises:
            OfferNotFoundError: unknown offer.
            PricingError: the offer has no price.
            InvalidDateRangeError: ``end_date`` before ``start_date``.
        """
        offer = await self._offer_repo.get_offer(offer_id)
        if offer is None:
            raise OfferNotFoundError(offer_id)

        date_range = DateRange(start=start_date, end=end_date)
        price_per_day = offer.daily_price()
        return PriceQuote(
            offer_id=offer_id,
            start_date=date_range.start,
            end_date=date_range.end,
            days_count=date_range.days_count,
            price_per_day=price_per_day,
            total_price=price_per_day * date_range.days_count,
        )
