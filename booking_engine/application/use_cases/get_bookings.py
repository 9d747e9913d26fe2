from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.errors import BookingAccessDeniedError, BookingNotFoundError


class GetBookingUseCase:
    def __init__(self, booking_repo: BookingRepo, offer_repo: OfferRepo) -> None:
        self._booking_repo = booking_repo
        self._offer_repo = offer_repo

    async def execute(self, booking_id: int, user_id: int) -> Booking:
        """Only the customer and the offer owner may read a booking."""
        booking = await self._booking_repo.get_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundError(booking_id)

        if booking.customer_id == user_id:
            return booking
        offer = await self._offer_repo.get_offer(booking.offer_id)
        if offer is not None and offer.is_owned_by(user_id):
            return booking
        raise BookingAccessDeniedError(booking_id, user_id)


class ListCustomerBookingsUseCase:
    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self, customer_id: int) -> list[Booking]:
        return await self._booking_repo.list_by_customer(customer_id)


class ListProviderBookingsUseCase:
    """Bookings received on every offer owned by the provider."""

    def __init__(self, booking_repo: BookingRepo, offer_repo: OfferRepo) -> None:
        self._booking_repo = booking_repo
        self._offer_repo = offer_repo

    async def execute(self, provider_id: int) -> list[Booking]:
        offer_ids = await self._offer_repo.list_offer_ids_by_owner(provider_id)
        if not offer_ids:
            return []
        return await self._booking_repo.list_by_offer_ids(offer_ids)
