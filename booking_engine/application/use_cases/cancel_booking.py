import logging

from booking_engine.application import messages
from booking_engine.application.dtos.booking_dto import (
    CODE_BOOKING_NOT_FOUND,
    CODE_FORBIDDEN,
    CODE_INFRASTRUCTURE,
    CODE_INVALID_STATUS,
    BookingResult,
)
from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.clock import Clock
from booking_engine.application.interfaces.notifier import Notifier
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.application.interfaces.user_directory import UserDirectory
from booking_engine.application.notifications import notify_best_effort


class CancelBookingUseCase:
    """Owner-initiated cancellation of a confirmed booking."""

    def __init__(
        self,
        offer_repo: OfferRepo,
        booking_repo: BookingRepo,
        user_directory: UserDirectory,
        notifier: Notifier,
        transaction_manager: TransactionManager,
        clock: Clock,
        currency_code: str = "EUR",
    ) -> None:
        self._offer_repo = offer_repo
        self._booking_repo = booking_repo
        self._user_directory = user_directory
        self._notifier = notifier
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._currency_code = currency_code
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        booking_id: int,
        provider_id: int,
        reason: str | None = None,
    ) -> BookingResult:
        try:
            async with self._transaction_manager.start():
                booking = await self._booking_repo.get_by_id(booking_id)
                if booking is None:
                    return BookingResult.failure(messages.BOOKING_NOT_FOUND, CODE_BOOKING_NOT_FOUND)

                offer = await self._offer_repo.get_offer(booking.offer_id)
                if offer is None or not offer.is_owned_by(provider_id):
                    return BookingResult.failure(messages.CANCEL_FORBIDDEN, CODE_FORBIDDEN)

                if not booking.can_be_cancelled:
                    return BookingResult.failure(messages.NOT_CANCELLABLE, CODE_INVALID_STATUS)

                booking.cancel(cancelled_at=self._clock.now(), reason=reason)
                booking = await self._booking_repo.save(booking)
                provider = await self._user_directory.get_user(provider_id)
        except Exception as exc:
            self._logger.error(
                "Booking could not be cancelled",
                exc_info=exc,
                extra={"booking_id": booking_id, "provider_id": provider_id},
            )
            return BookingResult.failure(messages.CANCEL_FAILED, CODE_INFRASTRUCTURE)

        self._logger.info(
            "Booking cancelled by provider",
            extra={"booking_id": booking_id, "provider_id": provider_id, "reason": reason},
        )

        if provider is not None:
            await notify_best_effort(
                self._notifier,
                sender_id=provider_id,
                recipient_id=booking.customer_id,
                offer_id=booking.offer_id,
                compose_text=lambda: messages.booking_cancelled_text(
                    offer.title, booking, provider.full_name, reason, self._currency_code
                ),
            )
        return BookingResult.ok(booking)
