import logging
from datetime import date

from booking_engine.application import messages
from booking_engine.application.dtos.booking_dto import (
    CODE_INFRASTRUCTURE,
    CODE_NOT_AVAILABLE,
    CODE_OFFER_NOT_FOUND,
    CODE_SELF_BOOKING,
    CODE_VALIDATION,
    BookingResult,
)
from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.clock import Clock
from booking_engine.application.interfaces.notifier import Notifier
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.application.interfaces.user_directory import UserDirectory
from booking_engine.application.notifications import notify_best_effort
from booking_engine.application.use_cases.check_availability import CheckAvailabilityUseCase
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.errors import BookingOverlapError
from booking_engine.domain.value_objects.date_range import DateRange


class CreateBookingUseCase:
    """
    Booking orchestrator: validates a request end to end and stores an
    auto-confirmed booking.

    The availability check and the insert run inside one offer-scoped
    transaction, so two overlapping requests for the same offer cannot both
    succeed. The owner notification happens after commit and never fails
    the booking.
    """

    def __init__(
        self,
        offer_repo: OfferRepo,
        booking_repo: BookingRepo,
        user_directory: UserDirectory,
        availability_checker: CheckAvailabilityUseCase,
        notifier: Notifier,
        transaction_manager: TransactionManager,
        clock: Clock,
        currency_code: str = "EUR",
    ) -> None:
        self._offer_repo = offer_repo
        self._booking_repo = booking_repo
        self._user_directory = user_directory
        self._availability_checker = availability_checker
        self._notifier = notifier
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._currency_code = currency_code
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        offer_id: int,
        customer_id: int,
        start_date: date,
        end_date: date,
        terms_accepted: bool,
        withdrawal_right_acknowledged: bool,
    ) -> BookingResult:
        if not terms_accepted:
            return BookingResult.failure(messages.TERMS_REQUIRED, CODE_VALIDATION)
        if not withdrawal_right_acknowledged:
            return BookingResult.failure(messages.WITHDRAWAL_REQUIRED, CODE_VALIDATION)

        try:
            async with self._transaction_manager.lock_offer(offer_id):
                offer = await self._offer_repo.get_offer(offer_id)
                if offer is None:
                    return BookingResult.failure(messages.OFFER_NOT_FOUND, CODE_OFFER_NOT_FOUND)

                if offer.is_owned_by(customer_id):
                    return BookingResult.failure(messages.SELF_BOOKING, CODE_SELF_BOOKING)

                customer = await self._user_directory.get_user(customer_id)

                availability = await self._availability_checker.execute(
                    offer_id, start_date, end_date
                )
                if not availability.is_available:
                    return BookingResult.failure(
                        availability.error_message or messages.NOT_AVAILABLE,
                        availability.error_code or CODE_NOT_AVAILABLE,
                    )

                booking = await self._booking_repo.create(
                    Booking.confirmed(
                        offer_id=offer_id,
                        customer_id=customer_id,
                        date_range=DateRange(start=start_date, end=end_date),
                        price_per_day=availability.price_per_day,
                        now=self._clock.now(),
                    )
                )
        except BookingOverlapError:
            self._logger.info(
                "Booking rejected by the ledger overlap guard",
                extra={"offer_id": offer_id, "customer_id": customer_id},
            )
            return BookingResult.failure(messages.NOT_AVAILABLE, CODE_NOT_AVAILABLE)
        except Exception as exc:
            self._logger.error(
                "Booking could not be stored",
                exc_info=exc,
                extra={"offer_id": offer_id, "customer_id": customer_id},
            )
            return BookingResult.failure(messages.BOOKING_FAILED, CODE_INFRASTRUCTURE)

        self._logger.info(
            "Booking confirmed",
            extra={
                "booking_id": booking.id,
                "offer_id": offer_id,
                "customer_id": customer_id,
                "start_date": booking.start_date.isoformat(),
                "end_date": booking.end_date.isoformat(),
                "total_price": str(booking.total_price),
            },
        )

        if customer is not None:
            await notify_best_effort(
                self._notifier,
                sender_id=customer_id,
                recipient_id=offer.owner_id,
                offer_id=offer_id,
                compose_text=lambda: messages.booking_confirmed_text(
                    offer.title, booking, customer.full_name, self._currency_code
                ),
            )
        else:
            self._logger.warning(
                "Booking notification skipped: customer profile missing",
                extra={"booking_id": booking.id, "customer_id": customer_id},
            )

        return BookingResult.ok(booking)
