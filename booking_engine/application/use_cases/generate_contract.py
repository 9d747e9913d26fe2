import logging
from decimal import Decimal

from booking_engine.application.interfaces.booking_repo import BookingRepo
from booking_engine.application.interfaces.clock import Clock
from booking_engine.application.interfaces.contract_repo import ContractRepo
from booking_engine.application.interfaces.offer_repo import OfferRepo
from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.application.interfaces.user_directory import UserDirectory
from booking_engine.domain.constants import DEPOSIT_RATE
from booking_engine.domain.contract_terms import terms_for_offer_type
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.entities.offer import OfferSnapshot
from booking_engine.domain.entities.rental_contract import RentalContract
from booking_engine.domain.entities.user import UserProfile
from booking_engine.domain.errors import (
    BookingNotFoundError,
    OfferNotFoundError,
    UserNotFoundError,
)
from booking_engine.domain.value_objects.money import Money


def deposit_for(total_price: Decimal) -> Decimal:
    """Refundable deposit: 20 % of the total price, rounded to cents."""
    return Money(Decimal(total_price)).percentage(DEPOSIT_RATE).amount


def _snapshot_price_per_day(offer: OfferSnapshot) -> Decimal:
    if offer.price_per_day is not None:
        return Decimal(offer.price_per_day)
    if offer.price_per_hour is not None:
        return Decimal(offer.price_per_hour)
    return Decimal("0")


class GenerateContractUseCase:
    """
    Derives the rental contract of a booking.

    Idempotent: a booking has at most one contract, and asking again
    returns the existing one untouched.
    """

    def __init__(
        self,
        contract_repo: ContractRepo,
        booking_repo: BookingRepo,
        offer_repo: OfferRepo,
        user_directory: UserDirectory,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._contract_repo = contract_repo
        self._booking_repo = booking_repo
        self._offer_repo = offer_repo
        self._user_directory = user_directory
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, booking_id: int) -> RentalContract:
        async with self._transaction_manager.start():
            booking = await self._booking_repo.get_by_id(booking_id)
            if booking is None:
                raise BookingNotFoundError(booking_id)

            existing = await self._contract_repo.get_by_booking_id(booking_id)
            if existing is not None:
                self._logger.info(
                    "Contract already exists for booking",
                    extra={"booking_id": booking_id, "contract_id": existing.id},
                )
                return existing

            offer = await self._offer_repo.get_offer(booking.offer_id)
            if offer is None:
                raise OfferNotFoundError(booking.offer_id)

            lessor = await self._user_directory.get_user(offer.owner_id)
            if lessor is None:
                raise UserNotFoundError(offer.owner_id)
            lessee = await self._user_directory.get_user(booking.customer_id)
            if lessee is None:
                raise UserNotFoundError(booking.customer_id)

            contract = await self._contract_repo.create(
                self._build_contract(booking, offer, lessor, lessee)
            )

        self._logger.info(
            "Rental contract generated",
            extra={"contract_id": contract.id, "booking_id": booking_id},
        )
        return contract

    def _build_contract(
        self,
        booking: Booking,
        offer: OfferSnapshot,
        lessor: UserProfile,
        lessee: UserProfile,
    ) -> RentalContract:
        return RentalContract(
            booking_id=booking.id,
            lessor_id=lessor.id,
            lessee_id=lessee.id,
            offer_title=offer.title,
            offer_description=offer.description,
            offer_type=offer.offer_type,
            rental_start_date=booking.start_date,
            rental_end_date=booking.end_date,
            rental_days=booking.days_count,
            total_price=Decimal(booking.total_price),
            deposit_amount=deposit_for(booking.total_price),
            price_per_day=_snapshot_price_per_day(offer),
            lessor_name=lessor.full_name,
            lessor_email=lessor.email,
            lessee_name=lessee.full_name,
            lessee_email=lessee.email,
            terms_and_conditions=terms_for_offer_type(offer.offer_type),
            created_at=self._clock.now(),
        )
