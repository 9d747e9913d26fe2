from functools import lru_cache
from zoneinfo import ZoneInfo

from fastapi import Depends, Header, HTTPException, status
from pybreaker import CircuitBreaker
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.api.deps import AsyncSessionLocal
from booking_engine.application.interfaces.clock import Clock, SystemClock
from booking_engine.application.interfaces.contract_renderer import ContractRenderer
from booking_engine.application.use_cases import (
    BlockDatesUseCase,
    CalculatePriceUseCase,
    CancelBookingUseCase,
    CancelContractUseCase,
    CheckAvailabilityUseCase,
    CreateBookingUseCase,
    GenerateContractUseCase,
    GetBookedDatesUseCase,
    GetBookingUseCase,
    GetContractUseCase,
    ListCustomerBookingsUseCase,
    ListProviderBookingsUseCase,
    ListUserContractsUseCase,
    RenderContractUseCase,
    SignContractUseCase,
    UnblockDatesUseCase,
)
from booking_engine.config import Settings, get_settings
from booking_engine.infrastructure.db.repositories.availability_repo_sql import AvailabilityRepoSQL
from booking_engine.infrastructure.db.repositories.booking_repo_sql import BookingRepoSQL
from booking_engine.infrastructure.db.repositories.contract_repo_sql import ContractRepoSQL
from booking_engine.infrastructure.db.repositories.offer_repo_sql import OfferRepoSQL
from booking_engine.infrastructure.db.repositories.user_directory_sql import UserDirectorySQL
from booking_engine.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from booking_engine.infrastructure.in_memory import (
    InMemoryAvailabilityRepo,
    InMemoryBookingRepo,
    InMemoryContractRepo,
    InMemoryNotifier,
    InMemoryOfferRepo,
    InMemoryTransactionManager,
    InMemoryUserDirectory,
)
from booking_engine.infrastructure.messaging.circuit_breaker import (
    CircuitBreakerNotifier,
    build_notification_breaker,
)
from booking_engine.infrastructure.messaging.message_notifier_sql import MessageNotifierSQL
from booking_engine.infrastructure.rendering.jinja_renderer import JinjaContractRenderer


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


def get_clock(settings: Settings = Depends(get_settings)) -> Clock:
    local_tz = ZoneInfo(settings.local_timezone) if settings.local_timezone else None
    return SystemClock(local_tz=local_tz)


@lru_cache(maxsize=1)
def get_notification_breaker() -> CircuitBreaker:
    settings = get_settings()
    return build_notification_breaker(
        fail_max=settings.notification_fail_max,
        reset_timeout=settings.notification_reset_timeout,
    )


def get_contract_renderer(settings: Settings = Depends(get_settings)) -> ContractRenderer:
    return JinjaContractRenderer(currency_code=settings.currency_code)


def get_current_user_id(
    x_user_id: int | None = Header(default=None, alias="X-User-Id"),
) -> int:
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header is required",
        )
    return x_user_id


@lru_cache(maxsize=1)
def _in_memory_bundle():
    return {
        "offer_repo": InMemoryOfferRepo(),
        "user_directory": InMemoryUserDirectory(),
        "booking_repo": InMemoryBookingRepo(),
        "availability_repo": InMemoryAvailabilityRepo(),
        "contract_repo": InMemoryContractRepo(),
        "notifier": InMemoryNotifier(),
        "tx_manager": InMemoryTransactionManager(),
    }


def build_use_cases(
    *,
    offer_repo,
    user_directory,
    booking_repo,
    availability_repo,
    contract_repo,
    notifier,
    tx_manager,
    clock: Clock,
    renderer: ContractRenderer,
    currency_code: str,
) -> dict:
    availability = CheckAvailabilityUseCase(
        offer_repo=offer_repo,
        booking_repo=booking_repo,
        availability_repo=availability_repo,
        clock=clock,
    )
    return {
        "check_availability": availability,
        "get_booked_dates": GetBookedDatesUseCase(
            booking_repo=booking_repo,
            availability_repo=availability_repo,
            clock=clock,
        ),
        "calculate_price": CalculatePriceUseCase(offer_repo=offer_repo),
        "create_booking": CreateBookingUseCase(
            offer_repo=offer_repo,
            booking_repo=booking_repo,
            user_directory=user_directory,
            availability_checker=availability,
            notifier=notifier,
            transaction_manager=tx_manager,
            clock=clock,
            currency_code=currency_code,
        ),
        "cancel_booking": CancelBookingUseCase(
            offer_repo=offer_repo,
            booking_repo=booking_repo,
            user_directory=user_directory,
            notifier=notifier,
            transaction_manager=tx_manager,
            clock=clock,
            currency_code=currency_code,
        ),
        "block_dates": BlockDatesUseCase(
            offer_repo=offer_repo,
            availability_repo=availability_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "unblock_dates": UnblockDatesUseCase(
            offer_repo=offer_repo,
            availability_repo=availability_repo,
            transaction_manager=tx_manager,
        ),
        "get_booking": GetBookingUseCase(booking_repo=booking_repo, offer_repo=offer_repo),
        "list_customer_bookings": ListCustomerBookingsUseCase(booking_repo=booking_repo),
        "list_provider_bookings": ListProviderBookingsUseCase(
            booking_repo=booking_repo, offer_repo=offer_repo
        ),
        "generate_contract": GenerateContractUseCase(
            contract_repo=contract_repo,
            booking_repo=booking_repo,
            offer_repo=offer_repo,
            user_directory=user_directory,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "sign_contract": SignContractUseCase(
            contract_repo=contract_repo, transaction_manager=tx_manager, clock=clock
        ),
        "cancel_contract": CancelContractUseCase(
            contract_repo=contract_repo, transaction_manager=tx_manager, clock=clock
        ),
        "render_contract": RenderContractUseCase(
            contract_repo=contract_repo, renderer=renderer, clock=clock
        ),
        "get_contract": GetContractUseCase(contract_repo=contract_repo),
        "list_user_contracts": ListUserContractsUseCase(contract_repo=contract_repo),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
    clock: Clock = Depends(get_clock),
    renderer: ContractRenderer = Depends(get_contract_renderer),
    breaker: CircuitBreaker = Depends(get_notification_breaker),
):
    if settings.use_in_memory:
        bundle = _in_memory_bundle()
        return build_use_cases(
            offer_repo=bundle["offer_repo"],
            user_directory=bundle["user_directory"],
            booking_repo=bundle["booking_repo"],
            availability_repo=bundle["availability_repo"],
            contract_repo=bundle["contract_repo"],
            notifier=CircuitBreakerNotifier(bundle["notifier"], breaker),
            tx_manager=bundle["tx_manager"],
            clock=clock,
            renderer=renderer,
            currency_code=settings.currency_code,
        )

    if not session:
        raise RuntimeError("DB session not available")

    return build_use_cases(
        offer_repo=OfferRepoSQL(session),
        user_directory=UserDirectorySQL(session),
        booking_repo=BookingRepoSQL(session),
        availability_repo=AvailabilityRepoSQL(session),
        contract_repo=ContractRepoSQL(session),
        notifier=CircuitBreakerNotifier(MessageNotifierSQL(AsyncSessionLocal), breaker),
        tx_manager=SQLAlchemyTransactionManager(session),
        clock=clock,
        renderer=renderer,
        currency_code=settings.currency_code,
    )
