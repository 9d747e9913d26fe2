import logging

from booking_engine.application.dtos.contract_dto import RenderedContract
from booking_engine.application.interfaces.clock import Clock
from booking_engine.application.interfaces.contract_renderer import ContractRenderer
from booking_engine.application.interfaces.contract_repo import ContractRepo
from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.domain.entities.rental_contract import RentalContract
from booking_engine.domain.errors import ContractNotFoundError, NotContractPartyError


async def _load_for_party(
    contract_repo: ContractRepo,
    contract_id: int,
    user_id: int,
) -> RentalContract:
    contract = await contract_repo.get_by_id(contract_id)
    if contract is None:
        raise ContractNotFoundError(contract_id=contract_id)
    if not contract.is_party(user_id):
        raise NotContractPartyError(contract_id, user_id)
    return contract


class SignContractUseCase:
    def __init__(
        self,
        contract_repo: ContractRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._contract_repo = contract_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, contract_id: int, user_id: int) -> RentalContract:
        async with self._transaction_manager.start():
            contract = await self._contract_repo.get_by_id(contract_id)
            if contract is None:
                raise ContractNotFoundError(contract_id=contract_id)

            party = contract.sign(user_id, self._clock.now())
            contract = await self._contract_repo.update(contract)

        self._logger.info(
            "Rental contract signed",
            extra={
                "contract_id": contract_id,
                "user_id": user_id,
                "party": party.value,
                "status": contract.status.value,
            },
        )
        return contract


class CancelContractUseCase:
    def __init__(
        self,
        contract_repo: ContractRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._contract_repo = contract_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, contract_id: int, user_id: int, reason: str) -> RentalContract:
        async with self._transaction_manager.start():
            contract = await _load_for_party(self._contract_repo, contract_id, user_id)
            contract.cancel(reason, self._clock.now())
            contract = await self._contract_repo.update(contract)

        self._logger.info(
            "Rental contract cancelled",
            extra={"contract_id": contract_id, "user_id": user_id, "reason": reason},
        )
        return contract


class RenderContractUseCase:
    """Hands the full snapshot to the document renderer."""

    def __init__(
        self,
        contract_repo: ContractRepo,
        renderer: ContractRenderer,
        clock: Clock,
    ) -> None:
        self._contract_repo = contract_repo
        self._renderer = renderer
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, contract_id: int, user_id: int) -> RenderedContract:
        contract = await _load_for_party(self._contract_repo, contract_id, user_id)
        content = self._renderer.render(contract)
        filename = (
            f"rental_contract_{contract.id}_{self._clock.today():%Y%m%d}"
            f".{self._renderer.file_extension}"
        )
        self._logger.info("Rental contract rendered", extra={"contract_id": contract_id})
        return RenderedContract(
            contract_id=contract.id,
            filename=filename,
            media_type=self._renderer.media_type,
            content=content,
        )


class GetContractUseCase:
    def __init__(self, contract_repo: ContractRepo) -> None:
        self._contract_repo = contract_repo

    async def execute(self, contract_id: int, user_id: int) -> RentalContract:
        return await _load_for_party(self._contract_repo, contract_id, user_id)

    async def by_booking(self, booking_id: int, user_id: int) -> RentalContract:
        contract = await self._contract_repo.get_by_booking_id(booking_id)
        if contract is None:
            raise ContractNotFoundError(booking_id=booking_id)
        if not contract.is_party(user_id):
            raise NotContractPartyError(contract.id, user_id)
        return contract


class ListUserContractsUseCase:
    def __init__(self, contract_repo: ContractRepo) -> None:
        self._contract_repo = contract_repo

    async def execute(self, user_id: int) -> list[RentalContract]:
        return await self._contract_repo.list_by_user(user_id)
