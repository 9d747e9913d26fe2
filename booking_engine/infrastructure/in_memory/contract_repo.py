"""In-memory rental contract store."""

from dataclasses import replace

from booking_engine.application.interfaces.contract_repo import ContractRepo
from booking_engine.domain.entities.rental_contract import RentalContract
from booking_engine.domain.errors import ContractNotFoundError


class InMemoryContractRepo(ContractRepo):
    def __init__(self) -> None:
        self._contracts: dict[int, RentalContract] = {}
        self._by_booking: dict[int, int] = {}
        self._next_id = 1

    async def get_by_id(self, contract_id: int) -> RentalContract | None:
        contract = self._contracts.get(contract_id)
        return replace(contract) if contract else None

    async def get_by_booking_id(self, booking_id: int) -> RentalContract | None:
        contract_id = self._by_booking.get(booking_id)
        return await self.get_by_id(contract_id) if contract_id is not None else None

    async def list_by_user(self, user_id: int) -> list[RentalContract]:
        found = [c for c in self._contracts.values() if c.is_party(user_id)]
        return [replace(c) for c in sorted(found, key=lambda c: c.created_at, reverse=True)]

    async def create(self, contract: RentalContract) -> RentalContract:
        # booking_id is unique, as in the SQL table
        if contract.booking_id in self._by_booking:
            return await self.get_by_id(self._by_booking[contract.booking_id])
        contract.id = self._next_id
        self._next_id += 1
        self._contracts[contract.id] = replace(contract)
        self._by_booking[contract.booking_id] = contract.id
        return contract

    async def update(self, contract: RentalContract) -> RentalContract:
        if contract.id is None or contract.id not in self._contracts:
            raise ContractNotFoundError(contract_id=contract.id)
        self._contracts[contract.id] = replace(contract)
        return contract
