from booking_engine.domain.entities.rental_contract import RentalContract


class ContractRepo:
    async def get_by_id(self, contract_id: int) -> RentalContract | None:
        raise NotImplementedError

    async def get_by_booking_id(self, booking_id: int) -> RentalContract | None:
        raise NotImplementedError

    async def list_by_user(self, user_id: int) -> list[RentalContract]:
        raise NotImplementedError

    async def create(self, contract: RentalContract) -> RentalContract:
        """Stores a new contract; if the booking already has one, returns that one."""
        raise NotImplementedError

    async def update(self, contract: RentalContract) -> RentalContract:
        raise NotImplementedError
