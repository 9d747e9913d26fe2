"""ContractRenderer port - turns a contract snapshot into a document."""

from abc import ABC, abstractmethod

from booking_engine.domain.entities.rental_contract import RentalContract


class ContractRenderer(ABC):
    media_type: str = "application/octet-stream"
    file_extension: str = "bin"

    @abstractmethod
    def render(self, contract: RentalContract) -> bytes:
        """Renders the full contract snapshot; the engine treats the result as opaque."""
        raise NotImplementedError
