"""RentalContract entity - immutable snapshot of a booking plus signature state."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from booking_engine.domain.errors import (
    ContractAlreadySignedError,
    InvalidContractStatusError,
    NotContractPartyError,
)


class ContractStatus(str, Enum):
    DRAFT = "DRAFT"
    SIGNED_BY_LESSOR = "SIGNED_BY_LESSOR"
    SIGNED_BY_BOTH = "SIGNED_BY_BOTH"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ContractParty(str, Enum):
    LESSOR = "lessor"
    LESSEE = "lessee"


def derive_contract_status(
    signed_by_lessor_at: datetime | None,
    signed_by_lessee_at: datetime | None,
    cancelled_at: datetime | None = None,
    completed_at: datetime | None = None,
) -> ContractStatus:
    """
    Computes the contract status from its timestamps.

    Terminal timestamps win. Otherwise a contract is ACTIVE as soon as both
    parties signed, in whatever order. A lessee-only signature leaves the
    contract in DRAFT.
    """
    if cancelled_at is not None:
        return ContractStatus.CANCELLED
    if completed_at is not None:
        return ContractStatus.COMPLETED
    if signed_by_lessor_at is not None and signed_by_lessee_at is not None:
        return ContractStatus.ACTIVE
    if signed_by_lessor_at is not None:
        return ContractStatus.SIGNED_BY_LESSOR
    return ContractStatus.DRAFT


@dataclass
class RentalContract:
    """
    Contract derived from a confirmed booking.

    Snapshot fields are copied once at generation time and never change
    afterwards, even if the offer is edited later. Only signature and
    terminal timestamps move; ``status`` is derived from them.
    """

    booking_id: int
    lessor_id: int
    lessee_id: int

    # Offer snapshot
    offer_title: str
    offer_description: str
    offer_type: str

    # Rental period
    rental_start_date: date
    rental_end_date: date
    rental_days: int

    # Financial snapshot
    total_price: Decimal
    deposit_amount: Decimal
    price_per_day: Decimal

    # Party snapshot
    lessor_name: str
    lessor_email: str
    lessee_name: str
    lessee_email: str

    terms_and_conditions: str
    created_at: datetime
    special_conditions: str = ""
    id: int | None = None

    # Signatures
    signed_by_lessor_at: datetime | None = None
    signed_by_lessee_at: datetime | None = None

    # Audit trail
    last_modified_at: datetime | None = None
    cancellation_reason: str | None = None
    cancelled_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def status(self) -> ContractStatus:
        return derive_contract_status(
            self.signed_by_lessor_at,
            self.signed_by_lessee_at,
            self.cancelled_at,
            self.completed_at,
        )

    @property
    def is_fully_signed(self) -> bool:
        return self.signed_by_lessor_at is not None and self.signed_by_lessee_at is not None

    @property
    def is_terminal(self) -> bool:
        return self.status in (ContractStatus.CANCELLED, ContractStatus.COMPLETED)

    def is_party(self, user_id: int) -> bool:
        return user_id in (self.lessor_id, self.lessee_id)

    def party_of(self, user_id: int) -> ContractParty:
        if user_id == self.lessor_id:
            return ContractParty.LESSOR
        if user_id == self.lessee_id:
            return ContractParty.LESSEE
        raise NotContractPartyError(self.id or 0, user_id)

    # === Business methods ===

    def sign(self, user_id: int, signed_at: datetime) -> ContractParty:
        """
        Records the signature of ``user_id``.

        Raises:
            NotContractPartyError: the user is neither lessor nor lessee.
            InvalidContractStatusError: the contract is cancelled or completed.
            ContractAlreadySignedError: the party already signed.
        """
        party = self.party_of(user_id)
        if self.is_terminal:
            raise InvalidContractStatusError(self.id or 0, self.status.value, "sign")

        if party is ContractParty.LESSOR:
            if self.signed_by_lessor_at is not None:
                raise ContractAlreadySignedError(self.id or 0, party.value)
            self.signed_by_lessor_at = signed_at
        else:
            if self.signed_by_lessee_at is not None:
                raise ContractAlreadySignedError(self.id or 0, party.value)
            self.signed_by_lessee_at = signed_at

        self.last_modified_at = signed_at
        return party

    def cancel(self, reason: str, cancelled_at: datetime) -> None:
        """Cancels the contract whatever its signature state."""
        if self.status == ContractStatus.CANCELLED:
            raise InvalidContractStatusError(self.id or 0, self.status.value, "cancel")
        if self.status == ContractStatus.COMPLETED:
            raise InvalidContractStatusError(self.id or 0, self.status.value, "cancel")
        self.cancellation_reason = reason
        self.cancelled_at = cancelled_at
        self.last_modified_at = cancelled_at

    def complete(self, completed_at: datetime) -> None:
        """External completion event; only active contracts complete."""
        if self.status != ContractStatus.ACTIVE:
            raise InvalidContractStatusError(self.id or 0, self.status.value, "complete")
        self.completed_at = completed_at
        self.last_modified_at = completed_at
