from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, constr

from booking_engine.domain.entities.rental_contract import ContractStatus


class GenerateContractRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    booking_id: int


class CancelContractRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    reason: constr(strip_whitespace=True, min_length=1, max_length=500)


class ContractResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    booking_id: int
    status: ContractStatus
    lessor_id: int
    lessee_id: int

    offer_title: str
    offer_description: str
    offer_type: str

    rental_start_date: date
    rental_end_date: date
    rental_days: int

    total_price: Decimal
    deposit_amount: Decimal
    price_per_day: Decimal

    lessor_name: str
    lessor_email: EmailStr
    lessee_name: str
    lessee_email: EmailStr

    terms_and_conditions: str
    special_conditions: str

    is_fully_signed: bool
    signed_by_lessor_at: datetime | None = None
    signed_by_lessee_at: datetime | None = None

    created_at: datetime
    last_modified_at: datetime | None = None
    cancellation_reason: str | None = None
    cancelled_at: datetime | None = None
    completed_at: datetime | None = None
