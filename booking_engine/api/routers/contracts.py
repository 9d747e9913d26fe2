from fastapi import APIRouter, Depends, Response, status

from booking_engine.api.dependencies import get_current_user_id, get_use_cases
from booking_engine.api.schemas.contracts import (
    CancelContractRequest,
    ContractResponse,
    GenerateContractRequest,
)

router = APIRouter(prefix="/rental-contracts")


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def generate_contract(
    payload: GenerateContractRequest,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> ContractResponse:
    # Only the customer or the offer owner may ask for the contract.
    await use_cases["get_booking"].execute(payload.booking_id, user_id)
    contract = await use_cases["generate_contract"].execute(payload.booking_id)
    return ContractResponse.model_validate(contract)


@router.get("/my-contracts", response_model=list[ContractResponse])
async def my_contracts(
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> list[ContractResponse]:
    contracts = await use_cases["list_user_contracts"].execute(user_id)
    return [ContractResponse.model_validate(c) for c in contracts]


@router.get("/booking/{booking_id}", response_model=ContractResponse)
async def get_contract_by_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> ContractResponse:
    contract = await use_cases["get_contract"].by_booking(booking_id, user_id)
    return ContractResponse.model_validate(contract)


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(
    contract_id: int,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> ContractResponse:
    contract = await use_cases["get_contract"].execute(contract_id, user_id)
    return ContractResponse.model_validate(contract)


@router.post("/{contract_id}/sign", response_model=ContractResponse)
async def sign_contract(
    contract_id: int,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> ContractResponse:
    contract = await use_cases["sign_contract"].execute(contract_id, user_id)
    return ContractResponse.model_validate(contract)


@router.post("/{contract_id}/cancel", response_model=ContractResponse)
async def cancel_contract(
    contract_id: int,
    payload: CancelContractRequest,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> ContractResponse:
    contract = await use_cases["cancel_contract"].execute(contract_id, user_id, payload.reason)
    return ContractResponse.model_validate(contract)


@router.get("/{contract_id}/document")
async def download_contract(
    contract_id: int,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> Response:
    document = await use_cases["render_contract"].execute(contract_id, user_id)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
