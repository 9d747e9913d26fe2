from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from booking_engine.api.dependencies import get_current_user_id, get_use_cases
from booking_engine.api.schemas.bookings import (
    AvailabilityResponse,
    BlockDatesRequest,
    BlockDatesResponse,
    BookedDatesResponse,
    BookingResponse,
    BookingResultResponse,
    CancelBookingRequest,
    CreateBookingRequest,
    PriceQuoteResponse,
)
from booking_engine.application.dtos.booking_dto import (
    CODE_BOOKING_NOT_FOUND,
    CODE_FORBIDDEN,
    CODE_OFFER_NOT_FOUND,
    BookingResult,
)
from booking_engine.domain.value_objects.date_range import parse_day

router = APIRouter(prefix="/bookings")

_RESULT_STATUS = {
    CODE_FORBIDDEN: status.HTTP_403_FORBIDDEN,
    CODE_BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CODE_OFFER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _result_response(result: BookingResult, success_status: int = status.HTTP_200_OK):
    body = BookingResultResponse(
        success=result.success,
        booking=BookingResponse.model_validate(result.booking) if result.booking else None,
        error_message=result.error_message,
        error_code=result.error_code,
    )
    if result.success:
        code = success_status
    else:
        code = _RESULT_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=code, content=body.model_dump(mode="json"))


@router.get("/availability/{offer_id}", response_model=AvailabilityResponse)
async def check_availability(
    offer_id: int,
    start_date: str,
    end_date: str,
    use_cases=Depends(get_use_cases),
) -> AvailabilityResponse:
    result = await use_cases["check_availability"].execute(
        offer_id, parse_day(start_date), parse_day(end_date)
    )
    return AvailabilityResponse.model_validate(result)


@router.get("/offers/{offer_id}/booked-dates", response_model=BookedDatesResponse)
async def get_booked_dates(offer_id: int, use_cases=Depends(get_use_cases)) -> BookedDatesResponse:
    days = await use_cases["get_booked_dates"].execute(offer_id)
    return BookedDatesResponse(offer_id=offer_id, booked_dates=days)


@router.get("/price/{offer_id}", response_model=PriceQuoteResponse)
async def calculate_price(
    offer_id: int,
    start_date: str,
    end_date: str,
    use_cases=Depends(get_use_cases),
) -> PriceQuoteResponse:
    quote = await use_cases["calculate_price"].execute(
        offer_id, parse_day(start_date), parse_day(end_date)
    )
    return PriceQuoteResponse.model_validate(quote)


@router.post(
    "/offers/{offer_id}",
    response_model=BookingResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    offer_id: int,
    payload: CreateBookingRequest,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
):
    result = await use_cases["create_booking"].execute(
        offer_id=offer_id,
        customer_id=user_id,
        start_date=parse_day(payload.start_date),
        end_date=parse_day(payload.end_date),
        terms_accepted=payload.terms_accepted,
        withdrawal_right_acknowledged=payload.withdrawal_right_acknowledged,
    )
    return _result_response(result, success_status=status.HTTP_201_CREATED)


@router.post(
    "/offers/{offer_id}/block-dates",
    response_model=BlockDatesResponse,
)
async def block_dates(
    offer_id: int,
    payload: BlockDatesRequest,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> BlockDatesResponse:
    start, end = parse_day(payload.start_date), parse_day(payload.end_date)
    days = await use_cases["block_dates"].execute(offer_id, user_id, start, end, payload.reason)
    return BlockDatesResponse(offer_id=offer_id, start_date=start, end_date=end, days=days)


@router.delete(
    "/offers/{offer_id}/block-dates",
    response_model=BlockDatesResponse,
)
async def unblock_dates(
    offer_id: int,
    start_date: str,
    end_date: str,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> BlockDatesResponse:
    start, end = parse_day(start_date), parse_day(end_date)
    removed = await use_cases["unblock_dates"].execute(offer_id, user_id, start, end)
    return BlockDatesResponse(offer_id=offer_id, start_date=start, end_date=end, days=removed)


@router.get("/my-bookings", response_model=list[BookingResponse])
async def my_bookings(
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> list[BookingResponse]:
    bookings = await use_cases["list_customer_bookings"].execute(user_id)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get("/my-services", response_model=list[BookingResponse])
async def my_services(
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> list[BookingResponse]:
    bookings = await use_cases["list_provider_bookings"].execute(user_id)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> BookingResponse:
    booking = await use_cases["get_booking"].execute(booking_id, user_id)
    return BookingResponse.model_validate(booking)


@router.post("/{booking_id}/cancel", response_model=BookingResultResponse)
async def cancel_booking(
    booking_id: int,
    payload: CancelBookingRequest | None = None,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
):
    reason = payload.reason if payload else None
    result = await use_cases["cancel_booking"].execute(booking_id, user_id, reason)
    return _result_response(result)
