from fastapi import APIRouter, Request, Response

from app.dependencies import BookingDep, CurrentUserDep, HotelSearchDep
from app.schemas.booking import BookingForm, PaymentIntentRequest, PaymentIntentResponse
from app.schemas.hotel import Hotel, HotelSearchResponse
from app.schemas.search import HotelSearchParams

router = APIRouter()


@router.get("", response_model=HotelSearchResponse)
async def search_hotels(request: Request, service: HotelSearchDep) -> HotelSearchResponse:
    params = HotelSearchParams.from_query_params(request.query_params)
    return await service.search(params)


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: str, service: HotelSearchDep) -> Hotel:
    return await service.get_hotel(hotel_id)


@router.post(
    "/{hotel_id}/bookings/payment-intent",
    response_model=PaymentIntentResponse,
)
async def create_payment_intent(
    hotel_id: str,
    request: PaymentIntentRequest,
    user: CurrentUserDep,
    service: BookingDep,
) -> PaymentIntentResponse:
    return await service.create_payment_intent(
        hotel_id, user, request.numberOfNights
    )


@router.post("/{hotel_id}/bookings")
async def create_booking(
    hotel_id: str,
    form: BookingForm,
    user: CurrentUserDep,
    service: BookingDep,
) -> Response:
    await service.confirm_booking(hotel_id, user, form)
    return Response(status_code=200)
