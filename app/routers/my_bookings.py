from fastapi import APIRouter

from app.dependencies import BookingDep, CurrentUserDep
from app.schemas.booking import HotelWithBookings

router = APIRouter()


@router.get("", response_model=list[HotelWithBookings])
async def list_my_bookings(
    user: CurrentUserDep,
    service: BookingDep,
) -> list[HotelWithBookings]:
    return await service.list_user_bookings(user.userId)
