from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions.custom import AuthenticationError
from app.repositories.users import UserRepository
from app.schemas.user import CurrentUser
from app.security import decode_token, extract_token
from app.services.booking import BookingService
from app.services.hotel_search import HotelSearchService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_hotel_search_service(request: Request) -> HotelSearchService:
    return request.app.state.hotel_search_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


SettingsDep = Annotated[Settings, Depends(get_settings)]
HotelSearchDep = Annotated[HotelSearchService, Depends(get_hotel_search_service)]
BookingDep = Annotated[BookingService, Depends(get_booking_service)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_current_user(request: Request, settings: SettingsDep) -> CurrentUser:
    token = extract_token(request)
    if not token:
        raise AuthenticationError("Access denied")
    return decode_token(token, settings.jwt_secret_key)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]

