import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.config import Settings
from app.db import ensure_indexes
from app.exceptions.custom import (
    AuthenticationError,
    BookingRejectedError,
    HotelNotFoundError,
    PaymentIntentError,
    StripeError,
    UserNotFoundError,
)
from app.exceptions.handlers import (
    authentication_error_handler,
    booking_rejected_handler,
    database_error_handler,
    hotel_not_found_handler,
    payment_intent_error_handler,
    stripe_error_handler,
    unhandled_error_handler,
    user_not_found_handler,
    validation_error_handler,
)
from app.repositories.bookings import BookingRepository
from app.repositories.hotels import HotelRepository
from app.repositories.users import UserRepository
from app.routers.health import router as health_router
from app.routers.hotels import router as hotels_router
from app.routers.my_bookings import router as my_bookings_router
from app.routers.users import router as users_router
from app.services.booking import BookingService
from app.services.hotel_search import HotelSearchService
from app.services.stripe import StripeService

logger = logging.getLogger(__name__)


async def build_services(
    app: FastAPI,
    settings: Settings,
    client: httpx.AsyncClient,
    db: AsyncDatabase,
) -> None:
    """Wire repositories and services onto ``app.state``."""
    await ensure_indexes(db)

    hotels = HotelRepository(db)
    bookings = BookingRepository(db)
    users = UserRepository(db)
    stripe = StripeService(client, settings.stripe_api_key)

    app.state.settings = settings
    app.state.user_repository = users
    app.state.hotel_search_service = HotelSearchService(hotels)
    app.state.booking_service = BookingService(
        hotels, bookings, users, stripe, currency=settings.payment_currency
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    mongo = AsyncMongoClient(settings.mongodb_connection_string)
    try:
        async with httpx.AsyncClient(timeout=30.0) as client:
            await build_services(app, settings, client, mongo[settings.mongodb_database])
            logger.info("Connected to MongoDB database %s", settings.mongodb_database)
            yield
    finally:
        await mongo.close()


app = FastAPI(title="Hotel Booking API", lifespan=lifespan)

app.add_exception_handler(BookingRejectedError, booking_rejected_handler)
app.add_exception_handler(HotelNotFoundError, hotel_not_found_handler)
app.add_exception_handler(UserNotFoundError, user_not_found_handler)
app.add_exception_handler(AuthenticationError, authentication_error_handler)
app.add_exception_handler(PaymentIntentError, payment_intent_error_handler)
app.add_exception_handler(StripeError, stripe_error_handler)
app.add_exception_handler(PyMongoError, database_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(hotels_router, prefix="/api/hotels")
app.include_router(my_bookings_router, prefix="/api/my-bookings")
app.include_router(users_router, prefix="/api/users")
app.include_router(health_router, prefix="/api/health")
