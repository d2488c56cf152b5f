import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from .custom import (
    AuthenticationError,
    BookingRejectedError,
    HotelNotFoundError,
    PaymentIntentError,
    StripeError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "Something went wrong"


async def booking_rejected_handler(_request: Request, exc: BookingRejectedError) -> JSONResponse:
    logger.warning("Booking rejected: %s", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


async def hotel_not_found_handler(_request: Request, exc: HotelNotFoundError) -> JSONResponse:
    logger.info("Hotel %s not found", exc.hotel_id)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


async def user_not_found_handler(_request: Request, exc: UserNotFoundError) -> JSONResponse:
    logger.info("User %s not found", exc.user_id)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


async def authentication_error_handler(_request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"message": exc.message})


async def payment_intent_error_handler(_request: Request, exc: PaymentIntentError) -> JSONResponse:
    logger.error("Payment intent error: %s", exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def stripe_error_handler(_request: Request, exc: StripeError) -> JSONResponse:
    logger.error("Stripe error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(status_code=500, content={"message": GENERIC_MESSAGE})


async def database_error_handler(_request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception("Database error: %s", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": GENERIC_MESSAGE})


async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: %r", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": GENERIC_MESSAGE})
