import logging
from datetime import datetime, timezone

from pymongo.errors import DuplicateKeyError

from app.exceptions.custom import (
    BookingRejectedError,
    HotelNotFoundError,
    PaymentIntentError,
    StripeError,
)
from app.repositories.bookings import BookingRepository
from app.repositories.hotels import HotelRepository
from app.repositories.users import UserRepository
from app.schemas.booking import (
    Booking,
    BookingForm,
    BookingStatus,
    HotelWithBookings,
    PaymentIntentResponse,
    PaymentStatus,
)
from app.schemas.user import CurrentUser
from app.services.stripe import StripeService

logger = logging.getLogger(__name__)

SUCCEEDED = "succeeded"


def compute_total_cost(price_per_night: float, number_of_nights: int) -> float:
    return price_per_night * number_of_nights


def to_minor_units(amount: float) -> int:
    return int(round(amount * 100))


class BookingService:
    def __init__(
        self,
        hotels: HotelRepository,
        bookings: BookingRepository,
        users: UserRepository,
        stripe: StripeService,
        currency: str = "usd",
    ):
        self._hotels = hotels
        self._bookings = bookings
        self._users = users
        self._stripe = stripe
        self._currency = currency

    async def create_payment_intent(
        self, hotel_id: str, user: CurrentUser, number_of_nights: int
    ) -> PaymentIntentResponse:
        hotel = await self._hotels.get(hotel_id)
        if hotel is None:
            raise HotelNotFoundError(hotel_id, status_code=400)

        total_cost = compute_total_cost(hotel.get("pricePerNight", 0), number_of_nights)
        intent = await self._stripe.create_payment_intent(
            amount=to_minor_units(total_cost),
            currency=self._currency,
            metadata={"hotelId": hotel_id, "userId": user.userId},
        )
        if not intent.client_secret:
            raise PaymentIntentError("Error creating payment intent")

        return PaymentIntentResponse(
            paymentIntentId=intent.id,
            clientSecret=intent.client_secret,
            totalCost=total_cost,
        )

    async def confirm_booking(
        self, hotel_id: str, user: CurrentUser, form: BookingForm
    ) -> Booking:
        """Verify the payment intent and persist the booking.

        The intent must belong to this hotel and caller and must have
        succeeded. The booking insert and the two aggregate increments are
        separate writes with no transaction around them; the unique index on
        ``paymentIntentId`` keeps a replayed request from booking twice.
        """
        try:
            intent = await self._stripe.retrieve_payment_intent(form.paymentIntentId)
        except StripeError as exc:
            if exc.status_code == 404:
                raise BookingRejectedError("payment intent not found") from exc
            raise

        if (
            intent.metadata.get("hotelId") != hotel_id
            or intent.metadata.get("userId") != user.userId
        ):
            logger.warning(
                "Payment intent %s metadata does not match hotel=%s user=%s",
                intent.id,
                hotel_id,
                user.userId,
            )
            raise BookingRejectedError("payment intent mismatch")

        if intent.status != SUCCEEDED:
            raise BookingRejectedError(
                f"payment intent not succeeded. Status: {intent.status}"
            )

        now = datetime.now(timezone.utc)
        doc = form.model_dump()
        doc.update(
            userId=user.userId,
            hotelId=hotel_id,
            createdAt=now,
            updatedAt=now,
            status=BookingStatus.confirmed.value,
            paymentStatus=PaymentStatus.paid.value,
        )

        try:
            doc["_id"] = await self._bookings.insert(doc)
        except DuplicateKeyError as exc:
            raise BookingRejectedError(
                "booking already exists for this payment intent"
            ) from exc

        await self._hotels.increment_aggregates(hotel_id, form.totalCost)
        await self._users.increment_aggregates(user.userId, form.totalCost)

        logger.info(
            "Booking %s confirmed for hotel %s by user %s (total=%s)",
            doc["_id"],
            hotel_id,
            user.userId,
            form.totalCost,
        )
        return Booking(**doc)

    async def list_user_bookings(self, user_id: str) -> list[HotelWithBookings]:
        """The caller's bookings grouped under their hotels, newest booking first."""
        bookings = await self._bookings.find_by_user(user_id)
        if not bookings:
            return []

        by_hotel: dict[str, list[Booking]] = {}
        for doc in bookings:
            booking = Booking(**doc)
            by_hotel.setdefault(booking.hotelId, []).append(booking)

        hotels = await self._hotels.get_many(list(by_hotel))
        hotels_by_id = {str(h["_id"]): h for h in hotels}

        return [
            HotelWithBookings(**{**hotels_by_id[hotel_id], "bookings": hotel_bookings})
            for hotel_id, hotel_bookings in by_hotel.items()
            if hotel_id in hotels_by_id
        ]
