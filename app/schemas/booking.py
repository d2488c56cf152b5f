from datetime import datetime, timezone
from enum import StrEnum

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.schemas.hotel import Hotel


class BookingStatus(StrEnum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"
    refunded = "refunded"


class PaymentStatus(StrEnum):
    pending = "pending"
    paid = "paid"
    failed = "failed"
    refunded = "refunded"


class PaymentIntentRequest(BaseModel):
    numberOfNights: int = Field(ge=1)


class PaymentIntentResponse(BaseModel):
    paymentIntentId: str
    clientSecret: str
    totalCost: float


class BookingForm(BaseModel):
    """Guest details submitted once the payment UI has confirmed the intent."""

    paymentIntentId: str = Field(min_length=1)
    firstName: str
    lastName: str
    email: str
    phone: str | None = None
    adultCount: int = Field(ge=1)
    childCount: int = Field(default=0, ge=0)
    checkIn: datetime
    checkOut: datetime
    totalCost: float = Field(ge=0)
    specialRequests: str | None = None

    @field_validator("checkIn", "checkOut")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # naive timestamps are read as UTC so both ends compare
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _check_dates(self) -> "BookingForm":
        if self.checkOut <= self.checkIn:
            raise ValueError("checkOut must be after checkIn")
        return self


class Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    userId: str
    hotelId: str
    paymentIntentId: str | None = None
    firstName: str
    lastName: str
    email: str
    phone: str | None = None
    adultCount: int
    childCount: int = 0
    checkIn: datetime
    checkOut: datetime
    totalCost: float
    specialRequests: str | None = None
    status: BookingStatus = BookingStatus.pending
    paymentStatus: PaymentStatus = PaymentStatus.pending
    paymentMethod: str | None = None
    cancellationReason: str | None = None
    refundAmount: float | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @field_validator("id", "userId", "hotelId", mode="before")
    @classmethod
    def _stringify_object_id(cls, value):
        if isinstance(value, ObjectId):
            return str(value)
        return value


class HotelWithBookings(Hotel):
    bookings: list[Booking] = []
