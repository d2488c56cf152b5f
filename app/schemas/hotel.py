from datetime import datetime

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Address(BaseModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zipCode: str | None = None


class Location(BaseModel):
    latitude: float | None = None
    longitude: float | None = None
    address: Address | None = None


class Contact(BaseModel):
    phone: str | None = None
    email: str | None = None
    website: str | None = None


class Policies(BaseModel):
    checkInTime: str | None = None
    checkOutTime: str | None = None
    cancellationPolicy: str | None = None
    petPolicy: str | None = None
    smokingPolicy: str | None = None


class Amenities(BaseModel):
    parking: bool = False
    wifi: bool = False
    pool: bool = False
    gym: bool = False
    spa: bool = False
    restaurant: bool = False
    bar: bool = False
    airportShuttle: bool = False
    businessCenter: bool = False


class Hotel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    userId: str | None = None
    name: str
    city: str = ""
    country: str = ""
    description: str = ""
    type: list[str] = []
    adultCount: int = 0
    childCount: int = 0
    facilities: list[str] = []
    pricePerNight: float = 0
    starRating: int = 1
    imageUrls: list[str] = []
    lastUpdated: datetime | None = None
    location: Location | None = None
    contact: Contact | None = None
    policies: Policies | None = None
    amenities: Amenities | None = None
    isApproved: bool | None = None
    totalBookings: int = 0
    totalRevenue: float = 0
    averageRating: float = 0
    reviewCount: int = 0
    occupancyRate: float = 0
    isActive: bool = True
    isFeatured: bool = False
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @field_validator("id", "userId", mode="before")
    @classmethod
    def _stringify_object_id(cls, value):
        if isinstance(value, ObjectId):
            return str(value)
        return value


class Pagination(BaseModel):
    total: int
    page: int
    pages: int


class HotelSearchResponse(BaseModel):
    data: list[Hotel]
    pagination: Pagination
