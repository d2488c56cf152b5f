from datetime import datetime
from enum import StrEnum

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.hotel import Address


class UserRole(StrEnum):
    user = "user"
    hotel_owner = "hotel_owner"
    admin = "admin"


class CurrentUser(BaseModel):
    """Caller identity resolved from the auth token."""

    userId: str
    role: str = UserRole.user
    email: str | None = None


class BudgetRange(BaseModel):
    min: float = 0
    max: float = 0


class UserPreferences(BaseModel):
    preferredDestinations: list[str] = []
    preferredHotelTypes: list[str] = []
    budgetRange: BudgetRange | None = None


class User(BaseModel):
    # no password field: extra keys are dropped on validation
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
    firstName: str | None = None
    lastName: str | None = None
    role: UserRole = UserRole.user
    phone: str | None = None
    address: Address | None = None
    preferences: UserPreferences | None = None
    totalBookings: int = 0
    totalSpent: float = 0
    isActive: bool = True
    emailVerified: bool = False
    lastLogin: datetime | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value):
        if isinstance(value, ObjectId):
            return str(value)
        return value
