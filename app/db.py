import logging

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.asynchronous.database import AsyncDatabase

logger = logging.getLogger(__name__)

HOTELS = "hotels"
BOOKINGS = "bookings"
USERS = "users"


def to_object_id(value: str | None) -> ObjectId | None:
    """Parse a hex id, returning None for anything malformed."""
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


async def ensure_indexes(db: AsyncDatabase) -> None:
    await db[USERS].create_index("email", unique=True)
    # One booking per payment intent. Sparse so legacy bookings without an intent id still fit.
    await db[BOOKINGS].create_index("paymentIntentId", unique=True, sparse=True)
    await db[BOOKINGS].create_index("userId")
    await db[BOOKINGS].create_index("hotelId")
    logger.info("MongoDB indexes ensured on %s", db.name)
