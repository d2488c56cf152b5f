from pymongo.asynchronous.database import AsyncDatabase

from app.db import BOOKINGS


class BookingRepository:
    def __init__(self, db: AsyncDatabase):
        self._collection = db[BOOKINGS]

    async def insert(self, booking: dict) -> str:
        """Insert a booking document and return its id.

        Raises ``DuplicateKeyError`` when a booking for the same payment
        intent already exists.
        """
        result = await self._collection.insert_one(booking)
        return str(result.inserted_id)

    async def find_by_user(self, user_id: str) -> list[dict]:
        cursor = self._collection.find({"userId": user_id}, sort=[("createdAt", -1)])
        return await cursor.to_list(length=None)
