import logging

from pymongo.asynchronous.database import AsyncDatabase

from app.db import USERS, to_object_id

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncDatabase):
        self._collection = db[USERS]

    async def get(self, user_id: str) -> dict | None:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        return await self._collection.find_one({"_id": oid}, {"password": 0})

    async def increment_aggregates(self, user_id: str, total_cost: float) -> bool:
        oid = to_object_id(user_id)
        if oid is None:
            logger.warning("User id %r is not a valid ObjectId, skipping aggregates", user_id)
            return False
        result = await self._collection.update_one(
            {"_id": oid},
            {"$inc": {"totalBookings": 1, "totalSpent": total_cost}},
        )
        if result.matched_count == 0:
            logger.warning("User %s not found while incrementing aggregates", user_id)
        return result.matched_count > 0
