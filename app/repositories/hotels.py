import logging

from pymongo.asynchronous.database import AsyncDatabase

from app.db import HOTELS, to_object_id

logger = logging.getLogger(__name__)


class HotelRepository:
    def __init__(self, db: AsyncDatabase):
        self._collection = db[HOTELS]

    async def search(
        self,
        query: dict,
        sort: list[tuple[str, int]],
        skip: int,
        limit: int,
    ) -> list[dict]:
        cursor = self._collection.find(query, sort=sort, skip=skip, limit=limit)
        return await cursor.to_list(length=None)

    async def count(self, query: dict) -> int:
        return await self._collection.count_documents(query)

    async def get(self, hotel_id: str) -> dict | None:
        oid = to_object_id(hotel_id)
        if oid is None:
            return None
        return await self._collection.find_one({"_id": oid})

    async def get_many(self, hotel_ids: list[str]) -> list[dict]:
        oids = [oid for oid in (to_object_id(h) for h in hotel_ids) if oid is not None]
        if not oids:
            return []
        cursor = self._collection.find({"_id": {"$in": oids}})
        return await cursor.to_list(length=None)

    async def increment_aggregates(self, hotel_id: str, total_cost: float) -> bool:
        oid = to_object_id(hotel_id)
        if oid is None:
            return False
        result = await self._collection.update_one(
            {"_id": oid},
            {"$inc": {"totalBookings": 1, "totalRevenue": total_cost}},
        )
        if result.matched_count == 0:
            logger.warning("Hotel %s not found while incrementing aggregates", hotel_id)
        return result.matched_count > 0
