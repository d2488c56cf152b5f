import logging

from app.exceptions.custom import HotelNotFoundError
from app.mappers.search_query import (
    PAGE_SIZE,
    build_search_query,
    build_sort,
    page_skip,
    total_pages,
)
from app.repositories.hotels import HotelRepository
from app.schemas.hotel import Hotel, HotelSearchResponse, Pagination
from app.schemas.search import HotelSearchParams

logger = logging.getLogger(__name__)


class HotelSearchService:
    def __init__(self, hotels: HotelRepository):
        self._hotels = hotels

    async def search(self, params: HotelSearchParams) -> HotelSearchResponse:
        query = build_search_query(params)
        sort = build_sort(params.sortOption)

        docs = await self._hotels.search(
            query, sort=sort, skip=page_skip(params.page), limit=PAGE_SIZE
        )
        total = await self._hotels.count(query)

        logger.info(
            "Hotel search destination=%r page=%d matched %d",
            params.destination,
            params.page,
            total,
        )
        return HotelSearchResponse(
            data=[Hotel(**doc) for doc in docs],
            pagination=Pagination(
                total=total,
                page=params.page,
                pages=total_pages(total),
            ),
        )

    async def get_hotel(self, hotel_id: str) -> Hotel:
        doc = await self._hotels.get(hotel_id)
        if doc is None:
            raise HotelNotFoundError(hotel_id)
        return Hotel(**doc)
