import math
import re

from app.schemas.search import HotelSearchParams

PAGE_SIZE = 10

# Fields a single-word destination is matched against.
DESTINATION_FIELDS = (
    "city",
    "country",
    "location.address.city",
    "location.address.country",
    "location.address.state",
    "name",
)

_SORT_OPTIONS: dict[str, list[tuple[str, int]]] = {
    "starRating": [("starRating", -1)],
    "pricePerNightAsc": [("pricePerNight", 1)],
    "pricePerNightDesc": [("pricePerNight", -1)],
}
_DEFAULT_SORT = [("createdAt", -1)]


def _icontains(word: str) -> dict:
    return {"$regex": word, "$options": "i"}


def build_destination_filter(destination: str | None) -> dict:
    """Translate free-text destination into a Mongo predicate.

    One word matches any location field or the name. Several words must all
    appear in the name; location fields are not consulted for those.
    """
    if not destination or not destination.strip():
        return {}

    words = [re.escape(w) for w in destination.strip().split() if w]
    if len(words) == 1:
        return {"$or": [{field: _icontains(words[0])} for field in DESTINATION_FIELDS]}
    return {"$and": [{"name": _icontains(word)} for word in words]}


def build_search_query(params: HotelSearchParams) -> dict:
    # Unset isApproved counts as approved (legacy rows)
    query: dict = {"isApproved": {"$ne": False}}

    query.update(build_destination_filter(params.destination))

    if params.adultCount is not None:
        query["adultCount"] = {"$gte": params.adultCount}
    if params.childCount is not None:
        query["childCount"] = {"$gte": params.childCount}
    if params.facilities:
        query["facilities"] = {"$all": list(params.facilities)}
    if params.types:
        query["type"] = {"$in": list(params.types)}
    if params.stars:
        query["starRating"] = {"$in": list(params.stars)}
    if params.maxPrice is not None:
        query["pricePerNight"] = {"$lte": params.maxPrice}

    return query


def build_sort(sort_option: str | None) -> list[tuple[str, int]]:
    return list(_SORT_OPTIONS.get(sort_option or "", _DEFAULT_SORT))


def page_skip(page: int) -> int:
    return (max(page, 1) - 1) * PAGE_SIZE


def total_pages(total: int) -> int:
    return math.ceil(total / PAGE_SIZE)
