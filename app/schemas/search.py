import re
from collections.abc import Mapping

from pydantic import BaseModel, field_validator

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")

_MULTI_VALUE_KEYS = ("facilities", "types", "stars")
_SINGLE_VALUE_KEYS = (
    "destination",
    "adultCount",
    "childCount",
    "maxPrice",
    "sortOption",
    "page",
)


def parse_int(value: object) -> int | None:
    """Lenient integer parse: leading digits win ("99.9" -> 99), garbage -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _INT_PREFIX_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


class HotelSearchParams(BaseModel):
    """Search filters, one optional field per dimension.

    Values arrive as loosely-typed query strings. Everything is coerced here so
    the query builder only ever sees clean values; anything unparseable is
    dropped rather than rejected.
    """

    destination: str | None = None
    adultCount: int | None = None
    childCount: int | None = None
    facilities: list[str] = []
    types: list[str] = []
    stars: list[int] = []
    maxPrice: int | None = None
    sortOption: str | None = None
    page: int = 1

    @field_validator("adultCount", "childCount", "maxPrice", mode="before")
    @classmethod
    def _coerce_int(cls, value):
        return parse_int(value)

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value):
        page = parse_int(value)
        if page is None or page < 1:
            return 1
        return page

    @field_validator("facilities", "types", mode="before")
    @classmethod
    def _coerce_str_list(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return [str(v) for v in value if str(v).strip()]

    @field_validator("stars", mode="before")
    @classmethod
    def _coerce_stars(cls, value):
        if value is None:
            return []
        if isinstance(value, (str, int)):
            value = [value]
        stars = [parse_int(v) for v in value]
        return [s for s in stars if s is not None]

    @classmethod
    def from_query_params(cls, query: Mapping) -> "HotelSearchParams":
        """Build from a query-string multidict.

        Multi-valued keys accept both repeated keys (``stars=4&stars=5``) and
        the bracketed form (``stars[]=4``).
        """
        raw: dict[str, object] = {}
        for key in _SINGLE_VALUE_KEYS:
            value = query.get(key)
            if value is not None and value != "":
                raw[key] = value
        for key in _MULTI_VALUE_KEYS:
            values = _get_all(query, key) + _get_all(query, f"{key}[]")
            if values:
                raw[key] = values
        return cls(**raw)


def _get_all(query: Mapping, key: str) -> list:
    if hasattr(query, "getlist"):
        return list(query.getlist(key))
    value = query.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
