"""Integration tests for GET /api/hotels and GET /api/hotels/{id}."""

from bson import ObjectId


async def _seed(db, *hotels):
    await db["hotels"].insert_many(list(hotels))


async def _search(client, **params):
    resp = await client.get("/api/hotels", params=params)
    assert resp.status_code == 200
    return resp.json()


def _names(body):
    return [h["name"] for h in body["data"]]


async def test_single_word_matches_city(client, db, make_hotel):
    await _seed(db, make_hotel(name="Vinoth Grand Hotel", city="Chennai", country="India"))

    body = await _search(client, destination="Chennai")

    assert _names(body) == ["Vinoth Grand Hotel"]


async def test_single_word_matches_any_location_field(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="A", city="Paris", country="France"),
        make_hotel(name="B", city="Lyon", country="France"),
        make_hotel(
            name="C",
            city="x",
            country="y",
            location={"address": {"city": "z", "state": "Provence", "country": "w"}},
        ),
        make_hotel(name="Provence Lodge", city="Nice", country="Monaco"),
        make_hotel(name="D", city="Berlin", country="Germany"),
    )

    assert sorted(_names(await _search(client, destination="france"))) == ["A", "B"]
    assert sorted(_names(await _search(client, destination="PROVENCE"))) == ["C", "Provence Lodge"]


async def test_multi_word_requires_all_words_in_name(client, db, make_hotel):
    await _seed(db, make_hotel(name="Vinoth Grand Hotel", city="Chennai", country="India"))

    assert _names(await _search(client, destination="Vinoth Grand Hotel")) == ["Vinoth Grand Hotel"]
    assert _names(await _search(client, destination="grand vinoth")) == ["Vinoth Grand Hotel"]
    assert _names(await _search(client, destination="Vinoth Palace")) == []


async def test_multi_word_ignores_location_fields(client, db, make_hotel):
    await _seed(db, make_hotel(name="Harbour View", city="New York", country="USA"))

    assert _names(await _search(client, destination="New York")) == []


async def test_regex_characters_are_literal(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="Hotel (Central)", city="Rome"),
        make_hotel(name="Hotel Central", city="Milan"),
    )

    assert _names(await _search(client, destination="(Central)")) == ["Hotel (Central)"]
    assert _names(await _search(client, destination=".*")) == []


async def test_unapproved_hotels_never_listed(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="Hidden", pricePerNight=357, isApproved=False),
        make_hotel(name="Approved", isApproved=True),
        make_hotel(name="Legacy"),
    )

    body = await _search(client, destination="Dublin", maxPrice="400")

    assert sorted(_names(body)) == ["Approved", "Legacy"]
    assert body["pagination"]["total"] == 2


async def test_max_price_is_inclusive(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="Exact", pricePerNight=357),
        make_hotel(name="Cheaper", pricePerNight=100),
        make_hotel(name="Pricier", pricePerNight=358),
    )

    body = await _search(client, maxPrice="357")

    assert sorted(_names(body)) == ["Cheaper", "Exact"]


async def test_facilities_must_all_be_present(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="Both", facilities=["Spa", "Parking", "Free WiFi"]),
        make_hotel(name="SpaOnly", facilities=["Spa"]),
    )

    resp = await client.get("/api/hotels?facilities=Spa&facilities=Parking")

    assert _names(resp.json()) == ["Both"]


async def test_types_and_stars_match_any(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="Lux5", type=["Luxury"], starRating=5),
        make_hotel(name="Bud3", type=["Budget"], starRating=3),
        make_hotel(name="Fam4", type=["Family"], starRating=4),
    )

    resp = await client.get("/api/hotels?types=Luxury&types=Budget")
    assert sorted(_names(resp.json())) == ["Bud3", "Lux5"]

    resp = await client.get("/api/hotels?stars[]=4&stars[]=5")
    assert sorted(_names(resp.json())) == ["Fam4", "Lux5"]

    resp = await client.get("/api/hotels?stars=3")
    assert _names(resp.json()) == ["Bud3"]


async def test_guest_capacity(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(name="Small", adultCount=1, childCount=0),
        make_hotel(name="Family", adultCount=4, childCount=2),
    )

    assert _names(await _search(client, adultCount="2")) == ["Family"]
    assert _names(await _search(client, childCount="1")) == ["Family"]


async def test_sort_options(client, db, make_hotel):
    await _seed(
        db,
        make_hotel(offset=1, name="Mid", pricePerNight=150, starRating=4),
        make_hotel(offset=2, name="Cheap", pricePerNight=80, starRating=2),
        make_hotel(offset=3, name="Dear", pricePerNight=400, starRating=5),
    )

    assert _names(await _search(client, sortOption="pricePerNightAsc")) == ["Cheap", "Mid", "Dear"]
    assert _names(await _search(client, sortOption="pricePerNightDesc")) == ["Dear", "Mid", "Cheap"]
    assert _names(await _search(client, sortOption="starRating")) == ["Dear", "Mid", "Cheap"]
    # newest first by default and for unknown options
    assert _names(await _search(client)) == ["Dear", "Cheap", "Mid"]
    assert _names(await _search(client, sortOption="bogus")) == ["Dear", "Cheap", "Mid"]


async def test_pagination(client, db, make_hotel):
    await _seed(db, *[make_hotel(offset=i, name=f"Hotel {i:02d}") for i in range(23)])

    first = await _search(client, page="1")
    assert len(first["data"]) == 10
    assert first["pagination"] == {"total": 23, "page": 1, "pages": 3}
    assert first["data"][0]["name"] == "Hotel 22"

    third = await _search(client, page="3")
    assert len(third["data"]) == 3
    assert third["pagination"] == {"total": 23, "page": 3, "pages": 3}

    beyond = await _search(client, page="4")
    assert beyond["data"] == []
    assert beyond["pagination"] == {"total": 23, "page": 4, "pages": 3}


async def test_unparseable_page_defaults_to_first(client, db, make_hotel):
    await _seed(db, *[make_hotel(offset=i, name=f"Hotel {i:02d}") for i in range(12)])

    body = await _search(client, page="abc")

    assert body["pagination"]["page"] == 1
    assert len(body["data"]) == 10


async def test_empty_collection(client):
    body = await _search(client, destination="Nowhere")
    assert body == {"data": [], "pagination": {"total": 0, "page": 1, "pages": 0}}


async def test_response_exposes_string_ids(client, db, make_hotel):
    hotel = make_hotel()
    await _seed(db, hotel)

    body = await _search(client)

    assert body["data"][0]["_id"] == str(hotel["_id"])
    assert body["data"][0]["pricePerNight"] == 119


async def test_get_hotel(client, db, make_hotel):
    hotel = make_hotel(name="Detail Hotel")
    await _seed(db, hotel)

    resp = await client.get(f"/api/hotels/{hotel['_id']}")

    assert resp.status_code == 200
    assert resp.json()["name"] == "Detail Hotel"


async def test_get_hotel_returns_contact_policies_and_amenities(client, db, make_hotel):
    hotel = make_hotel(
        contact={"phone": "+353 1 555 0100", "email": "stay@dublin.example", "website": "https://dublin.example"},
        policies={"checkInTime": "15:00", "checkOutTime": "11:00", "petPolicy": "No pets"},
        amenities={"wifi": True, "pool": True},
        occupancyRate=72.5,
        isFeatured=True,
    )
    await _seed(db, hotel)

    body = (await client.get(f"/api/hotels/{hotel['_id']}")).json()

    assert body["contact"]["website"] == "https://dublin.example"
    assert body["policies"]["checkInTime"] == "15:00"
    assert body["policies"]["petPolicy"] == "No pets"
    assert body["amenities"]["wifi"] is True
    assert body["amenities"]["gym"] is False
    assert body["occupancyRate"] == 72.5
    assert body["isFeatured"] is True
    assert body["isActive"] is True


async def test_get_hotel_not_found(client):
    resp = await client.get(f"/api/hotels/{ObjectId()}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Hotel not found"}

    resp = await client.get("/api/hotels/not-an-object-id")
    assert resp.status_code == 404
