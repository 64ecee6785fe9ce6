from datetime import date

import pytest
from pydantic import ValidationError

from travel_desk.schemas.travel import CreateTravelRequest
from travel_desk.services.itinerary_builder import HotelItem, ItemType, build_days
from travel_desk.services.travel_request_service import UnknownLegKindError, travel_request_service


async def _create(db, start=date(2025, 3, 1), end=date(2025, 3, 5), notes=None):
    return await travel_request_service.create_request(
        db, CreateTravelRequest(trip_start_date=start, trip_end_date=end, notes=notes)
    )


async def test_create_request_assigns_number_and_status(db):
    created = await _create(db, notes="Board retreat")

    assert created.request_number.startswith("TR-")
    assert created.status == "REQUEST"
    assert created.notes == "Board retreat"


async def test_aggregate_drives_the_itinerary(db):
    created = await _create(db)
    await travel_request_service.add_leg(
        db, created.id, "flights",
        {"airline": "BA", "flight_number": "BA117", "departure_date": "2025-03-01T09:00", "class": "FIRST"},
    )
    hotel = await travel_request_service.add_leg(
        db, created.id, "hotels",
        {
            "hotel_name": "The Plaza",
            "check_in_date": "2025-03-01",
            "check_out_date": "2025-03-05",
            "rooms": [{"unit_category": "Suite", "price_per_night": "950.00", "guest_numbers": 2}],
        },
    )
    await travel_request_service.add_leg(
        db, created.id, "passengers", {"full_name": "Amal Haddad", "is_main_passenger": True}
    )

    assert len(hotel.rooms) == 1

    aggregate = await travel_request_service.get_aggregate(db, created.id)
    assert aggregate.flights[0].departure_date == date(2025, 3, 1)
    assert aggregate.flights[0].travel_class == "FIRST"
    assert aggregate.hotels[0].rooms[0].unit_category == "Suite"
    assert aggregate.passengers[0].is_main_passenger

    days = build_days(aggregate)
    assert len(days) == 5
    assert [i.type for i in days[0].items] == [ItemType.FLIGHT, ItemType.HOTEL]
    assert isinstance(days[4].items[0], HotelItem)
    assert not days[4].items[0].is_check_in


async def test_get_missing_request(db):
    with pytest.raises(ValueError, match="not found"):
        await travel_request_service.get_aggregate(db, 999)


async def test_add_leg_rejects_unknown_kind(db):
    created = await _create(db)
    with pytest.raises(UnknownLegKindError):
        await travel_request_service.add_leg(db, created.id, "submarines", {})


async def test_add_leg_validates_payload(db):
    created = await _create(db)
    with pytest.raises(ValidationError):
        await travel_request_service.add_leg(db, created.id, "events", {"event_date": "2025-03-02"})


async def test_add_leg_to_missing_request(db):
    with pytest.raises(ValueError, match="Travel request not found"):
        await travel_request_service.add_leg(db, 404, "events", {"event_name": "Gala"})


async def test_delete_leg(db):
    created = await _create(db)
    event = await travel_request_service.add_leg(
        db, created.id, "events", {"event_name": "Gala", "event_date": "2025-03-02"}
    )

    await travel_request_service.delete_leg(db, "events", event.id)

    aggregate = await travel_request_service.get_aggregate(db, created.id)
    assert aggregate.events == []
    with pytest.raises(ValueError):
        await travel_request_service.delete_leg(db, "events", event.id)


async def test_list_requests_filters(db):
    early = await _create(db, start=date(2025, 1, 10), end=date(2025, 1, 20))
    late = await _create(db, start=date(2025, 6, 1), end=date(2025, 6, 9))
    await travel_request_service.update_status(db, late.id, "PLANNING")

    everything = await travel_request_service.list_requests(db)
    assert [r.id for r in everything] == [late.id, early.id]

    planning = await travel_request_service.list_requests(db, status="PLANNING")
    assert [r.id for r in planning] == [late.id]

    from_march = await travel_request_service.list_requests(db, start_date=date(2025, 3, 1))
    assert [r.id for r in from_march] == [late.id]

    until_feb = await travel_request_service.list_requests(db, end_date=date(2025, 2, 1))
    assert [r.id for r in until_feb] == [early.id]


async def test_update_status_rejects_unknown_status(db):
    created = await _create(db)
    with pytest.raises(ValueError, match="Invalid status"):
        await travel_request_service.update_status(db, created.id, "ON_HOLD")


async def test_delete_request_removes_legs(db):
    created = await _create(db)
    await travel_request_service.add_leg(
        db, created.id, "hotels", {"hotel_name": "H", "rooms": [{"unit_category": "Twin"}]}
    )

    await travel_request_service.delete_request(db, created.id)

    with pytest.raises(ValueError):
        await travel_request_service.get_aggregate(db, created.id)
