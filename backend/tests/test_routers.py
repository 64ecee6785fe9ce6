import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient

from travel_desk.database import get_db
from travel_desk.main import app
from travel_desk.routers.itineraries import get_travel_request
from travel_desk.schemas.travel import Train, TravelRequest, TravelRequestSummary
from travel_desk.services.travel_request_service import UnknownLegKindError, travel_request_service


async def _no_db():
    yield None


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = _no_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def with_trip(march_trip):
    app.dependency_overrides[get_travel_request] = lambda: march_trip
    return march_trip


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "travel-desk"}


def test_itinerary_json(client, with_trip):
    response = client.get("/api/travel/requests/1/itinerary")
    assert response.status_code == 200

    body = response.json()
    assert body["request_number"] == "TR-1001"
    assert body["start_date"] == "2025-03-01"
    assert body["end_date"] == "2025-03-05"
    assert [d["day_number"] for d in body["days"]] == [1, 2, 3, 4, 5]
    assert [d["is_free_day"] for d in body["days"]] == [False, True, True, True, False]

    first_day = body["days"][0]["items"]
    assert [(i["type"], i["role"]) for i in first_day] == [("flight", None), ("hotel", "check_in")]
    assert first_day[1]["time"] == "15:00"
    assert first_day[1]["priority"] == 7
    assert first_day[0]["data"]["flight_number"] == "BA117"


def test_itinerary_json_logs_legs_outside_trip_dates(client, caplog):
    request = TravelRequest(
        request_number="TR-WIDE",
        trip_start_date=date(2025, 5, 2),
        trip_end_date=date(2025, 5, 3),
        trains=[Train(departure_date=date(2025, 5, 1))],
    )
    app.dependency_overrides[get_travel_request] = lambda: request

    with caplog.at_level(logging.WARNING, logger="travel_desk.services.itinerary_service"):
        response = client.get("/api/travel/requests/1/itinerary")

    assert response.status_code == 200
    assert response.json()["start_date"] == "2025-05-01"
    assert "train@2025-05-01" in caplog.text


def test_itinerary_pdf(client, with_trip):
    response = client.get("/api/travel/requests/1/itinerary/pdf")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "attachment; filename=Itinerary-TR-1001.pdf"
    assert response.content.startswith(b"%PDF")


def test_itinerary_html(client, with_trip):
    response = client.get("/api/travel/requests/1/itinerary/html")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Request #TR-1001" in response.text


def test_itinerary_for_missing_request(client, monkeypatch):
    async def missing(db, request_id):
        raise ValueError("Travel request not found")

    monkeypatch.setattr(travel_request_service, "get_aggregate", missing)
    response = client.get("/api/travel/requests/42/itinerary")
    assert response.status_code == 404
    assert response.json()["detail"] == "Travel request not found"


def test_add_leg_unknown_kind(client, monkeypatch):
    async def add_leg(db, request_id, kind, payload):
        raise UnknownLegKindError(f"Unknown leg type: {kind}")

    monkeypatch.setattr(travel_request_service, "add_leg", add_leg)
    response = client.post("/api/travel/requests/1/submarines", json={})
    assert response.status_code == 400


def test_create_travel_request(client, monkeypatch):
    async def create_request(db, payload):
        return TravelRequestSummary(
            id=7,
            request_number="TR-7",
            status="REQUEST",
            trip_start_date=payload.trip_start_date,
            trip_end_date=None,
            notes=None,
            created_at="2025-01-01T00:00:00",
        )

    monkeypatch.setattr(travel_request_service, "create_request", create_request)
    response = client.post("/api/travel/requests", json={"trip_start_date": "2025-04-01"})
    assert response.status_code == 201
    assert response.json()["trip_start_date"] == str(date(2025, 4, 1))


def test_invalid_status_is_bad_request(client, monkeypatch):
    async def update_status(db, request_id, status):
        raise ValueError(f"Invalid status: {status}")

    monkeypatch.setattr(travel_request_service, "update_status", update_status)
    response = client.patch("/api/travel/requests/1/status", json={"status": "ON_HOLD"})
    assert response.status_code == 400
