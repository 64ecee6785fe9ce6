import logging
from datetime import date, datetime

from travel_desk.schemas.travel import Hotel, TravelRequest, Train
from travel_desk.services.itinerary_layout import atomic_blocks
from travel_desk.services.itinerary_service import itinerary_service


def test_build_returns_days_and_document(march_trip):
    days, document = itinerary_service.build(march_trip, generated_at=datetime(2026, 1, 2))

    assert len(days) == 5
    assert len(atomic_blocks(document, "day-header")) == 5
    assert len(atomic_blocks(document, "item")) == 3


def test_out_of_range_legs_are_logged_not_clipped(caplog):
    request = TravelRequest(
        request_number="TR-WIDE",
        trip_start_date=date(2025, 5, 2),
        trip_end_date=date(2025, 5, 3),
        trains=[Train(departure_date=date(2025, 5, 1))],
        hotels=[Hotel(hotel_name="H", check_in_date=date(2025, 5, 2), check_out_date=date(2025, 5, 3))],
    )

    with caplog.at_level(logging.WARNING, logger="travel_desk.services.itinerary_service"):
        days, _ = itinerary_service.build(request)

    assert days[0].date == date(2025, 5, 1)
    assert "train@2025-05-01" in caplog.text
    assert "TR-WIDE" in caplog.text


def test_in_range_legs_log_nothing(march_trip, caplog):
    with caplog.at_level(logging.WARNING):
        itinerary_service.build(march_trip)
    assert caplog.text == ""


def test_pdf_and_html(march_trip):
    assert itinerary_service.pdf(march_trip).startswith(b"%PDF")
    assert "Check-in: The Plaza" in itinerary_service.html(march_trip)
