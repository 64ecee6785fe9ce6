import re
from datetime import datetime

from travel_desk.schemas.travel import Event, Hotel, HotelRoom, Passenger, TravelRequest
from travel_desk.services.export_service import export_service
from travel_desk.services.itinerary_builder import build_days
from travel_desk.services.itinerary_renderer import render

GENERATED_AT = datetime(2026, 1, 2, 8, 0)


def _page_count(pdf: bytes) -> int:
    return max(int(n) for n in re.findall(rb"/Count (\d+)", pdf))


def test_pdf_is_generated(full_trip):
    document = render(full_trip, build_days(full_trip), generated_at=GENERATED_AT)
    pdf = export_service.itinerary_pdf(document)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000


def test_pdf_handles_empty_itinerary():
    document = render(TravelRequest(request_number="TR-EMPTY"), [], generated_at=GENERATED_AT)
    assert export_service.itinerary_pdf(document).startswith(b"%PDF")


def test_pdf_escapes_markup_in_text():
    request = TravelRequest(
        request_number="TR-<3>",
        events=[Event(event_name="Q&A <live>", event_date="2025-02-02")],
    )
    document = render(request, build_days(request), generated_at=GENERATED_AT)
    assert export_service.itinerary_pdf(document).startswith(b"%PDF")


def test_long_itinerary_spans_pages():
    request = TravelRequest(
        request_number="TR-LONG",
        events=[
            Event(event_name=f"Meeting {n}", location="Geneva", event_date=f"2025-09-{n:02d}", start_time="09:00")
            for n in range(1, 31)
        ],
    )
    document = render(request, build_days(request), generated_at=GENERATED_AT)
    pdf = export_service.itinerary_pdf(document)
    assert _page_count(pdf) >= 2


def test_hotel_with_more_rooms_than_fit_on_a_page():
    request = TravelRequest(
        request_number="TR-ROOMS",
        hotels=[
            Hotel(
                hotel_name="Grand Palace",
                check_in_date="2025-07-01",
                check_out_date="2025-07-03",
                rooms=[
                    HotelRoom(unit_category="Deluxe", room_number=str(100 + n), price_per_night=450, bed_type="King", guest_numbers=2)
                    for n in range(80)
                ],
            )
        ],
    )
    document = render(request, build_days(request), generated_at=GENERATED_AT)
    pdf = export_service.itinerary_pdf(document)
    assert pdf.startswith(b"%PDF")
    assert _page_count(pdf) >= 2


def test_travelers_block_taller_than_a_page():
    request = TravelRequest(
        request_number="TR-GROUP",
        trip_start_date="2025-07-01",
        trip_end_date="2025-07-01",
        passengers=[Passenger(full_name=f"Guest {n}", is_main_passenger=n == 0) for n in range(80)],
    )
    document = render(request, build_days(request), generated_at=GENERATED_AT)
    pdf = export_service.itinerary_pdf(document)
    assert pdf.startswith(b"%PDF")
    assert _page_count(pdf) >= 2


def test_html_marks_atomic_blocks(full_trip):
    document = render(full_trip, build_days(full_trip), generated_at=GENERATED_AT)
    page = export_service.itinerary_html(document)

    assert page.startswith("<!DOCTYPE html>")
    assert "break-inside: avoid" in page
    assert "<title>Itinerary-TR-2002</title>" in page
    assert page.count('class="atomic item"') == 7
    assert 'class="atomic day-header keep-with-next"' in page
    assert 'data-kind="meet_assist"' in page
    assert "Claridge&#x27;s" in page


def test_html_escapes_text():
    request = TravelRequest(
        request_number="TR-9",
        events=[Event(event_name="<script>alert(1)</script>", event_date="2025-02-02")],
    )
    page = export_service.itinerary_html(render(request, build_days(request), generated_at=GENERATED_AT))
    assert "<script>" not in page
    assert "&lt;script&gt;" in page
