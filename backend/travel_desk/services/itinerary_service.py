"""Itinerary service — runs the day builder and renderer for a travel request."""

import logging
from datetime import datetime

from travel_desk.schemas.travel import TravelRequest
from travel_desk.services.export_service import export_service
from travel_desk.services.itinerary_builder import (
    TripDay,
    build_days,
    find_out_of_range_items,
    materialize_items,
)
from travel_desk.services.itinerary_layout import Document
from travel_desk.services.itinerary_renderer import render

logger = logging.getLogger(__name__)


class ItineraryService:
    """Builds day schedules and printable documents for travel requests."""

    def days(self, travel_request: TravelRequest) -> list[TripDay]:
        """Day schedule for a travel request; legs outside the stated trip dates are logged."""
        days = build_days(travel_request)
        if not days:
            logger.info(f"Itinerary {travel_request.request_number}: no dated legs yet")

        outside = find_out_of_range_items(travel_request, materialize_items(travel_request))
        if outside:
            logger.warning(
                f"Itinerary {travel_request.request_number}: {len(outside)} item(s) outside "
                f"the stated trip dates widen the schedule: "
                + ", ".join(f"{item.type.value}@{item.date.isoformat()}" for item in outside)
            )
        return days

    def build(
        self, travel_request: TravelRequest, generated_at: datetime | None = None
    ) -> tuple[list[TripDay], Document]:
        days = self.days(travel_request)
        return days, render(travel_request, days, generated_at)

    def pdf(self, travel_request: TravelRequest) -> bytes:
        _, document = self.build(travel_request)
        return export_service.itinerary_pdf(document)

    def html(self, travel_request: TravelRequest) -> str:
        _, document = self.build(travel_request)
        return export_service.itinerary_html(document)


itinerary_service = ItineraryService()
