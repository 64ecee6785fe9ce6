"""Itinerary router — day schedule, printable HTML and PDF download."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from travel_desk.database import get_db
from travel_desk.schemas.itinerary import ItineraryDayResponse, ItineraryItemResponse, ItineraryResponse
from travel_desk.schemas.travel import TravelRequest
from travel_desk.services.itinerary_builder import extract_time, item_priority
from travel_desk.services.itinerary_service import itinerary_service
from travel_desk.services.travel_request_service import travel_request_service

router = APIRouter()


async def get_travel_request(request_id: int, db: AsyncSession = Depends(get_db)) -> TravelRequest:
    try:
        return await travel_request_service.get_aggregate(db, request_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{request_id}/itinerary", response_model=ItineraryResponse)
async def get_itinerary(travel_request: TravelRequest = Depends(get_travel_request)):
    """Return the day-by-day schedule of a travel request."""
    days = itinerary_service.days(travel_request)
    return ItineraryResponse(
        request_number=travel_request.request_number,
        start_date=days[0].date if days else None,
        end_date=days[-1].date if days else None,
        days=[
            ItineraryDayResponse(
                day_number=index,
                date=day.date,
                is_free_day=day.is_free_day,
                items=[
                    ItineraryItemResponse(
                        type=item.type.value,
                        role=item.role,
                        date=item.date,
                        time=extract_time(item),
                        priority=item_priority(item),
                        data=item.data.model_dump(mode="json"),
                    )
                    for item in day.items
                ],
            )
            for index, day in enumerate(days, start=1)
        ],
    )


@router.get("/{request_id}/itinerary/html", response_class=HTMLResponse)
async def itinerary_html(travel_request: TravelRequest = Depends(get_travel_request)):
    """Printable itinerary page for preview and browser print."""
    return HTMLResponse(content=itinerary_service.html(travel_request))


@router.get("/{request_id}/itinerary/pdf")
async def itinerary_pdf(travel_request: TravelRequest = Depends(get_travel_request)):
    """Download the itinerary as an A4 PDF."""
    pdf_bytes = itinerary_service.pdf(travel_request)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=Itinerary-{travel_request.request_number}.pdf"
        },
    )
