"""Travel requests router — request CRUD and leg management."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_desk.database import get_db
from travel_desk.schemas.travel import CreateTravelRequest, TravelRequest, TravelRequestSummary
from travel_desk.services.travel_request_service import UnknownLegKindError, travel_request_service

router = APIRouter()


class UpdateStatusRequest(BaseModel):
    status: str


@router.get("", response_model=list[TravelRequestSummary])
async def list_travel_requests(
    status: str | None = Query(None),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    db: AsyncSession = Depends(get_db),
):
    """List travel requests, newest first, optionally filtered by status and trip dates."""
    return await travel_request_service.list_requests(db, status, start_date, end_date)


@router.post("", status_code=201, response_model=TravelRequestSummary)
async def create_travel_request(req: CreateTravelRequest, db: AsyncSession = Depends(get_db)):
    return await travel_request_service.create_request(db, req)


@router.get("/{request_id}", response_model=TravelRequest)
async def get_travel_request(request_id: int, db: AsyncSession = Depends(get_db)):
    """Return a travel request with all of its legs."""
    try:
        return await travel_request_service.get_aggregate(db, request_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{request_id}/status", response_model=TravelRequestSummary)
async def update_travel_request_status(
    request_id: int, req: UpdateStatusRequest, db: AsyncSession = Depends(get_db)
):
    try:
        return await travel_request_service.update_status(db, request_id, req.status)
    except ValueError as e:
        status_code = 400 if str(e).startswith("Invalid status") else 404
        raise HTTPException(status_code=status_code, detail=str(e))


@router.delete("/{request_id}", status_code=204)
async def delete_travel_request(request_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await travel_request_service.delete_request(db, request_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/legs/{kind}/{leg_id}", status_code=204)
async def delete_leg(kind: str, leg_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await travel_request_service.delete_leg(db, kind, leg_id)
    except UnknownLegKindError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{request_id}/{kind}", status_code=201)
async def add_leg(request_id: int, kind: str, payload: dict, db: AsyncSession = Depends(get_db)):
    """Attach a flight, hotel, event or other leg to a travel request."""
    try:
        leg = await travel_request_service.add_leg(db, request_id, kind, payload)
    except UnknownLegKindError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return leg.model_dump(mode="json")
