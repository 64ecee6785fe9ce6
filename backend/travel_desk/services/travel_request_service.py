"""Travel request service — loads hydrated travel requests and manages their legs."""

import logging
import secrets
import time
from datetime import date

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from travel_desk import models
from travel_desk.schemas.travel import (
    TRAVEL_REQUEST_STATUSES,
    CarWithDriver,
    CreateTravelRequest,
    EmbassyService,
    Event,
    Flight,
    Hotel,
    MeetAssist,
    Passenger,
    PrivateJet,
    RentalCar,
    Train,
    TravelRequest,
    TravelRequestSummary,
)
from travel_desk.services.itinerary_builder import calendar_day

logger = logging.getLogger(__name__)

# URL segment -> (ORM model, schema)
LEG_KINDS: dict[str, tuple[type, type[BaseModel]]] = {
    "flights": (models.TripFlight, Flight),
    "private-jets": (models.TripPrivateJet, PrivateJet),
    "trains": (models.TripTrain, Train),
    "rental-cars-self-drive": (models.TripRentalCarSelfDrive, RentalCar),
    "cars-with-driver": (models.TripCarWithDriver, CarWithDriver),
    "hotels": (models.TripHotel, Hotel),
    "events": (models.TripEvent, Event),
    "embassy-services": (models.TripEmbassyService, EmbassyService),
    "meet-assist": (models.TripMeetAssist, MeetAssist),
    "passengers": (models.TripPassenger, Passenger),
}


class UnknownLegKindError(ValueError):
    pass


def _leg_kind(kind: str) -> tuple[type, type[BaseModel]]:
    try:
        return LEG_KINDS[kind]
    except KeyError:
        raise UnknownLegKindError(f"Unknown leg type: {kind}")


def _column_values(leg: BaseModel) -> dict:
    """Schema fields as column values; datetimes collapse to their calendar day."""
    values = leg.model_dump(exclude={"id", "rooms"})
    for key, value in values.items():
        if isinstance(value, date):
            values[key] = calendar_day(value)
    return values


def _hydrated_query(request_id: int):
    TR = models.TravelRequest
    return (
        select(TR)
        .where(TR.id == request_id)
        .options(
            selectinload(TR.flights),
            selectinload(TR.private_jets),
            selectinload(TR.trains),
            selectinload(TR.rental_cars_self_drive),
            selectinload(TR.cars_with_driver),
            selectinload(TR.hotels).selectinload(models.TripHotel.rooms),
            selectinload(TR.events),
            selectinload(TR.embassy_services),
            selectinload(TR.meet_assist),
            selectinload(TR.passengers),
        )
        .execution_options(populate_existing=True)
    )


class TravelRequestService:
    """Data access for travel requests and their legs."""

    async def get_aggregate(self, db: AsyncSession, request_id: int) -> TravelRequest:
        """Load a travel request with every leg collection populated."""
        result = await db.execute(_hydrated_query(request_id))
        row = result.scalar_one_or_none()
        if not row:
            raise ValueError("Travel request not found")
        return TravelRequest.model_validate(row)

    async def list_requests(
        self,
        db: AsyncSession,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[TravelRequestSummary]:
        TR = models.TravelRequest
        query = select(TR)
        if status:
            query = query.where(TR.status == status)
        if start_date:
            query = query.where(TR.trip_start_date >= start_date)
        if end_date:
            query = query.where(TR.trip_end_date <= end_date)
        query = query.order_by(TR.created_at.desc(), TR.id.desc())

        result = await db.execute(query)
        return [TravelRequestSummary.model_validate(row) for row in result.scalars().all()]

    async def create_request(self, db: AsyncSession, payload: CreateTravelRequest) -> TravelRequestSummary:
        row = models.TravelRequest(
            request_number=f"TR-{int(time.time() * 1000)}-{secrets.token_hex(2).upper()}",
            trip_start_date=payload.trip_start_date,
            trip_end_date=payload.trip_end_date,
            notes=payload.notes,
            status="REQUEST",
        )
        db.add(row)
        await db.commit()
        await db.refresh(row)
        logger.info(f"Created travel request {row.request_number}")
        return TravelRequestSummary.model_validate(row)

    async def update_status(self, db: AsyncSession, request_id: int, status: str) -> TravelRequestSummary:
        if status not in TRAVEL_REQUEST_STATUSES:
            raise ValueError(f"Invalid status: {status}")
        row = await db.get(models.TravelRequest, request_id)
        if not row:
            raise ValueError("Travel request not found")
        row.status = status
        await db.commit()
        await db.refresh(row)
        return TravelRequestSummary.model_validate(row)

    async def delete_request(self, db: AsyncSession, request_id: int) -> None:
        result = await db.execute(_hydrated_query(request_id))
        row = result.scalar_one_or_none()
        if not row:
            raise ValueError("Travel request not found")
        await db.delete(row)
        await db.commit()
        logger.info(f"Deleted travel request {row.request_number}")

    async def add_leg(self, db: AsyncSession, request_id: int, kind: str, payload: dict) -> BaseModel:
        """Validate a leg payload and attach it to the travel request.

        Raises pydantic's ValidationError for malformed payloads.
        """
        model, schema = _leg_kind(kind)
        leg = schema.model_validate(payload)

        if not await db.get(models.TravelRequest, request_id):
            raise ValueError("Travel request not found")

        row = model(travel_request_id=request_id, **_column_values(leg))
        if isinstance(leg, Hotel):
            row.rooms = [models.TripHotelRoom(**room.model_dump(exclude={"id"})) for room in leg.rooms]

        db.add(row)
        await db.commit()
        if isinstance(leg, Hotel):
            await db.refresh(row, ["rooms"])
        else:
            await db.refresh(row)
        logger.info(f"Added {kind} leg {row.id} to travel request {request_id}")
        return schema.model_validate(row)

    async def delete_leg(self, db: AsyncSession, kind: str, leg_id: int) -> None:
        model, _ = _leg_kind(kind)
        row = await db.get(model, leg_id)
        if not row:
            raise ValueError(f"{kind} leg not found")
        await db.delete(row)
        await db.commit()
        logger.info(f"Deleted {kind} leg {leg_id}")


travel_request_service = TravelRequestService()
