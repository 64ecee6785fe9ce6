import os

# Tests never talk to PostgreSQL; point the app engine at an in-memory database.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from travel_desk.database import Base
from travel_desk.schemas.travel import (
    CarWithDriver,
    EmbassyService,
    Event,
    Flight,
    Hotel,
    HotelRoom,
    MeetAssist,
    Passenger,
    TravelRequest,
)


@pytest.fixture
async def db():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def march_trip() -> TravelRequest:
    """Flight on March 1 and a hotel stay from March 1 to March 5, 2025."""
    return TravelRequest(
        request_number="TR-1001",
        trip_start_date=date(2025, 3, 1),
        flights=[
            Flight(
                airline="British Airways",
                flight_number="BA117",
                departure_airport="LHR",
                arrival_airport="JFK",
                departure_date="2025-03-01T09:00",
            )
        ],
        hotels=[
            Hotel(
                hotel_name="The Plaza",
                city="New York",
                country="USA",
                check_in_date=date(2025, 3, 1),
                check_out_date=date(2025, 3, 5),
                confirmation_number="PLZ-889",
            )
        ],
    )


@pytest.fixture
def full_trip() -> TravelRequest:
    """One leg of each kind spread over a week, with passengers and rooms."""
    return TravelRequest(
        request_number="TR-2002",
        trip_start_date=date(2025, 6, 10),
        trip_end_date=date(2025, 6, 14),
        passengers=[
            Passenger(full_name="Amal Haddad", is_main_passenger=True),
            Passenger(full_name="Rami Haddad"),
            Passenger(),
        ],
        flights=[
            Flight(
                airline="Emirates",
                flight_number="EK3",
                departure_airport="DXB",
                arrival_airport="LHR",
                departure_date=date(2025, 6, 10),
                departure_time="07:45",
                arrival_time="12:10",
                booking_reference="EKX91",
            )
        ],
        meet_assist=[
            MeetAssist(
                service_type="ARRIVAL",
                airport="LHR",
                airport_name="Heathrow",
                service_date=date(2025, 6, 10),
                service_time="12:10",
                meeting_point="Aircraft door",
                flight_number="EK3",
                service_provider="Heathrow VIP",
                vip_level="VVIP",
                includes_fast_track=True,
                includes_buggy=True,
                greeter_name="Sam",
                greeter_phone="+44 20 0000 0000",
            )
        ],
        cars_with_driver=[
            CarWithDriver(
                vehicle_type="Mercedes S-Class",
                pickup_location="Heathrow T3",
                pickup_date=date(2025, 6, 10),
                pickup_time="12:45",
                driver_name="Tom",
                company="Addison Lee",
            )
        ],
        hotels=[
            Hotel(
                hotel_name="Claridge's",
                city="London",
                country="UK",
                check_in_date=date(2025, 6, 10),
                check_out_date=date(2025, 6, 14),
                rooms=[
                    HotelRoom(
                        unit_category="Suite",
                        room_number="501",
                        price_per_night="1200.00",
                        bed_type="King",
                        guest_numbers=2,
                        bathrooms=1,
                    ),
                    HotelRoom(unit_category="Deluxe Room", guest_numbers=1),
                ],
            )
        ],
        events=[
            Event(
                event_name="Wimbledon Centre Court",
                event_type="SPORTS",
                location="All England Club",
                event_date=date(2025, 6, 12),
                start_time="13:00",
                end_time="19:00",
            )
        ],
        embassy_services=[
            EmbassyService(
                embassy_name="Embassy of Japan",
                service_type="VISA",
                address="101-104 Piccadilly",
                appointment_date=date(2025, 6, 11),
                appointment_time="10:30",
                application_number="JP-7781",
            )
        ],
    )
