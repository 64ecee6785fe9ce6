from datetime import date, datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field

TRAVEL_REQUEST_STATUSES = ("REQUEST", "PLANNING", "CONFIRMING", "EXECUTING", "COMPLETED", "CANCELLED")
MEET_ASSIST_SERVICE_TYPES = ("ARRIVAL", "DEPARTURE", "BOTH", "TRANSIT")


class LegBase(BaseModel):
    id: int | None = None

    model_config = {"from_attributes": True, "populate_by_name": True}


class Flight(LegBase):
    airline: str | None = None
    flight_number: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_date: datetime | date | None = None
    departure_time: str | None = None
    arrival_date: datetime | date | None = None
    arrival_time: str | None = None
    travel_class: str | None = Field(default=None, validation_alias=AliasChoices("travel_class", "class"))
    booking_reference: str | None = None
    terminal: str | None = None
    gate: str | None = None
    seat_numbers: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class PrivateJet(LegBase):
    aircraft_type: str | None = None
    operator: str | None = None
    tail_number: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    departure_date: datetime | date | None = None
    departure_time: str | None = None
    arrival_date: datetime | date | None = None
    arrival_time: str | None = None
    passenger_capacity: int | None = None
    booking_reference: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class Train(LegBase):
    train_number: str | None = None
    operator: str | None = None
    train_name: str | None = None
    departure_station: str | None = None
    arrival_station: str | None = None
    departure_date: datetime | date | None = None
    departure_time: str | None = None
    arrival_date: datetime | date | None = None
    arrival_time: str | None = None
    travel_class: str | None = Field(default=None, validation_alias=AliasChoices("travel_class", "class"))
    seat_numbers: str | None = None
    carriage_number: str | None = None
    booking_reference: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class RentalCar(LegBase):
    company: str | None = None
    vehicle_type: str | None = None
    vehicle_model: str | None = None
    pickup_location: str | None = None
    return_location: str | None = None
    pickup_date: datetime | date | None = None
    pickup_time: str | None = None
    return_date: datetime | date | None = None
    return_time: str | None = None
    main_driver: str | None = None
    insurance_type: str | None = None
    booking_reference: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class CarWithDriver(LegBase):
    service_type: str | None = None
    company: str | None = None
    vehicle_type: str | None = None
    vehicle_model: str | None = None
    driver_name: str | None = None
    driver_phone: str | None = None
    pickup_location: str | None = None
    dropoff_location: str | None = None
    pickup_date: datetime | date | None = None
    pickup_time: str | None = None
    dropoff_date: datetime | date | None = None
    dropoff_time: str | None = None
    booking_reference: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class HotelRoom(LegBase):
    unit_category: str | None = None
    room_number: str | None = None
    price_per_night: Decimal | None = None
    bed_type: str | None = None
    guest_numbers: int | None = None
    bathrooms: int | None = None
    includes_breakfast: bool = False


class Hotel(LegBase):
    hotel_name: str
    address: str | None = None
    city: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None
    check_in_date: datetime | date | None = None
    check_in_time: str | None = None
    check_out_date: datetime | date | None = None
    check_out_time: str | None = None
    confirmation_number: str | None = None
    status: str = "PENDING"
    notes: str | None = None
    rooms: list[HotelRoom] = []


class Event(LegBase):
    event_name: str
    event_type: str | None = None
    location: str | None = None
    event_date: datetime | date | None = None
    start_time: str | None = None
    end_time: str | None = None
    notes: str | None = None


class EmbassyService(LegBase):
    embassy_name: str | None = None
    service_type: str | None = None
    address: str | None = None
    appointment_date: datetime | date | None = None
    appointment_time: str | None = None
    application_number: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class MeetAssist(LegBase):
    service_type: str = "ARRIVAL"  # ARRIVAL | DEPARTURE | BOTH | TRANSIT
    service_provider: str | None = None
    airport: str | None = None
    airport_name: str | None = None
    terminal: str | None = None
    flight_number: str | None = None
    service_date: datetime | date | None = None
    service_time: str | None = None
    meeting_point: str | None = None
    greeter_name: str | None = None
    greeter_phone: str | None = None
    vip_level: str = "STANDARD"  # STANDARD | VIP | VVIP
    includes_fast_track: bool = False
    includes_lounge: bool = False
    includes_porterage: bool = False
    includes_buggy: bool = False
    booking_reference: str | None = None
    status: str = "PENDING"
    notes: str | None = None


class Passenger(LegBase):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    is_main_passenger: bool = False


class TravelRequest(BaseModel):
    """Fully hydrated travel request, the input of the itinerary engine."""

    id: int | None = None
    request_number: str
    status: str = "REQUEST"
    trip_start_date: datetime | date | None = None
    trip_end_date: datetime | date | None = None
    notes: str | None = None
    flights: list[Flight] = []
    private_jets: list[PrivateJet] = []
    trains: list[Train] = []
    rental_cars_self_drive: list[RentalCar] = []
    cars_with_driver: list[CarWithDriver] = []
    hotels: list[Hotel] = []
    events: list[Event] = []
    embassy_services: list[EmbassyService] = []
    meet_assist: list[MeetAssist] = []
    passengers: list[Passenger] = []

    model_config = {"from_attributes": True}


class TravelRequestSummary(BaseModel):
    id: int
    request_number: str
    status: str
    trip_start_date: date | None
    trip_end_date: date | None
    notes: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class CreateTravelRequest(BaseModel):
    trip_start_date: date | None = None
    trip_end_date: date | None = None
    notes: str | None = None
