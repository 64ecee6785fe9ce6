"""Travel request and leg models."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_desk.database import Base


class TravelRequest(Base):
    __tablename__ = "travel_requests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    request_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(20), default="REQUEST")
    trip_start_date: Mapped[date | None] = mapped_column(Date)
    trip_end_date: Mapped[date | None] = mapped_column(Date)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    flights: Mapped[list["TripFlight"]] = relationship(cascade="all, delete-orphan")
    private_jets: Mapped[list["TripPrivateJet"]] = relationship(cascade="all, delete-orphan")
    trains: Mapped[list["TripTrain"]] = relationship(cascade="all, delete-orphan")
    rental_cars_self_drive: Mapped[list["TripRentalCarSelfDrive"]] = relationship(
        cascade="all, delete-orphan"
    )
    cars_with_driver: Mapped[list["TripCarWithDriver"]] = relationship(cascade="all, delete-orphan")
    hotels: Mapped[list["TripHotel"]] = relationship(cascade="all, delete-orphan")
    events: Mapped[list["TripEvent"]] = relationship(cascade="all, delete-orphan")
    embassy_services: Mapped[list["TripEmbassyService"]] = relationship(cascade="all, delete-orphan")
    meet_assist: Mapped[list["TripMeetAssist"]] = relationship(cascade="all, delete-orphan")
    passengers: Mapped[list["TripPassenger"]] = relationship(cascade="all, delete-orphan")


def _request_fk():
    return mapped_column(
        Integer, ForeignKey("travel_requests.id", ondelete="CASCADE"), nullable=False
    )


class TripFlight(Base):
    __tablename__ = "trip_flights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    airline: Mapped[str | None] = mapped_column(String(100))
    flight_number: Mapped[str | None] = mapped_column(String(20))
    departure_airport: Mapped[str | None] = mapped_column(String(100))
    arrival_airport: Mapped[str | None] = mapped_column(String(100))
    departure_date: Mapped[date | None] = mapped_column(Date)
    departure_time: Mapped[str | None] = mapped_column(String(5))
    arrival_date: Mapped[date | None] = mapped_column(Date)
    arrival_time: Mapped[str | None] = mapped_column(String(5))
    travel_class: Mapped[str | None] = mapped_column("class", String(30))
    booking_reference: Mapped[str | None] = mapped_column(String(50))
    terminal: Mapped[str | None] = mapped_column(String(20))
    gate: Mapped[str | None] = mapped_column(String(20))
    seat_numbers: Mapped[str | None] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripPrivateJet(Base):
    __tablename__ = "trip_private_jets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    aircraft_type: Mapped[str | None] = mapped_column(String(100))
    operator: Mapped[str | None] = mapped_column(String(100))
    tail_number: Mapped[str | None] = mapped_column(String(20))
    departure_airport: Mapped[str | None] = mapped_column(String(100))
    arrival_airport: Mapped[str | None] = mapped_column(String(100))
    departure_date: Mapped[date | None] = mapped_column(Date)
    departure_time: Mapped[str | None] = mapped_column(String(5))
    arrival_date: Mapped[date | None] = mapped_column(Date)
    arrival_time: Mapped[str | None] = mapped_column(String(5))
    passenger_capacity: Mapped[int | None] = mapped_column(Integer)
    booking_reference: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripTrain(Base):
    __tablename__ = "trip_trains"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    train_number: Mapped[str | None] = mapped_column(String(20))
    operator: Mapped[str | None] = mapped_column(String(100))
    train_name: Mapped[str | None] = mapped_column(String(100))
    departure_station: Mapped[str | None] = mapped_column(String(200))
    arrival_station: Mapped[str | None] = mapped_column(String(200))
    departure_date: Mapped[date | None] = mapped_column(Date)
    departure_time: Mapped[str | None] = mapped_column(String(5))
    arrival_date: Mapped[date | None] = mapped_column(Date)
    arrival_time: Mapped[str | None] = mapped_column(String(5))
    travel_class: Mapped[str | None] = mapped_column("class", String(30))
    seat_numbers: Mapped[str | None] = mapped_column(String(100))
    carriage_number: Mapped[str | None] = mapped_column(String(20))
    booking_reference: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripRentalCarSelfDrive(Base):
    __tablename__ = "trip_rental_cars_self_drive"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    company: Mapped[str | None] = mapped_column(String(100))
    vehicle_type: Mapped[str | None] = mapped_column(String(100))
    vehicle_model: Mapped[str | None] = mapped_column(String(100))
    pickup_location: Mapped[str | None] = mapped_column(String(300))
    return_location: Mapped[str | None] = mapped_column(String(300))
    pickup_date: Mapped[date | None] = mapped_column(Date)
    pickup_time: Mapped[str | None] = mapped_column(String(5))
    return_date: Mapped[date | None] = mapped_column(Date)
    return_time: Mapped[str | None] = mapped_column(String(5))
    main_driver: Mapped[str | None] = mapped_column(String(200))
    insurance_type: Mapped[str | None] = mapped_column(String(100))
    booking_reference: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripCarWithDriver(Base):
    __tablename__ = "trip_cars_with_driver"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    service_type: Mapped[str | None] = mapped_column(String(50))
    company: Mapped[str | None] = mapped_column(String(100))
    vehicle_type: Mapped[str | None] = mapped_column(String(100))
    vehicle_model: Mapped[str | None] = mapped_column(String(100))
    driver_name: Mapped[str | None] = mapped_column(String(200))
    driver_phone: Mapped[str | None] = mapped_column(String(50))
    pickup_location: Mapped[str | None] = mapped_column(String(300))
    dropoff_location: Mapped[str | None] = mapped_column(String(300))
    pickup_date: Mapped[date | None] = mapped_column(Date)
    pickup_time: Mapped[str | None] = mapped_column(String(5))
    dropoff_date: Mapped[date | None] = mapped_column(Date)
    dropoff_time: Mapped[str | None] = mapped_column(String(5))
    booking_reference: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripHotel(Base):
    __tablename__ = "trip_hotels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    hotel_name: Mapped[str] = mapped_column(String(300), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500))
    city: Mapped[str | None] = mapped_column(String(100))
    country: Mapped[str | None] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(200))
    check_in_date: Mapped[date | None] = mapped_column(Date)
    check_in_time: Mapped[str | None] = mapped_column(String(5))
    check_out_date: Mapped[date | None] = mapped_column(Date)
    check_out_time: Mapped[str | None] = mapped_column(String(5))
    confirmation_number: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)

    rooms: Mapped[list["TripHotelRoom"]] = relationship(cascade="all, delete-orphan")


class TripHotelRoom(Base):
    __tablename__ = "trip_hotel_rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("trip_hotels.id", ondelete="CASCADE"), nullable=False
    )
    unit_category: Mapped[str | None] = mapped_column(String(100))
    room_number: Mapped[str | None] = mapped_column(String(20))
    price_per_night: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    bed_type: Mapped[str | None] = mapped_column(String(50))
    guest_numbers: Mapped[int | None] = mapped_column(Integer)
    bathrooms: Mapped[int | None] = mapped_column(Integer)
    includes_breakfast: Mapped[bool] = mapped_column(Boolean, default=False)


class TripEvent(Base):
    __tablename__ = "trip_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    event_name: Mapped[str] = mapped_column(String(300), nullable=False)
    event_type: Mapped[str | None] = mapped_column(String(50))
    location: Mapped[str | None] = mapped_column(String(300))
    event_date: Mapped[date | None] = mapped_column(Date)
    start_time: Mapped[str | None] = mapped_column(String(5))
    end_time: Mapped[str | None] = mapped_column(String(5))
    notes: Mapped[str | None] = mapped_column(Text)


class TripEmbassyService(Base):
    __tablename__ = "trip_embassy_services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    embassy_name: Mapped[str | None] = mapped_column(String(300))
    service_type: Mapped[str | None] = mapped_column(String(50))
    address: Mapped[str | None] = mapped_column(String(500))
    appointment_date: Mapped[date | None] = mapped_column(Date)
    appointment_time: Mapped[str | None] = mapped_column(String(5))
    application_number: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripMeetAssist(Base):
    __tablename__ = "trip_meet_assist"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    service_type: Mapped[str] = mapped_column(String(20), default="ARRIVAL")
    service_provider: Mapped[str | None] = mapped_column(String(200))
    airport: Mapped[str | None] = mapped_column(String(10))
    airport_name: Mapped[str | None] = mapped_column(String(200))
    terminal: Mapped[str | None] = mapped_column(String(20))
    flight_number: Mapped[str | None] = mapped_column(String(20))
    service_date: Mapped[date | None] = mapped_column(Date)
    service_time: Mapped[str | None] = mapped_column(String(5))
    meeting_point: Mapped[str | None] = mapped_column(String(300))
    greeter_name: Mapped[str | None] = mapped_column(String(200))
    greeter_phone: Mapped[str | None] = mapped_column(String(50))
    vip_level: Mapped[str] = mapped_column(String(20), default="STANDARD")
    includes_fast_track: Mapped[bool] = mapped_column(Boolean, default=False)
    includes_lounge: Mapped[bool] = mapped_column(Boolean, default=False)
    includes_porterage: Mapped[bool] = mapped_column(Boolean, default=False)
    includes_buggy: Mapped[bool] = mapped_column(Boolean, default=False)
    booking_reference: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    notes: Mapped[str | None] = mapped_column(Text)


class TripPassenger(Base):
    __tablename__ = "trip_passengers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    travel_request_id: Mapped[int] = _request_fk()
    full_name: Mapped[str | None] = mapped_column(String(200))
    email: Mapped[str | None] = mapped_column(String(200))
    phone: Mapped[str | None] = mapped_column(String(50))
    is_main_passenger: Mapped[bool] = mapped_column(Boolean, default=False)
