"""Itinerary day builder — merges travel legs into a chronological per-day schedule.

Every dated role a leg plays (hotel check-in and check-out, rental car pickup
and return, ...) becomes one trip item on that calendar day. Items on the same
day are ordered by time of day when both sides have one, otherwise by a fixed
priority per item type and role. The day sequence spans the earliest to the
latest date found anywhere in the request, free days included.
"""

import functools
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import ClassVar, Union

from travel_desk.config import settings
from travel_desk.schemas.travel import (
    CarWithDriver,
    EmbassyService,
    Event,
    Flight,
    Hotel,
    MeetAssist,
    PrivateJet,
    RentalCar,
    Train,
    TravelRequest,
)


class ItemType(str, Enum):
    FLIGHT = "flight"
    PRIVATE_JET = "private_jet"
    TRAIN = "train"
    RENTAL_CAR = "rental_car"
    CAR_WITH_DRIVER = "car_with_driver"
    HOTEL = "hotel"
    EVENT = "event"
    EMBASSY = "embassy"
    MEET_ASSIST = "meet_assist"


# ─── Trip items ───


@dataclass(frozen=True)
class FlightItem:
    type: ClassVar[ItemType] = ItemType.FLIGHT
    data: Flight
    date: date

    @property
    def role(self) -> str | None:
        return None


@dataclass(frozen=True)
class PrivateJetItem:
    type: ClassVar[ItemType] = ItemType.PRIVATE_JET
    data: PrivateJet
    date: date

    @property
    def role(self) -> str | None:
        return None


@dataclass(frozen=True)
class TrainItem:
    type: ClassVar[ItemType] = ItemType.TRAIN
    data: Train
    date: date

    @property
    def role(self) -> str | None:
        return None


@dataclass(frozen=True)
class RentalCarItem:
    type: ClassVar[ItemType] = ItemType.RENTAL_CAR
    data: RentalCar
    date: date
    is_pickup: bool

    @property
    def role(self) -> str | None:
        return "pickup" if self.is_pickup else "return"


@dataclass(frozen=True)
class CarWithDriverItem:
    type: ClassVar[ItemType] = ItemType.CAR_WITH_DRIVER
    data: CarWithDriver
    date: date

    @property
    def role(self) -> str | None:
        return None


@dataclass(frozen=True)
class HotelItem:
    type: ClassVar[ItemType] = ItemType.HOTEL
    data: Hotel
    date: date
    is_check_in: bool

    @property
    def role(self) -> str | None:
        return "check_in" if self.is_check_in else "check_out"


@dataclass(frozen=True)
class EventItem:
    type: ClassVar[ItemType] = ItemType.EVENT
    data: Event
    date: date

    @property
    def role(self) -> str | None:
        return None


@dataclass(frozen=True)
class EmbassyItem:
    type: ClassVar[ItemType] = ItemType.EMBASSY
    data: EmbassyService
    date: date

    @property
    def role(self) -> str | None:
        return None


@dataclass(frozen=True)
class MeetAssistItem:
    type: ClassVar[ItemType] = ItemType.MEET_ASSIST
    data: MeetAssist
    date: date

    @property
    def role(self) -> str | None:
        return (self.data.service_type or "").upper() or None


TripItem = Union[
    FlightItem,
    PrivateJetItem,
    TrainItem,
    RentalCarItem,
    CarWithDriverItem,
    HotelItem,
    EventItem,
    EmbassyItem,
    MeetAssistItem,
]


@dataclass(frozen=True)
class TripDay:
    date: date
    items: list[TripItem] = field(default_factory=list)

    @property
    def is_free_day(self) -> bool:
        return not self.items


# ─── Same-day ordering ───

UNKNOWN_PRIORITY = 50

ITEM_PRIORITY: dict[tuple[ItemType, str | None], int] = {
    (ItemType.HOTEL, "check_out"): 1,
    (ItemType.MEET_ASSIST, "DEPARTURE"): 2,
    (ItemType.MEET_ASSIST, "BOTH"): 2,
    (ItemType.FLIGHT, None): 3,
    (ItemType.PRIVATE_JET, None): 3,
    (ItemType.TRAIN, None): 3,
    (ItemType.MEET_ASSIST, "ARRIVAL"): 4,
    (ItemType.MEET_ASSIST, "TRANSIT"): 5,
    (ItemType.RENTAL_CAR, "pickup"): 6,
    (ItemType.CAR_WITH_DRIVER, None): 6,
    (ItemType.HOTEL, "check_in"): 7,
    (ItemType.EVENT, None): 8,
    (ItemType.EMBASSY, None): 9,
    (ItemType.RENTAL_CAR, "return"): 10,
}


def item_priority(item) -> int:
    key = (getattr(item, "type", None), getattr(item, "role", None))
    return ITEM_PRIORITY.get(key, UNKNOWN_PRIORITY)


def _clean_time(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def hotel_time(item: HotelItem) -> str:
    """Effective hotel time, falling back to the standard check-in/out hours."""
    if item.is_check_in:
        return _clean_time(item.data.check_in_time) or settings.default_check_in_time
    return _clean_time(item.data.check_out_time) or settings.default_check_out_time


def extract_time(item) -> str | None:
    """Time of day used to order items within a day, or None when unknown."""
    if isinstance(item, (FlightItem, PrivateJetItem, TrainItem)):
        return _clean_time(item.data.departure_time)
    if isinstance(item, EventItem):
        return _clean_time(item.data.start_time)
    if isinstance(item, HotelItem):
        return hotel_time(item)
    if isinstance(item, EmbassyItem):
        return _clean_time(item.data.appointment_time)
    if isinstance(item, MeetAssistItem):
        return _clean_time(item.data.service_time)
    if isinstance(item, RentalCarItem):
        return _clean_time(item.data.pickup_time if item.is_pickup else item.data.return_time)
    if isinstance(item, CarWithDriverItem):
        return _clean_time(item.data.pickup_time)
    return None


def compare_items(a, b) -> int:
    time_a = extract_time(a)
    time_b = extract_time(b)
    if time_a and time_b and time_a != time_b:
        return -1 if time_a < time_b else 1
    return item_priority(a) - item_priority(b)


def sort_items(items: list) -> list:
    return sorted(items, key=functools.cmp_to_key(compare_items))


# ─── Dates ───

# Every date-bearing field per leg collection, used to derive the trip range.
LEG_DATE_FIELDS: dict[str, tuple[str, ...]] = {
    "flights": ("departure_date", "arrival_date"),
    "private_jets": ("departure_date", "arrival_date"),
    "trains": ("departure_date", "arrival_date"),
    "rental_cars_self_drive": ("pickup_date", "return_date"),
    "cars_with_driver": ("pickup_date", "dropoff_date"),
    "hotels": ("check_in_date", "check_out_date"),
    "events": ("event_date",),
    "embassy_services": ("appointment_date",),
    "meet_assist": ("service_date",),
}


def calendar_day(value: date | datetime | None) -> date | None:
    """Strip the time of day from a date or datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def collect_dates(travel_request: TravelRequest) -> list[date]:
    dates: list[date] = []
    for value in (travel_request.trip_start_date, travel_request.trip_end_date):
        day = calendar_day(value)
        if day:
            dates.append(day)

    for collection, fields in LEG_DATE_FIELDS.items():
        for leg in getattr(travel_request, collection):
            for field_name in fields:
                day = calendar_day(getattr(leg, field_name))
                if day:
                    dates.append(day)
    return dates


def trip_date_range(dates: list[date]) -> tuple[date, date] | None:
    if not dates:
        return None
    return min(dates), max(dates)


def materialize_items(travel_request: TravelRequest) -> list[TripItem]:
    """One item per dated role of every leg; legs missing a date yield nothing for it."""
    items: list[TripItem] = []

    for flight in travel_request.flights:
        if flight.departure_date:
            items.append(FlightItem(data=flight, date=calendar_day(flight.departure_date)))

    for jet in travel_request.private_jets:
        if jet.departure_date:
            items.append(PrivateJetItem(data=jet, date=calendar_day(jet.departure_date)))

    for train in travel_request.trains:
        if train.departure_date:
            items.append(TrainItem(data=train, date=calendar_day(train.departure_date)))

    for car in travel_request.rental_cars_self_drive:
        if car.pickup_date:
            items.append(RentalCarItem(data=car, date=calendar_day(car.pickup_date), is_pickup=True))
        if car.return_date:
            items.append(RentalCarItem(data=car, date=calendar_day(car.return_date), is_pickup=False))

    for car in travel_request.cars_with_driver:
        if car.pickup_date:
            items.append(CarWithDriverItem(data=car, date=calendar_day(car.pickup_date)))

    for hotel in travel_request.hotels:
        if hotel.check_in_date:
            items.append(HotelItem(data=hotel, date=calendar_day(hotel.check_in_date), is_check_in=True))
        if hotel.check_out_date:
            items.append(HotelItem(data=hotel, date=calendar_day(hotel.check_out_date), is_check_in=False))

    for event in travel_request.events:
        if event.event_date:
            items.append(EventItem(data=event, date=calendar_day(event.event_date)))

    for service in travel_request.embassy_services:
        if service.appointment_date:
            items.append(EmbassyItem(data=service, date=calendar_day(service.appointment_date)))

    for service in travel_request.meet_assist:
        if service.service_date:
            items.append(MeetAssistItem(data=service, date=calendar_day(service.service_date)))

    return items


def group_items_by_date(items: list[TripItem]) -> dict[date, list[TripItem]]:
    grouped: dict[date, list[TripItem]] = {}
    for item in items:
        grouped.setdefault(item.date, []).append(item)
    return {day: sort_items(day_items) for day, day_items in grouped.items()}


def find_out_of_range_items(travel_request: TravelRequest, items: list[TripItem]) -> list[TripItem]:
    """Items dated outside the request's stated trip dates.

    The day range is derived from the data, so such items widen the rendered
    itinerary instead of being dropped. Only the bounds actually set are checked.
    """
    start = calendar_day(travel_request.trip_start_date)
    end = calendar_day(travel_request.trip_end_date)
    return [
        item
        for item in items
        if (start and item.date < start) or (end and item.date > end)
    ]


def build_days(travel_request: TravelRequest) -> list[TripDay]:
    date_range = trip_date_range(collect_dates(travel_request))
    if date_range is None:
        return []

    start, end = date_range
    grouped = group_items_by_date(materialize_items(travel_request))

    days: list[TripDay] = []
    current = start
    while True:
        days.append(TripDay(date=current, items=grouped.get(current, [])))
        if current >= end:
            break
        current += timedelta(days=1)
    return days
