"""Itinerary renderer — turns trip days into a printable layout tree."""

from datetime import date, datetime

from travel_desk.config import settings
from travel_desk.schemas.travel import TravelRequest
from travel_desk.services.itinerary_builder import (
    CarWithDriverItem,
    EmbassyItem,
    EventItem,
    FlightItem,
    HotelItem,
    MeetAssistItem,
    PrivateJetItem,
    RentalCarItem,
    TrainItem,
    TripDay,
    calendar_day,
    hotel_time,
)
from travel_desk.services.itinerary_layout import AtomicBlock, Badge, Document, Icon, Row, Section, Text

PLACEHOLDER = "-"

MEET_ASSIST_PHRASES = {
    "ARRIVAL": "Arrival Service",
    "DEPARTURE": "Departure Service",
    "BOTH": "Arrival & Departure Service",
    "TRANSIT": "Transit Service",
}

MEET_ASSIST_INCLUSIONS = (
    ("includes_fast_track", "Fast Track"),
    ("includes_lounge", "Lounge"),
    ("includes_porterage", "Porterage"),
    ("includes_buggy", "Buggy"),
)


def format_long_date(value: date) -> str:
    """e.g. 'March 1, 2025'."""
    return f"{value:%B} {value.day}, {value.year}"


def format_full_date(value: date) -> str:
    """e.g. 'Saturday, March 1, 2025'."""
    return f"{value:%A}, {format_long_date(value)}"


def _or_dash(value) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def _join(*parts, sep: str = " ") -> str:
    return sep.join(str(p) for p in parts if p not in (None, ""))


def _route(origin, destination) -> str:
    return f"{_or_dash(origin)} → {_or_dash(destination)}"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _item_block(kind: str, icon: str, title: str, *body) -> AtomicBlock:
    children = [Row([Icon(icon), Text(title, "strong")])]
    children.extend(node for node in body if node is not None)
    return AtomicBlock(role="item", kind=kind, children=children)


def _meta(*parts) -> Row | None:
    nodes = [Text(p, "small") if isinstance(p, str) else p for p in parts if p]
    return Row(nodes) if nodes else None


# ─── Per-type templates ───


def _render_flight(item: FlightItem) -> AtomicBlock:
    data = item.data
    return _item_block(
        item.type.value,
        "plane",
        f"Flight: {_or_dash(_join(data.airline, data.flight_number))}",
        Text(_route(data.departure_airport, data.arrival_airport)),
        _meta(
            f"Departs {data.departure_time}" if data.departure_time else None,
            f"Arrives {data.arrival_time}" if data.arrival_time else None,
            f"Ref: {data.booking_reference}" if data.booking_reference else None,
        ),
    )


def _render_private_jet(item: PrivateJetItem) -> AtomicBlock:
    data = item.data
    return _item_block(
        item.type.value,
        "jet",
        f"Private Jet: {data.aircraft_type or 'Charter Flight'}",
        Text(_route(data.departure_airport, data.arrival_airport)),
        _meta(
            f"Departs {data.departure_time}" if data.departure_time else None,
            f"Arrives {data.arrival_time}" if data.arrival_time else None,
            f"Operator: {data.operator}" if data.operator else None,
            f"Ref: {data.booking_reference}" if data.booking_reference else None,
        ),
    )


def _render_train(item: TrainItem) -> AtomicBlock:
    data = item.data
    return _item_block(
        item.type.value,
        "train",
        f"Train: {_or_dash(data.train_number or data.operator)}",
        Text(_route(data.departure_station, data.arrival_station)),
        _meta(
            f"Departs {data.departure_time}" if data.departure_time else None,
            f"Arrives {data.arrival_time}" if data.arrival_time else None,
            f"Class: {data.travel_class}" if data.travel_class else None,
        ),
    )


def _render_rooms(item: HotelItem) -> list:
    rooms = item.data.rooms
    if not item.is_check_in or not rooms:
        return []

    nodes: list = [Text(f"Rooms ({len(rooms)}):", "strong")]
    for idx, room in enumerate(rooms):
        label = _join(
            room.unit_category,
            f"#{room.room_number}" if room.room_number else str(idx + 1),
        )
        details = []
        if room.price_per_night is not None:
            details.append(Badge(f"${room.price_per_night}/night", "primary"))
        if room.bed_type:
            details.append(Text(f"• {room.bed_type}", "small"))
        if room.guest_numbers:
            details.append(Text(f"• {_plural(room.guest_numbers, 'guest')}", "small"))
        if room.bathrooms:
            details.append(Text(f"• {_plural(room.bathrooms, 'bathroom')}", "small"))
        nodes.append(Row([Text(label, "body"), *details]))
    return nodes


def _render_hotel(item: HotelItem) -> AtomicBlock:
    data = item.data
    label = "Check-in" if item.is_check_in else "Check-out"
    return _item_block(
        item.type.value,
        "hotel",
        f"{label}: {data.hotel_name}",
        Text(_or_dash(_join(data.city, data.country, sep=", "))),
        _meta(
            hotel_time(item),
            f"Conf: {data.confirmation_number}" if data.confirmation_number else None,
        ),
        *_render_rooms(item),
    )


def _render_event(item: EventItem) -> AtomicBlock:
    data = item.data
    time_range = None
    if data.start_time:
        time_range = _join(data.start_time, data.end_time, sep=" - ")
    return _item_block(
        item.type.value,
        "calendar",
        data.event_name,
        Text(data.location) if data.location else None,
        _meta(
            time_range,
            Badge(data.event_type, "accent") if data.event_type else None,
        ),
    )


def _render_rental_car(item: RentalCarItem) -> AtomicBlock:
    data = item.data
    if item.is_pickup:
        label, location, time = "Car Pickup", data.pickup_location, data.pickup_time
    else:
        label, location, time = "Car Return", data.return_location, data.return_time
    return _item_block(
        item.type.value,
        "car",
        f"{label}: {_or_dash(_join(data.vehicle_type, data.vehicle_model))}",
        Text(_or_dash(location)),
        _meta(
            _or_dash(time),
            f"Company: {data.company}" if data.company else None,
            f"Ref: {data.booking_reference}" if data.booking_reference else None,
        ),
    )


def _render_car_with_driver(item: CarWithDriverItem) -> AtomicBlock:
    data = item.data
    return _item_block(
        item.type.value,
        "car",
        f"Car with Driver: {_or_dash(_join(data.vehicle_type, data.vehicle_model))}",
        Text(f"Pickup: {_or_dash(data.pickup_location)}"),
        _meta(
            _or_dash(data.pickup_time),
            f"Driver: {data.driver_name}" if data.driver_name else None,
            f"Company: {data.company}" if data.company else None,
        ),
    )


def _render_embassy(item: EmbassyItem) -> AtomicBlock:
    data = item.data
    return _item_block(
        item.type.value,
        "building",
        f"Embassy: {_or_dash(data.embassy_name or data.service_type)}",
        Text(data.address) if data.address else None,
        _meta(
            f"Appointment {data.appointment_time}" if data.appointment_time else None,
            Badge(data.service_type, "accent") if data.service_type else None,
            f"Application #: {data.application_number}" if data.application_number else None,
        ),
    )


def _render_meet_assist(item: MeetAssistItem) -> AtomicBlock:
    data = item.data
    airport = _or_dash(data.airport)
    if data.airport_name:
        airport = f"{airport} ({data.airport_name})"

    service_type = (data.service_type or "").upper()
    vip_level = (data.vip_level or "STANDARD").upper()
    inclusions = [Badge(label, "success") for attr, label in MEET_ASSIST_INCLUSIONS if getattr(data, attr)]

    greeter = None
    if data.greeter_name:
        greeter = Text(_join(f"Greeter: {data.greeter_name}", f"({data.greeter_phone})" if data.greeter_phone else None))

    return _item_block(
        item.type.value,
        "handshake",
        f"Meet & Assist: {airport}",
        _meta(
            Text(MEET_ASSIST_PHRASES.get(service_type, _or_dash(data.service_type))),
            Badge(vip_level, "primary") if vip_level != "STANDARD" else None,
        ),
        Text(f"Meeting point: {data.meeting_point}") if data.meeting_point else None,
        _meta(
            _or_dash(data.service_time),
            f"Flight: {data.flight_number}" if data.flight_number else None,
            f"Provider: {data.service_provider}" if data.service_provider else None,
        ),
        Row(inclusions) if inclusions else None,
        greeter,
    )


def _render_unknown(item) -> AtomicBlock:
    return AtomicBlock(role="item", kind="unknown", children=[Text("Unknown item type", "muted")])


ITEM_RENDERERS = {
    FlightItem: _render_flight,
    PrivateJetItem: _render_private_jet,
    TrainItem: _render_train,
    HotelItem: _render_hotel,
    EventItem: _render_event,
    RentalCarItem: _render_rental_car,
    CarWithDriverItem: _render_car_with_driver,
    EmbassyItem: _render_embassy,
    MeetAssistItem: _render_meet_assist,
}


def render_item(item) -> AtomicBlock:
    renderer = ITEM_RENDERERS.get(type(item), _render_unknown)
    return renderer(item)


# ─── Page-level blocks ───


def _render_header(travel_request: TravelRequest, generated_at: datetime) -> AtomicBlock:
    children = [
        Text(settings.itinerary_title, "title"),
        Text(f"Request #{travel_request.request_number}", "subtitle"),
    ]
    start = calendar_day(travel_request.trip_start_date)
    end = calendar_day(travel_request.trip_end_date)
    if start and end:
        children.append(Text(f"{format_long_date(start)} - {format_long_date(end)}", "muted"))
    children.append(Text(f"Generated on {format_long_date(generated_at.date())}", "small"))
    return AtomicBlock(role="header", children=children)


def _render_travelers(travel_request: TravelRequest) -> AtomicBlock | None:
    if not travel_request.passengers:
        return None
    children: list = [Row([Icon("users"), Text("Travelers", "heading")])]
    for passenger in travel_request.passengers:
        row = [Text(passenger.full_name or "Unknown")]
        if passenger.is_main_passenger:
            row.append(Badge("Main", "primary"))
        children.append(Row(row))
    return AtomicBlock(role="travelers", children=children)


def _render_day(index: int, day: TripDay) -> Section:
    header = AtomicBlock(
        role="day-header",
        keep_with_next=True,
        children=[Text(f"Day {index}", "heading"), Text(format_full_date(day.date), "muted")],
    )
    if day.is_free_day:
        body = [AtomicBlock(role="free-day", children=[Text("Free day - no scheduled activities", "muted")])]
    else:
        body = [render_item(item) for item in day.items]
    return Section(role="day", children=[header, *body])


def _render_footer() -> AtomicBlock:
    return AtomicBlock(
        role="footer",
        children=[Text(line, "small") for line in settings.itinerary_footer_lines],
    )


def render(
    travel_request: TravelRequest,
    days: list[TripDay],
    generated_at: datetime | None = None,
) -> Document:
    """Build the printable layout tree for a travel request's itinerary."""
    generated_at = generated_at or datetime.now()

    children: list = [_render_header(travel_request, generated_at)]
    travelers = _render_travelers(travel_request)
    if travelers:
        children.append(travelers)

    if days:
        children.append(
            Section(role="days", children=[_render_day(i, day) for i, day in enumerate(days, start=1)])
        )
    else:
        children.append(AtomicBlock(role="empty", children=[Icon("calendar"), Text("No scheduled activities yet", "muted")]))

    children.append(_render_footer())
    return Document(title=f"Itinerary-{travel_request.request_number}", children=children)
