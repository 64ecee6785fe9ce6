from datetime import date

from pydantic import BaseModel


class ItineraryItemResponse(BaseModel):
    type: str
    role: str | None
    date: date
    time: str | None
    priority: int
    data: dict


class ItineraryDayResponse(BaseModel):
    day_number: int
    date: date
    is_free_day: bool
    items: list[ItineraryItemResponse]


class ItineraryResponse(BaseModel):
    request_number: str
    start_date: date | None
    end_date: date | None
    days: list[ItineraryDayResponse]
