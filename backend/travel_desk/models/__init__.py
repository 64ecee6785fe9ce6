from travel_desk.models.travel import (
    TravelRequest,
    TripCarWithDriver,
    TripEmbassyService,
    TripEvent,
    TripFlight,
    TripHotel,
    TripHotelRoom,
    TripMeetAssist,
    TripPassenger,
    TripPrivateJet,
    TripRentalCarSelfDrive,
    TripTrain,
)

__all__ = [
    "TravelRequest",
    "TripCarWithDriver",
    "TripEmbassyService",
    "TripEvent",
    "TripFlight",
    "TripHotel",
    "TripHotelRoom",
    "TripMeetAssist",
    "TripPassenger",
    "TripPrivateJet",
    "TripRentalCarSelfDrive",
    "TripTrain",
]
