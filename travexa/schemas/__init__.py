# schemas/__init__.py
"""
Pydantic Schemas Package

Contains all Pydantic v2 models for:
- API requests (itinerary, trip plan, search)
- Reshaped search results (locations, flights, hotels)
- Vault and account payloads
"""

from .travel_schemas import (
    # Enums
    PlannerMode, TripType,
    # Requests
    ItineraryRequest, TripPlanRequest,
    AirportSearchRequest, FlightSearchRequest, HotelSearchRequest,
    # Results
    Location, Flight, FlightSegment, FareOption, FlightAmenities, Hotel,
    LocationList, FlightList, HotelList,
    # Vault & Account
    VaultFields, DeleteAccountResponse, ErrorResponse,
)

__all__ = [
    "PlannerMode", "TripType",
    "ItineraryRequest", "TripPlanRequest",
    "AirportSearchRequest", "FlightSearchRequest", "HotelSearchRequest",
    "Location", "Flight", "FlightSegment", "FareOption", "FlightAmenities", "Hotel",
    "LocationList", "FlightList", "HotelList",
    "VaultFields", "DeleteAccountResponse", "ErrorResponse",
]
