# schemas/travel_schemas.py
"""
Pydantic v2 schemas for the TraveXa service.
Request models mirror the JSON bodies the web client sends (camelCase on the
wire); response models are the reshaped, client-facing search results.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel


PlaceName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
Interest = Annotated[str, StringConstraints(max_length=50)]


def parse_date(value: str) -> datetime:
    """Parse the ISO date/datetime strings the client sends, as naive UTC."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return datetime.combine(date.fromisoformat(text[:10]), datetime.min.time())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def inclusive_days(start: str, end: str) -> int:
    """Day count including both ends; a partial day counts as a whole one."""
    delta = parse_date(end) - parse_date(start)
    whole, remainder = divmod(delta.total_seconds(), 86400)
    return int(whole) + (1 if remainder else 0) + 1


def _check_date(value: str, message: str) -> str:
    try:
        parse_date(value)
    except (ValueError, TypeError):
        raise ValueError(message)
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================
# Enums
# ============================================

class PlannerMode(str, Enum):
    COMFORT = "comfort"
    TIME = "time"
    BUDGET = "budget"


class TripType(str, Enum):
    TOURISM = "tourism"
    COMMUTE = "commute"


# ============================================
# Itinerary Requests
# ============================================

class ItineraryRequest(CamelModel):
    """Body of POST /api/itinerary/generate"""
    current_location: Optional[PlaceName] = None
    destination: PlaceName
    start_date: str
    end_date: str
    budget_inr: Optional[float] = Field(None, gt=0, le=10_000_000, alias="budgetINR")
    budget: Optional[str] = None
    group_size: Optional[int] = Field(None, ge=1, le=50)
    travelers: Optional[int] = Field(None, ge=1, le=50)
    interests: List[Interest] = Field(..., max_length=20)
    planner_mode: PlannerMode = PlannerMode.COMFORT
    trip_type: TripType = TripType.TOURISM
    generate_multiple: bool = True
    generate_budget_options: bool = False

    @field_validator("start_date")
    @classmethod
    def _valid_start(cls, v: str) -> str:
        return _check_date(v, "Invalid start date")

    @field_validator("end_date")
    @classmethod
    def _valid_end(cls, v: str) -> str:
        return _check_date(v, "Invalid end date")

    @property
    def party_size(self) -> int:
        return self.group_size or self.travelers or 1

    @property
    def budget_text(self) -> Optional[str]:
        if self.budget:
            return self.budget
        if self.budget_inr:
            amount = int(self.budget_inr) if float(self.budget_inr).is_integer() else self.budget_inr
            return f"₹{amount}"
        return None

    @property
    def trip_days(self) -> int:
        return inclusive_days(self.start_date, self.end_date)


class TripPlanRequest(CamelModel):
    """Body of POST /api/trip-plan/generate"""
    current_location: str
    destination: str
    start_date: str
    end_date: str
    travelers: int = 1
    budget: str = "moderate"
    interests: List[str] = Field(default_factory=list)

    @field_validator("start_date", "end_date")
    @classmethod
    def _valid_dates(cls, v: str) -> str:
        return _check_date(v, "Invalid date")

    @property
    def num_days(self) -> int:
        return inclusive_days(self.start_date, self.end_date)


# ============================================
# Search Requests
# ============================================

class AirportSearchRequest(CamelModel):
    keyword: str = ""


class FlightSearchRequest(CamelModel):
    """Body of POST /api/search/flights"""
    origin: PlaceName = Field(..., alias="from")
    destination: PlaceName = Field(..., alias="to")
    date: str
    passengers: int = Field(1, ge=1, le=9)
    return_date: Optional[str] = None

    @field_validator("date")
    @classmethod
    def _valid_date(cls, v: str) -> str:
        return _check_date(v, "Invalid date")


class HotelSearchRequest(CamelModel):
    """Body of POST /api/search/hotels"""
    city: PlaceName
    check_in_date: str
    check_out_date: str
    guests: int = Field(2, ge=1, le=9)
    rooms: int = Field(1, ge=1, le=5)

    @field_validator("check_in_date")
    @classmethod
    def _valid_check_in(cls, v: str) -> str:
        return _check_date(v, "Invalid check-in date")

    @field_validator("check_out_date")
    @classmethod
    def _valid_check_out(cls, v: str) -> str:
        return _check_date(v, "Invalid check-out date")

    @property
    def nights(self) -> int:
        days = (parse_date(self.check_out_date).date() - parse_date(self.check_in_date).date()).days
        return max(1, days)


# ============================================
# Search Results
# ============================================

class Location(CamelModel):
    iata_code: str
    name: str
    city_name: str
    country_name: str = ""
    country_code: str = ""
    type: str
    detailed_name: str


class FlightSegment(CamelModel):
    departure_time: str
    arrival_time: str
    departure_airport: str
    arrival_airport: str
    departure_city: str
    arrival_city: str
    duration: str
    flight_number: str
    aircraft: str
    airline: str
    airline_code: str


class FareOption(CamelModel):
    type: str
    name: str
    price: int
    checkin_baggage: str
    cabin_baggage: str
    cancellation: str
    date_change: str
    seat_selection: str
    meals: bool


class FlightAmenities(CamelModel):
    wifi: bool = False
    meals: bool = False
    entertainment: bool = False
    power: bool = False


class Flight(CamelModel):
    id: str
    airline: str
    airline_code: str
    flight_number: str
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    from_code: str
    to_code: str
    from_city: str
    to_city: str
    departure_time: str
    arrival_time: str
    duration: str
    stops: int
    stop_details: List[str] = Field(default_factory=list)
    price: int
    seats_available: Optional[int] = None
    date: str
    cabin: str
    aircraft: str
    booking_class: str
    segments: List[FlightSegment] = Field(default_factory=list)
    fare_options: List[FareOption] = Field(default_factory=list)
    amenities: FlightAmenities = Field(default_factory=FlightAmenities)


class Hotel(CamelModel):
    id: str
    name: str
    location: str
    address: str
    rating: Optional[int] = None
    price_per_night: Optional[int] = None
    total_price: Optional[int] = None
    currency: str = "INR"
    amenities: List[str] = Field(default_factory=list)
    room_type: str = "Standard Room"
    free_cancellation: bool = False
    breakfast_included: bool = False
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class LocationList(BaseModel):
    locations: List[Location]


class FlightList(BaseModel):
    flights: List[Flight]


class HotelList(BaseModel):
    hotels: List[Hotel]


# ============================================
# Vault & Account
# ============================================

class VaultFields(BaseModel):
    """Profile fields stored encrypted in `sensitive_user_data`"""
    date_of_birth: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v


class DeleteAccountResponse(BaseModel):
    success: bool
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
