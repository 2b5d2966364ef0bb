"""
Amadeus response reshaping.

Turns raw Amadeus JSON (locations, flight offers, hotel offers) into the
flatter shapes the TraveXa web client renders. Everything here is pure:
no I/O, no clock, no randomness.
"""

import re
from typing import Any, Dict, List, Optional

from travexa.schemas.travel_schemas import (
    FareOption, Flight, FlightAmenities, FlightSegment, Hotel, Location,
)


# Aircraft type names (override the Amadeus dictionary, which is terse)
AIRCRAFT_NAMES: Dict[str, str] = {
    "320": "Airbus A320",
    "321": "Airbus A321",
    "32N": "Airbus A320neo",
    "738": "Boeing 737-800",
    "77W": "Boeing 777-300ER",
    "789": "Boeing 787-9 Dreamliner",
    "788": "Boeing 787-8 Dreamliner",
    "AT7": "ATR 72",
    "E90": "Embraer E190",
    "DH4": "Bombardier Q400",
}

# Carriers that advertise full-service amenities
FULL_SERVICE_CARRIERS = {"AI", "UK"}

DEFAULT_HOTEL_AMENITIES = ["Free WiFi", "Air Conditioning", "Room Service", "Restaurant", "Parking"]

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")


def format_duration(iso_duration: Optional[str]) -> str:
    """'PT2H35M' -> '2h 35m'"""
    match = _DURATION_RE.match(iso_duration or "")
    hours = match.group(1) if match and match.group(1) else "0"
    minutes = match.group(2) if match and match.group(2) else "0"
    return f"{hours}h {minutes}m"


def clock_time(timestamp: Optional[str]) -> str:
    """'2025-03-01T06:15:00' -> '06:15'"""
    if not timestamp or "T" not in timestamp:
        return "00:00"
    return timestamp.split("T", 1)[1][:5]


def calendar_date(timestamp: Optional[str]) -> str:
    if not timestamp:
        return ""
    return timestamp.split("T", 1)[0]


# ============================================
# Locations
# ============================================

def parse_locations(data: Dict[str, Any]) -> List[Location]:
    """Reshape /v1/reference-data/locations results for autocomplete"""
    locations = []
    for loc in data.get("data") or []:
        address = loc.get("address") or {}
        name = loc.get("name", "")
        country_name = address.get("countryName") or ""
        locations.append(Location(
            iata_code=loc.get("iataCode", ""),
            name=name,
            city_name=address.get("cityName") or name,
            country_name=country_name,
            country_code=address.get("countryCode") or "",
            type=loc.get("subType", ""),
            detailed_name=loc.get("detailedName") or f"{name}, {country_name}",
        ))
    return locations


# ============================================
# Flights
# ============================================

def build_fare_options(base_price: int) -> List[FareOption]:
    """Saver / Flexi / Premium Flexi tiers derived from the offer price"""
    return [
        FareOption(
            type="SAVER", name="Saver", price=base_price,
            checkin_baggage="15 Kg", cabin_baggage="7 Kg",
            cancellation="₹3,500", date_change="₹3,000",
            seat_selection="Chargeable", meals=False,
        ),
        FareOption(
            type="FLEXI", name="Flexi", price=round(base_price * 1.15),
            checkin_baggage="20 Kg", cabin_baggage="7 Kg",
            cancellation="₹2,000", date_change="₹1,500",
            seat_selection="Free", meals=True,
        ),
        FareOption(
            type="PREMIUM", name="Premium Flexi", price=round(base_price * 1.3),
            checkin_baggage="25 Kg", cabin_baggage="10 Kg",
            cancellation="Free", date_change="Free",
            seat_selection="Free", meals=True,
        ),
    ]


def _parse_segment(seg: Dict[str, Any], carriers: Dict[str, str],
                   aircraft: Dict[str, str], locations: Dict[str, Any]) -> FlightSegment:
    departure = seg.get("departure") or {}
    arrival = seg.get("arrival") or {}
    dep_code = departure.get("iataCode", "")
    arr_code = arrival.get("iataCode", "")
    carrier_code = seg.get("carrierCode", "")
    aircraft_code = (seg.get("aircraft") or {}).get("code", "")

    return FlightSegment(
        departure_time=clock_time(departure.get("at")),
        arrival_time=clock_time(arrival.get("at")),
        departure_airport=dep_code,
        arrival_airport=arr_code,
        departure_city=(locations.get(dep_code) or {}).get("cityCode") or dep_code,
        arrival_city=(locations.get(arr_code) or {}).get("cityCode") or arr_code,
        duration=format_duration(seg.get("duration")),
        flight_number=f"{carrier_code}-{seg.get('number', '')}",
        aircraft=AIRCRAFT_NAMES.get(aircraft_code) or aircraft.get(aircraft_code) or aircraft_code,
        airline=carriers.get(carrier_code) or carrier_code,
        airline_code=carrier_code,
    )


def parse_flight_offer(offer: Dict[str, Any], index: int, dictionaries: Dict[str, Any],
                       from_city: str, to_city: str) -> Flight:
    carriers = dictionaries.get("carriers") or {}
    aircraft = dictionaries.get("aircraft") or {}
    locations = dictionaries.get("locations") or {}

    itineraries = offer.get("itineraries") or [{}]
    itinerary = itineraries[0]
    segments = itinerary.get("segments") or []
    first = segments[0] if segments else {}
    last = segments[-1] if segments else {}

    carrier_code = first.get("carrierCode", "")
    dep_code = (first.get("departure") or {}).get("iataCode", "")
    arr_code = (last.get("arrival") or {}).get("iataCode", "")

    base_price = round(float((offer.get("price") or {}).get("total") or 0))

    parsed_segments = [_parse_segment(seg, carriers, aircraft, locations) for seg in segments]

    fare_details = {}
    traveler_pricings = offer.get("travelerPricings") or []
    if traveler_pricings:
        by_segment = traveler_pricings[0].get("fareDetailsBySegment") or []
        if by_segment:
            fare_details = by_segment[0]
    cabin = fare_details.get("cabin") or "ECONOMY"
    full_service = carrier_code in FULL_SERVICE_CARRIERS

    return Flight(
        id=f"FL{offer.get('id') or index + 1}",
        airline=carriers.get(carrier_code) or carrier_code,
        airline_code=carrier_code,
        flight_number=f"{carrier_code}-{first.get('number', '')}",
        origin=from_city,
        destination=to_city,
        from_code=dep_code,
        to_code=arr_code,
        from_city=(locations.get(dep_code) or {}).get("cityCode") or from_city,
        to_city=(locations.get(arr_code) or {}).get("cityCode") or to_city,
        departure_time=clock_time((first.get("departure") or {}).get("at")),
        arrival_time=clock_time((last.get("arrival") or {}).get("at")),
        duration=format_duration(itinerary.get("duration")),
        stops=max(len(segments) - 1, 0),
        stop_details=[(seg.get("arrival") or {}).get("iataCode", "") for seg in segments[:-1]],
        price=base_price,
        seats_available=offer.get("numberOfBookableSeats"),
        date=calendar_date((first.get("departure") or {}).get("at")),
        cabin=cabin.capitalize(),
        aircraft=parsed_segments[0].aircraft if parsed_segments else "Airbus A320",
        booking_class=fare_details.get("class") or "Y",
        segments=parsed_segments,
        fare_options=build_fare_options(base_price),
        amenities=FlightAmenities(
            wifi=full_service,
            meals=cabin != "ECONOMY" or full_service,
            entertainment=full_service,
            power=cabin != "ECONOMY",
        ),
    )


def parse_flight_offers(data: Dict[str, Any], from_city: str, to_city: str) -> List[Flight]:
    """Reshape a /v2/shopping/flight-offers response"""
    offers = data.get("data") or []
    dictionaries = data.get("dictionaries") or {}
    return [
        parse_flight_offer(offer, index, dictionaries, from_city, to_city)
        for index, offer in enumerate(offers)
    ]


# ============================================
# Hotels
# ============================================

def parse_hotel_offer(offer: Dict[str, Any], index: int, city: str, nights: int = 1) -> Hotel:
    """
    Reshape one hotel entry.

    Accepts both a v3 hotel-offers item ({"hotel": ..., "offers": [...]})
    and a bare by-city hotel record (used when the offers call fails).
    """
    hotel = offer.get("hotel") or offer
    offers = offer.get("offers") or []
    best = offers[0] if offers else {}

    total = (best.get("price") or {}).get("total")
    total_price = round(float(total)) if total else None
    price_per_night = round(total_price / max(nights, 1)) if total_price is not None else None

    rating = hotel.get("rating")
    address_lines = (hotel.get("address") or {}).get("lines") or []
    geo = hotel.get("geoCode") or {}
    policies = best.get("policies") or {}
    board_type = (best.get("boardType") or "").upper()

    return Hotel(
        id=f"HT{hotel.get('hotelId') or index + 1}",
        name=hotel.get("name") or f"Hotel in {city}",
        location=city,
        address=", ".join(address_lines) or f"{city}, India",
        rating=int(rating) if rating else None,
        price_per_night=price_per_night,
        total_price=total_price,
        currency=(best.get("price") or {}).get("currency") or "INR",
        amenities=(hotel.get("amenities") or DEFAULT_HOTEL_AMENITIES)[:5],
        room_type=((best.get("room") or {}).get("description") or {}).get("text") or "Standard Room",
        free_cancellation=bool((policies.get("cancellation") or {}).get("deadline")),
        breakfast_included="BREAKFAST" in board_type,
        latitude=geo.get("latitude"),
        longitude=geo.get("longitude"),
    )


def parse_hotel_offers(data: Dict[str, Any], city: str, nights: int = 1) -> List[Hotel]:
    """Reshape a v3 hotel-offers (or by-city fallback) response"""
    return [
        parse_hotel_offer(offer, index, city, nights)
        for index, offer in enumerate(data.get("data") or [])
    ]
