# algorithms/__init__.py
"""
Pure lookup and reshaping logic for the search proxies.
"""

from .iata_lookup import resolve_airport_code, resolve_city_code
from .offer_parser import parse_flight_offers, parse_hotel_offers, parse_locations

__all__ = [
    "resolve_airport_code",
    "resolve_city_code",
    "parse_flight_offers",
    "parse_hotel_offers",
    "parse_locations",
]
