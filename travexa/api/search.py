# api/search.py
"""
Search API
Proxies airport autocomplete, flight search and hotel search to Amadeus and
returns the reshaped, client-facing results.
"""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError
from loguru import logger

from travexa.algorithms.iata_lookup import resolve_airport_code, resolve_city_code
from travexa.algorithms.offer_parser import parse_flight_offers, parse_hotel_offers, parse_locations
from travexa.api.deps import error_response, first_validation_message, get_amadeus_client
from travexa.interfaces.amadeus_client import AmadeusClient
from travexa.schemas.travel_schemas import (
    AirportSearchRequest, ErrorResponse, FlightList, FlightSearchRequest, HotelList, HotelSearchRequest, LocationList,
)


router = APIRouter(prefix="/api/search", tags=["search"])

MIN_KEYWORD_LENGTH = 2

ERROR_RESPONSES = {status: {"model": ErrorResponse} for status in (400, 500, 503)}


@router.post("/airports", response_model=LocationList)
async def search_airports(
    payload: Any = Body(None),
    amadeus: AmadeusClient = Depends(get_amadeus_client),
):
    """Airport/city autocomplete; short keywords return an empty list"""
    try:
        request = AirportSearchRequest.model_validate(payload or {})
    except ValidationError:
        return LocationList(locations=[])

    keyword = request.keyword
    if not keyword or len(keyword) < MIN_KEYWORD_LENGTH:
        return LocationList(locations=[])

    logger.info(f"[Airport Search] keyword={keyword} timestamp={datetime.utcnow().isoformat()}")

    try:
        data = await amadeus.search_locations(keyword)
        locations = parse_locations(data)
    except Exception as e:
        logger.error(f"[Airport Search Error] {e}")
        return error_response(500, str(e), locations=[])

    logger.info(f"[Airport Search Complete] count={len(locations)}")
    return LocationList(locations=locations)


@router.post("/flights", response_model=FlightList, responses=ERROR_RESPONSES)
async def search_flights(
    payload: Any = Body(None),
    amadeus: AmadeusClient = Depends(get_amadeus_client),
):
    """One-way flight search between two free-text city names"""
    if not amadeus.configured:
        logger.error("[Config Error] Missing Amadeus API credentials")
        return error_response(503, "Flight search service is not configured")

    try:
        request = FlightSearchRequest.model_validate(payload)
    except ValidationError as e:
        return error_response(400, "Invalid search parameters", first_validation_message(e))

    origin_code = resolve_airport_code(request.origin)
    destination_code = resolve_airport_code(request.destination)

    logger.info(
        f"[Flight Search] route={request.origin} ({origin_code}) -> "
        f"{request.destination} ({destination_code}) date={request.date} "
        f"passengers={request.passengers}"
    )

    try:
        data = await amadeus.search_flight_offers(
            origin=origin_code,
            destination=destination_code,
            departure_date=request.date,
            adults=request.passengers,
        )
        flights = parse_flight_offers(data, request.origin, request.destination)
    except Exception as e:
        logger.error(f"[Flight Search Error] {e}")
        return error_response(500, "Failed to search flights. Please try again.")

    logger.info(f"[Flight Search Complete] count={len(flights)}")
    return FlightList(flights=flights)


@router.post("/hotels", response_model=HotelList, responses=ERROR_RESPONSES)
async def search_hotels(
    payload: Any = Body(None),
    amadeus: AmadeusClient = Depends(get_amadeus_client),
):
    """Hotel search in a free-text city for a date range"""
    if not amadeus.configured:
        logger.error("[Config Error] Missing Amadeus API credentials")
        return error_response(503, "Hotel search service is not configured")

    try:
        request = HotelSearchRequest.model_validate(payload)
    except ValidationError as e:
        return error_response(400, "Invalid search parameters", first_validation_message(e))

    city_code = resolve_city_code(request.city)

    logger.info(
        f"[Hotel Search] city={request.city} ({city_code}) "
        f"dates={request.check_in_date} to {request.check_out_date} "
        f"guests={request.guests} rooms={request.rooms}"
    )

    try:
        data = await amadeus.search_hotel_offers(
            city_code=city_code,
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            adults=request.guests,
            rooms=request.rooms,
        )
        hotels = parse_hotel_offers(data, request.city, request.nights)
    except Exception as e:
        logger.error(f"[Hotel Search Error] {e}")
        return error_response(500, "Failed to search hotels. Please try again.")

    logger.info(f"[Hotel Search Complete] count={len(hotels)}")
    return HotelList(hotels=hotels)
