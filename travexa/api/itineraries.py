# api/itineraries.py
"""
Itinerary API
AI-generated trip itineraries (multi-option and single-plan).

Error contract (mirrored by the web client):
- 400 invalid body or impossible dates
- 402 AI credits exhausted, 429 rate limited (mirrored from the gateway)
- 500 everything else
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError
from loguru import logger

from travexa.api.deps import error_response, first_validation_message, get_itinerary_generator
from travexa.llm.gateway import GatewayError, ReplyFormatError
from travexa.llm.itinerary_generator import ItineraryGenerator, ItineraryValidationError, check_trip_window
from travexa.schemas.travel_schemas import ErrorResponse, ItineraryRequest, TripPlanRequest


router = APIRouter(prefix="/api", tags=["itineraries"])

ERROR_RESPONSES = {status: {"model": ErrorResponse} for status in (400, 402, 429, 500)}


@router.post("/itinerary/generate", responses=ERROR_RESPONSES)
async def generate_itinerary(
    payload: Any = Body(None),
    generator: ItineraryGenerator = Depends(get_itinerary_generator),
):
    """
    Generate itinerary options for a trip.

    Tourism trips get up to 4 themed (or budget-tiered) itineraries;
    commute trips get multimodal A -> B route options.
    """
    try:
        request = ItineraryRequest.model_validate(payload)
    except ValidationError as e:
        return error_response(400, "Invalid request", first_validation_message(e))

    try:
        check_trip_window(request)
    except ItineraryValidationError as e:
        return error_response(400, str(e))

    if not generator.gateway.configured:
        logger.error("[Config Error] AI gateway API key not configured")
        return error_response(500, "AI gateway not configured")

    try:
        return await generator.generate_itineraries(request)
    except ReplyFormatError as e:
        logger.error(f"[Server Error] {e}")
        return error_response(500, "Failed to generate itinerary")
    except GatewayError as e:
        if e.rate_limited:
            return error_response(429, "Rate limit exceeded. Please wait a few minutes before trying again.")
        if e.out_of_credits:
            return error_response(402, "AI credits exhausted. Please add credits to continue.")
        logger.error(f"[Server Error] {e}")
        return error_response(500, "Failed to generate itinerary. Please try again.")
    except Exception as e:
        logger.exception(f"[Server Error] {e}")
        return error_response(500, "Failed to generate itinerary")


@router.post("/trip-plan/generate", responses=ERROR_RESPONSES)
async def generate_trip_plan(
    payload: Any = Body(None),
    generator: ItineraryGenerator = Depends(get_itinerary_generator),
):
    """Generate a single day-by-day trip plan with map coordinates"""
    try:
        request = TripPlanRequest.model_validate(payload)
    except ValidationError as e:
        return error_response(400, "Invalid request", first_validation_message(e))

    if not generator.gateway.configured:
        return error_response(500, "AI gateway API key is not configured")

    try:
        return await generator.generate_trip_plan(request)
    except GatewayError as e:
        if e.rate_limited:
            return error_response(429, "Rate limit exceeded. Please try again later.")
        if e.out_of_credits:
            return error_response(402, "AI credits exhausted. Please add credits to continue.")
        logger.error(f"Error generating trip plan: {e}")
        return error_response(500, str(e))
    except Exception as e:
        logger.exception(f"Error generating trip plan: {e}")
        return error_response(500, str(e) or "Unknown error")
