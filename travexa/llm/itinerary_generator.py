# llm/itinerary_generator.py
"""
Itinerary Generator
Builds prompts from validated trip requests, calls the AI gateway once and
returns the parsed JSON plan.
"""

from datetime import datetime
from typing import Any, Dict

from loguru import logger

from travexa.llm.gateway import AIGateway, ReplyFormatError
from travexa.llm.prompts import build_itinerary_prompts, build_trip_plan_prompts
from travexa.schemas.travel_schemas import ItineraryRequest, TripPlanRequest, parse_date


MAX_TRIP_DAYS = 60


class ItineraryValidationError(ValueError):
    """Request passed schema validation but describes an impossible trip"""


def check_trip_window(request: ItineraryRequest):
    """
    Raises:
        ItineraryValidationError: If dates are reversed or the trip is too long
    """
    if parse_date(request.end_date) <= parse_date(request.start_date):
        raise ItineraryValidationError("End date must be after start date")
    if request.trip_days > MAX_TRIP_DAYS:
        raise ItineraryValidationError(f"Trip duration cannot exceed {MAX_TRIP_DAYS} days")


class ItineraryGenerator:
    """Generates itineraries and trip plans through the AI gateway"""

    def __init__(self, gateway: AIGateway, itinerary_model: str, trip_plan_model: str):
        self.gateway = gateway
        self.itinerary_model = itinerary_model
        self.trip_plan_model = trip_plan_model

    async def generate_itineraries(self, request: ItineraryRequest) -> Dict[str, Any]:
        """
        Generate one or more itinerary options.

        Returns:
            Parsed reply, guaranteed to hold an "itineraries" list

        Raises:
            ItineraryValidationError: Bad date window
            GatewayError: Upstream failure
            ReplyFormatError: Empty, unparseable or incomplete reply
        """
        check_trip_window(request)

        logger.info(
            f"[Itinerary Request] destination={request.destination} "
            f"trip_type={request.trip_type.value} duration_days={request.trip_days} "
            f"budget_options={request.generate_budget_options} "
            f"timestamp={datetime.utcnow().isoformat()}"
        )

        system_prompt, user_prompt = build_itinerary_prompts(request)
        plan = await self.gateway.complete_json(self.itinerary_model, system_prompt, user_prompt)
        logger.info("[AI Response] Itinerary generated successfully")

        if not isinstance(plan, dict) or not isinstance(plan.get("itineraries"), list):
            raise ReplyFormatError("Invalid itinerary format: missing itineraries array")

        logger.info(f"[Validation] Generated {len(plan['itineraries'])} itineraries")
        return plan

    async def generate_trip_plan(self, request: TripPlanRequest) -> Dict[str, Any]:
        """Generate a single day-by-day plan with coordinates per step"""
        logger.info(
            f"Generating trip plan: {request.current_location} -> {request.destination} "
            f"({request.start_date} to {request.end_date}, travelers={request.travelers})"
        )
        system_prompt, user_prompt = build_trip_plan_prompts(request)
        return await self.gateway.complete_json(
            self.trip_plan_model, system_prompt, user_prompt,
            first_block_only=True, parse_error="Failed to parse trip plan",
        )
