# llm/__init__.py
"""
LLM Components Package

Contains LLM-powered components:
- prompts: Prompt templates for itineraries and trip plans
- gateway: OpenAI-compatible AI gateway client and JSON reply parsing
- itinerary_generator: Request -> prompt -> completion -> parsed plan
"""

from .gateway import AIGateway, GatewayError, ReplyFormatError, parse_json_reply, strip_markdown_fences, extract_json_block
from .itinerary_generator import ItineraryGenerator, ItineraryValidationError, check_trip_window

__all__ = [
    "AIGateway",
    "GatewayError",
    "ReplyFormatError",
    "parse_json_reply",
    "strip_markdown_fences",
    "extract_json_block",
    "ItineraryGenerator",
    "ItineraryValidationError",
    "check_trip_window",
]
