"""
Shared FastAPI dependencies and response helpers for the routers.
"""

from functools import lru_cache
from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import ValidationError

from travexa.config import settings
from travexa.interfaces.amadeus_client import AmadeusClient
from travexa.interfaces.supabase_admin import SupabaseAdmin
from travexa.interfaces.token_cache import TokenCache
from travexa.llm.gateway import AIGateway
from travexa.llm.itinerary_generator import ItineraryGenerator


# ============================================
# Singletons
# ============================================

@lru_cache(maxsize=1)
def get_token_cache() -> TokenCache:
    return TokenCache(
        redis_host=settings.REDIS_HOST,
        redis_port=settings.REDIS_PORT,
        redis_db=settings.REDIS_DB,
    )


@lru_cache(maxsize=1)
def get_amadeus_client() -> AmadeusClient:
    return AmadeusClient(
        api_key=settings.AMADEUS_API_KEY,
        api_secret=settings.AMADEUS_API_SECRET,
        host=settings.AMADEUS_HOST,
        token_cache=get_token_cache(),
        timeout=settings.HTTP_TIMEOUT,
    )


@lru_cache(maxsize=1)
def get_itinerary_generator() -> ItineraryGenerator:
    gateway = AIGateway(
        api_key=settings.AI_GATEWAY_API_KEY,
        base_url=settings.AI_GATEWAY_URL,
        timeout=settings.HTTP_TIMEOUT,
    )
    return ItineraryGenerator(
        gateway=gateway,
        itinerary_model=settings.ITINERARY_MODEL,
        trip_plan_model=settings.TRIP_PLAN_MODEL,
    )


@lru_cache(maxsize=1)
def get_supabase_admin() -> SupabaseAdmin:
    return SupabaseAdmin(
        url=settings.SUPABASE_URL,
        service_key=settings.SUPABASE_SERVICE_ROLE_KEY,
        timeout=settings.HTTP_TIMEOUT,
    )


# ============================================
# Responses
# ============================================

def error_response(status_code: int, error: str, details: Optional[str] = None,
                   **extra: Any) -> JSONResponse:
    """JSON error body in the shape the web client reads: {"error", "details"?}"""
    body = {"error": error}
    if details is not None:
        body["details"] = details
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


def first_validation_message(exc: ValidationError) -> str:
    """Message of the first validation issue, without pydantic's prefix"""
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    message = errors[0].get("msg", "Invalid input")
    return message.removeprefix("Value error, ")
