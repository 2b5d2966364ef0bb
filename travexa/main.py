"""
TraveXa Service - FastAPI Application
Server-side functions for the TraveXa travel app:
- AI itinerary generation through an OpenAI-compatible gateway
- Flight / hotel / airport search through Amadeus
- Account deletion and Secure Vault through Supabase
"""

import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from travexa import __version__
from travexa.api import account_router, itineraries_router, search_router, vault_router
from travexa.api.deps import get_amadeus_client, get_supabase_admin, get_token_cache
from travexa.config import settings
from travexa.interfaces.token_cache import TokenCache


# Configure logging
logger.remove()
logger.add(
    sys.stderr,
    level="DEBUG" if settings.API_ENV == "development" else "INFO",
    format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
)


# ============================================
# Application Lifespan
# ============================================

def component_status() -> dict:
    return {
        "ai_gateway": settings.gateway_configured,
        "amadeus": settings.amadeus_configured,
        "supabase": settings.supabase_configured,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("=" * 50)
    logger.info("Starting TraveXa Service")
    logger.info("=" * 50)
    logger.info(f"Environment: {settings.API_ENV}")
    logger.info(f"AI Gateway: {settings.AI_GATEWAY_URL}")
    logger.info(f"  Itinerary model: {settings.ITINERARY_MODEL}")
    logger.info(f"  Trip plan model: {settings.TRIP_PLAN_MODEL}")
    logger.info(f"Amadeus host: {settings.AMADEUS_HOST}")

    components = component_status()
    ready = sum(1 for v in components.values() if v)
    logger.info(f"Components configured: {ready}/{len(components)}")
    for name, status in components.items():
        logger.info(f"  {'✓' if status else '✗'} {name}")

    yield

    if get_amadeus_client.cache_info().currsize:
        await get_amadeus_client().aclose()
    if get_supabase_admin.cache_info().currsize:
        await get_supabase_admin().aclose()
    logger.info("TraveXa Service shutdown complete")


# ============================================
# FastAPI Application
# ============================================

app = FastAPI(
    title="TraveXa Service",
    description="AI itineraries, flight/hotel search, account and vault endpoints for TraveXa.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
cors_origins = settings.cors_origins_list or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(itineraries_router)
app.include_router(search_router)
app.include_router(account_router)
app.include_router(vault_router)


# ============================================
# REST Endpoints
# ============================================

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "TraveXa Service",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "endpoints": [
            "/api/health",
            "/api/itinerary/generate",
            "/api/trip-plan/generate",
            "/api/search/airports",
            "/api/search/flights",
            "/api/search/hotels",
            "/api/account",
            "/api/vault",
        ],
    }


@app.get("/api/health")
async def health_check(token_cache: TokenCache = Depends(get_token_cache)):
    """Detailed health check"""
    components = {
        name: "configured" if ok else "not configured"
        for name, ok in component_status().items()
    }
    components["token_cache"] = token_cache.backend

    return {
        "status": "healthy",
        "service": "travexa-service",
        "version": __version__,
        "components": components,
        "timestamp": datetime.now().isoformat(),
    }


# ============================================
# Main
# ============================================

def run():
    import uvicorn
    uvicorn.run(
        "travexa.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_ENV == "development",
    )


if __name__ == "__main__":
    run()
