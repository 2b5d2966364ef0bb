# api/__init__.py
"""
API Endpoints Package

Contains all FastAPI routers for the TraveXa service:
- itineraries: AI itinerary and trip plan generation
- search: Airport, flight and hotel search (Amadeus)
- account: Account deletion
- vault: Secure Vault read/write
"""

from .itineraries import router as itineraries_router
from .search import router as search_router
from .account import router as account_router
from .vault import router as vault_router

__all__ = [
    "itineraries_router",
    "search_router",
    "account_router",
    "vault_router",
]
