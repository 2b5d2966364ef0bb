# travexa/__init__.py
"""
TraveXa Travel Service Package

Server-side functions behind the TraveXa travel app:
- AI itinerary and trip plan generation
- Flight, hotel and airport search (Amadeus)
- Account deletion (Supabase admin)
- Secure Vault field encryption
"""

__version__ = "1.0.0"

# Package structure:
# travexa/
# ├── __init__.py           <- This file
# ├── main.py               <- FastAPI application entry
# ├── config.py             <- Configuration settings
# │
# ├── api/                  <- FastAPI Routers
# │   ├── itineraries.py    <- /api/itinerary, /api/trip-plan
# │   ├── search.py         <- /api/search/{airports,flights,hotels}
# │   ├── account.py        <- DELETE /api/account
# │   └── vault.py          <- /api/vault
# │
# ├── llm/                  <- LLM Components
# │   ├── prompts.py        <- Prompt builders
# │   ├── gateway.py        <- AI gateway client + JSON extraction
# │   └── itinerary_generator.py
# │
# ├── interfaces/           <- External services and stores
# │   ├── amadeus_client.py
# │   ├── supabase_admin.py
# │   ├── token_cache.py
# │   └── vault_store.py
# │
# ├── algorithms/           <- Pure lookup and reshaping logic
# │   ├── iata_lookup.py
# │   └── offer_parser.py
# │
# ├── schemas/              <- Pydantic Models
# │   └── travel_schemas.py
# │
# └── utils/
#     └── vault_crypto.py   <- AES-GCM vault helpers
