# interfaces/__init__.py
"""
External Services Package

- amadeus_client: Amadeus OAuth + search endpoints
- supabase_admin: Supabase Auth/REST with the service-role key
- token_cache: Redis-backed access token cache
- vault_store: Encrypted `sensitive_user_data` rows
"""

from .amadeus_client import AmadeusClient, AmadeusError
from .supabase_admin import SupabaseAdmin, SupabaseError, purge_user, bearer_token
from .token_cache import TokenCache
from .vault_store import VaultStore

__all__ = [
    "AmadeusClient",
    "AmadeusError",
    "SupabaseAdmin",
    "SupabaseError",
    "purge_user",
    "bearer_token",
    "TokenCache",
    "VaultStore",
]
