"""
Supabase admin access (service-role key).

Talks to the Supabase Auth and PostgREST HTTP APIs directly with httpx.
Only the operations the service needs are wrapped: resolve a user from a
JWT, CRUD on a table filtered by one column, and delete an auth user.
"""

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger


# User-owned tables, children before parents so foreign keys do not block
# deletes
USER_TABLES = [
    "post_comments",
    "post_likes",
    "post_saves",
    "posts",
    "messages",
    "typing_indicators",
    "user_connections",
    "user_follows",
    "travel_group_members",
    "group_messages",
    "travel_groups",
    "bookings",
    "trip_segments",
    "trip_shares",
    "trip_likes",
    "bucket_list",
    "trips",
    "photos",
    "photo_albums",
    "articles",
    "reviews",
    "sensitive_user_data",
    "ticket_verifications",
    "user_roles",
    "profiles",
]

# Rows that reference the user through a column other than user_id
USER_REFERENCES = [
    ("user_connections", "requester_id"),
    ("user_connections", "addressee_id"),
    ("user_follows", "follower_id"),
    ("user_follows", "following_id"),
    ("messages", "sender_id"),
    ("messages", "recipient_id"),
    ("travel_groups", "creator_id"),
    ("trip_shares", "owner_id"),
    ("trip_shares", "shared_with_user_id"),
]


class SupabaseError(Exception):
    """Raised when a Supabase Auth or REST call fails"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def bearer_token(authorization: Optional[str]) -> str:
    """Extract the JWT from an Authorization header"""
    if not authorization:
        raise SupabaseError("No authorization header", 401)
    return authorization.replace("Bearer ", "", 1).strip()


class SupabaseAdmin:
    """Service-role client for Supabase Auth + PostgREST"""

    def __init__(self, url: str, service_key: str, timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url.rstrip("/")
        self.service_key = service_key
        self._client = httpx.AsyncClient(
            base_url=self.url,
            timeout=timeout,
            transport=transport,
            headers={"apikey": service_key},
        )

    @property
    def configured(self) -> bool:
        return bool(self.url and self.service_key)

    @property
    def _service_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.service_key}"}

    async def aclose(self):
        await self._client.aclose()

    # ============================================
    # Auth
    # ============================================

    async def get_user(self, jwt: str) -> Dict[str, Any]:
        """Resolve the user a JWT belongs to"""
        response = await self._client.get(
            "/auth/v1/user",
            headers={"Authorization": f"Bearer {jwt}"},
        )
        if response.status_code != 200:
            raise SupabaseError("Invalid user token", response.status_code)
        user = response.json()
        if not user or not user.get("id"):
            raise SupabaseError("Invalid user token", 401)
        return user

    async def delete_auth_user(self, user_id: str):
        response = await self._client.delete(
            f"/auth/v1/admin/users/{user_id}",
            headers=self._service_headers,
        )
        if response.status_code not in (200, 204):
            raise SupabaseError(response.text or "delete failed", response.status_code)

    # ============================================
    # REST (PostgREST)
    # ============================================

    async def select(self, table: str, column: str, value: str) -> List[Dict[str, Any]]:
        response = await self._client.get(
            f"/rest/v1/{table}",
            params={column: f"eq.{value}", "select": "*"},
            headers=self._service_headers,
        )
        if response.status_code != 200:
            raise SupabaseError(response.text, response.status_code)
        return response.json()

    async def insert(self, table: str, row: Dict[str, Any]):
        response = await self._client.post(
            f"/rest/v1/{table}",
            json=row,
            headers={**self._service_headers, "Prefer": "return=minimal"},
        )
        if response.status_code not in (200, 201, 204):
            raise SupabaseError(response.text, response.status_code)

    async def update(self, table: str, column: str, value: str, changes: Dict[str, Any]):
        response = await self._client.patch(
            f"/rest/v1/{table}",
            params={column: f"eq.{value}"},
            json=changes,
            headers={**self._service_headers, "Prefer": "return=minimal"},
        )
        if response.status_code not in (200, 204):
            raise SupabaseError(response.text, response.status_code)

    async def delete(self, table: str, column: str, value: str):
        response = await self._client.delete(
            f"/rest/v1/{table}",
            params={column: f"eq.{value}"},
            headers=self._service_headers,
        )
        if response.status_code not in (200, 204):
            raise SupabaseError(response.text, response.status_code)


async def purge_user(admin: SupabaseAdmin, user_id: str) -> List[str]:
    """
    Delete every row a user owns, then the auth user itself.

    Per-table failures are logged and skipped (a table may not exist in
    every deployment); failing to delete the auth user raises.

    Returns:
        Tables that could not be cleaned
    """
    logger.info(f"Deleting account for user: {user_id}")
    skipped = []

    for table in USER_TABLES:
        try:
            await admin.delete(table, "user_id", user_id)
            logger.info(f"Deleted user data from {table}")
        except SupabaseError as e:
            logger.warning(f"Note: Could not delete from {table}: {e}")
            skipped.append(table)

    for table, column in USER_REFERENCES:
        try:
            await admin.delete(table, column, user_id)
        except SupabaseError as e:
            logger.warning(f"Note: Could not delete from {table}.{column}: {e}")

    try:
        await admin.delete_auth_user(user_id)
    except SupabaseError as e:
        raise SupabaseError(f"Failed to delete auth user: {e}", e.status_code)

    logger.info(f"Successfully deleted account for user: {user_id}")
    return skipped
