# api/account.py
"""
Account API
Self-service account deletion: removes every row the caller owns and then
the auth user itself.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header
from loguru import logger

from travexa.api.deps import error_response, get_supabase_admin
from travexa.interfaces.supabase_admin import SupabaseAdmin, bearer_token, purge_user
from travexa.schemas.travel_schemas import DeleteAccountResponse, ErrorResponse


router = APIRouter(prefix="/api", tags=["account"])


@router.delete("/account", response_model=DeleteAccountResponse, responses={500: {"model": ErrorResponse}})
async def delete_account(
    authorization: Optional[str] = Header(None),
    admin: SupabaseAdmin = Depends(get_supabase_admin),
):
    """
    Delete the calling user's account.

    The caller is identified by the bearer JWT. Tables that cannot be
    cleaned are skipped; failing to delete the auth user is an error.
    """
    try:
        if not admin.configured:
            raise RuntimeError("Supabase admin client is not configured")
        user = await admin.get_user(bearer_token(authorization))
        skipped = await purge_user(admin, user["id"])
    except Exception as e:
        logger.error(f"Error deleting account: {e}")
        return error_response(500, str(e) or "Unknown error")

    if skipped:
        logger.warning(f"Account {user['id']} deleted; tables not cleaned: {', '.join(skipped)}")
    return DeleteAccountResponse(success=True, message="Account deleted successfully")
