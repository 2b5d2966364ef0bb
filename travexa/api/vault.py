# api/vault.py
"""
Secure Vault API
Read and write the caller's encrypted profile fields (date of birth,
postal address). Values are AES-GCM encrypted per user before storage.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header
from pydantic import ValidationError
from loguru import logger

from travexa.api.deps import error_response, first_validation_message, get_supabase_admin
from travexa.interfaces.supabase_admin import SupabaseAdmin, SupabaseError, bearer_token
from travexa.interfaces.vault_store import VaultStore
from travexa.schemas.travel_schemas import ErrorResponse, VaultFields
from travexa.utils.vault_crypto import VaultError


router = APIRouter(prefix="/api/vault", tags=["vault"])


async def _caller_id(admin: SupabaseAdmin, authorization: Optional[str]) -> str:
    user = await admin.get_user(bearer_token(authorization))
    return user["id"]


@router.get("", response_model=VaultFields, responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def read_vault(
    authorization: Optional[str] = Header(None),
    admin: SupabaseAdmin = Depends(get_supabase_admin),
):
    """Decrypted vault fields; all empty if nothing is stored yet"""
    try:
        user_id = await _caller_id(admin, authorization)
    except SupabaseError as e:
        return error_response(401, str(e))

    try:
        fields = await VaultStore(admin).load(user_id)
    except SupabaseError as e:
        logger.error(f"Error fetching sensitive data: {e}")
        return error_response(500, "Failed to load vault")

    return fields or VaultFields()


@router.put("", response_model=VaultFields, responses={status: {"model": ErrorResponse} for status in (400, 401, 500)})
async def write_vault(
    payload: Any = Body(None),
    authorization: Optional[str] = Header(None),
    admin: SupabaseAdmin = Depends(get_supabase_admin),
):
    """Encrypt and store vault fields, echoing the plaintext back"""
    try:
        user_id = await _caller_id(admin, authorization)
    except SupabaseError as e:
        return error_response(401, str(e))

    try:
        fields = VaultFields.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        return error_response(400, "Invalid request", first_validation_message(e))

    try:
        await VaultStore(admin).save(user_id, fields)
    except (SupabaseError, VaultError) as e:
        logger.error(f"Error saving sensitive data: {e}")
        return error_response(500, "Failed to save vault")

    return fields
