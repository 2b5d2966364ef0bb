"""
Secure Vault persistence: encrypted profile fields in `sensitive_user_data`.
"""

from typing import Dict, Optional

from loguru import logger

from travexa.interfaces.supabase_admin import SupabaseAdmin
from travexa.schemas.travel_schemas import VaultFields
from travexa.utils.vault_crypto import decrypt_object, encrypt_object


VAULT_TABLE = "sensitive_user_data"
VAULT_FIELDS = list(VaultFields.model_fields)


class VaultStore:
    def __init__(self, admin: SupabaseAdmin):
        self.admin = admin

    async def _existing_row(self, user_id: str) -> Optional[Dict]:
        rows = await self.admin.select(VAULT_TABLE, "user_id", user_id)
        return rows[0] if rows else None

    async def load(self, user_id: str) -> Optional[VaultFields]:
        """Decrypted vault fields, or None if the user has none stored"""
        row = await self._existing_row(user_id)
        if row is None:
            return None
        stored = {field: row.get(field) or "" for field in VAULT_FIELDS}
        return VaultFields(**decrypt_object(stored, user_id))

    async def save(self, user_id: str, fields: VaultFields):
        """Encrypt and write; empty fields are stored as NULL"""
        encrypted = encrypt_object(fields.model_dump(), user_id)
        row = {field: encrypted.get(field) or None for field in VAULT_FIELDS}

        if await self._existing_row(user_id) is not None:
            await self.admin.update(VAULT_TABLE, "user_id", user_id, row)
        else:
            await self.admin.insert(VAULT_TABLE, {"user_id": user_id, **row})

        logger.info(f"[Vault] Saved {sum(1 for v in row.values() if v)} encrypted fields for {user_id}")
