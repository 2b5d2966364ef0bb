"""
Secure Vault field encryption.

AES-256-GCM with a key derived from the user id (PBKDF2-HMAC-SHA256,
100k iterations, fixed salt). Ciphertexts are base64(iv || ciphertext+tag),
the same layout the browser's WebCrypto helper writes, so rows encrypted
by either side decrypt on the other.
"""

import base64
import binascii
import os
from functools import lru_cache
from typing import Dict, Mapping

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from loguru import logger


SALT = b"travexa-vault-salt"
ITERATIONS = 100_000
KEY_LENGTH = 32  # AES-256
IV_LENGTH = 12


class VaultError(Exception):
    """Raised when a value cannot be encrypted"""


@lru_cache(maxsize=256)
def derive_key(user_id: str) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=SALT,
        iterations=ITERATIONS,
    )
    return kdf.derive(user_id.encode("utf-8"))


def encrypt_value(value: str, user_id: str) -> str:
    """Encrypt one field; empty input stays empty"""
    if not value:
        return ""

    try:
        iv = os.urandom(IV_LENGTH)
        ciphertext = AESGCM(derive_key(user_id)).encrypt(iv, value.encode("utf-8"), None)
    except (ValueError, TypeError) as e:
        logger.error(f"Encryption error: {e}")
        raise VaultError("Failed to encrypt data") from e

    return base64.b64encode(iv + ciphertext).decode("ascii")


def decrypt_value(encrypted_value: str, user_id: str) -> str:
    """
    Decrypt one field.

    Returns "" when the value is empty or cannot be decrypted; rows written
    before the vault existed hold plaintext and land here.
    """
    if not encrypted_value:
        return ""

    try:
        combined = base64.b64decode(encrypted_value, validate=True)
        iv, ciphertext = combined[:IV_LENGTH], combined[IV_LENGTH:]
        plaintext = AESGCM(derive_key(user_id)).decrypt(iv, ciphertext, None)
        return plaintext.decode("utf-8")
    except (binascii.Error, InvalidTag, ValueError) as e:
        logger.warning(f"Decryption error: {type(e).__name__}")
        return ""


def encrypt_object(fields: Mapping[str, str], user_id: str) -> Dict[str, str]:
    return {key: encrypt_value(value, user_id) if value else "" for key, value in fields.items()}


def decrypt_object(fields: Mapping[str, str], user_id: str) -> Dict[str, str]:
    return {key: decrypt_value(value, user_id) if value else "" for key, value in fields.items()}
