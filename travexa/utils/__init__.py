# utils/__init__.py
from .vault_crypto import VaultError, decrypt_object, decrypt_value, encrypt_object, encrypt_value

__all__ = [
    "VaultError",
    "encrypt_value",
    "decrypt_value",
    "encrypt_object",
    "decrypt_object",
]
