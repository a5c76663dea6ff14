# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del motor de derivación PBKDF2.
# --------------------------------------------------------------
"""Inicializa el paquete `password_hash` y expone su API principal."""

from password_hash.keyed_hash import KeyedHash, UnsupportedHashError, resolve_hash_algorithm
from password_hash.pbkdf2 import (
    PBKDF2,
    InvalidKeyLengthError,
    InvalidRoundsError,
    KeyTooLongError,
    PBKDF2Error,
    derive_key,
    derive_key_base64,
)

__all__ = [
    "InvalidKeyLengthError",
    "InvalidRoundsError",
    "KeyTooLongError",
    "KeyedHash",
    "PBKDF2",
    "PBKDF2Error",
    "UnsupportedHashError",
    "derive_key",
    "derive_key_base64",
    "resolve_hash_algorithm",
]
