# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos para describir una derivación PBKDF2.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan los parámetros de derivación de claves."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from password_hash.keyed_hash import DEFAULT_HASH, canonical_hash_name
from password_hash.pbkdf2 import PBKDF2


class DerivationParams(BaseModel):
    """Parámetros de coste y salida de una derivación PBKDF2.

    Attributes:
        algorithm (str): Nombre del digest usado por el HMAC.
        rounds (int): Iteraciones HMAC por bloque.
        key_length (int): Longitud en bytes de la clave derivada.

    """

    model_config = ConfigDict(frozen=True)

    algorithm: str = DEFAULT_HASH
    rounds: int = Field(default=1000, ge=1)
    key_length: int = Field(default=32, ge=0)

    @field_validator("algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        # UnsupportedHashError es un ValueError: pydantic lo convierte en ValidationError.
        return canonical_hash_name(value)

    def build_engine(self) -> PBKDF2:
        """Construye el motor PBKDF2 configurado con `algorithm`."""

        return PBKDF2(self.algorithm)
