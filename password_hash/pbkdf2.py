# --------------------------------------------------------------
# File: pbkdf2.py
# Description: Derivación de claves PBKDF2 sobre HMAC con digest configurable.
# --------------------------------------------------------------
"""Motor PBKDF2 (RFC 8018) para estirar passwords en claves de longitud fija."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Union

from cryptography.hazmat.primitives import constant_time, hashes

from password_hash.keyed_hash import HashLike, KeyedHash, resolve_hash_algorithm

__all__ = [
    "InvalidKeyLengthError",
    "InvalidRoundsError",
    "KeyTooLongError",
    "PBKDF2",
    "PBKDF2Error",
    "derive_key",
    "derive_key_base64",
]

logger = logging.getLogger(__name__)

BytesOrText = Union[str, bytes, bytearray, memoryview]

# El índice de bloque se codifica como entero de 32 bits sin signo.
MAX_BLOCKS = 2**32 - 1


class PBKDF2Error(ValueError):
    """Error de parámetros de entrada en una derivación PBKDF2."""


class KeyTooLongError(PBKDF2Error):
    """La longitud pedida supera (2^32 - 1) * longitud del digest."""


class InvalidRoundsError(PBKDF2Error):
    """El número de rondas no es un entero >= 1."""


class InvalidKeyLengthError(PBKDF2Error):
    """La longitud de clave no es un entero >= 0."""


def _to_bytes(value: BytesOrText, field: str) -> bytes:
    """Normaliza texto (UTF-8) o datos binarios a `bytes`."""

    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{field} debe ser str o bytes, no {type(value).__name__}")


def _pack_block_index(index: int) -> bytes:
    """Codifica el índice de bloque en 4 bytes big-endian (INT_32_BE)."""

    return bytes(
        (
            (index >> 24) & 0xFF,
            (index >> 16) & 0xFF,
            (index >> 8) & 0xFF,
            index & 0xFF,
        )
    )


def _xor_block(keyed_hash: KeyedHash, block_input: bytes, rounds: int) -> bytes:
    """Calcula F(P, S, c, i) = U1 ^ U2 ^ ... ^ Uc para un bloque."""

    last_digest = keyed_hash.compute(block_input)
    accumulator = bytearray(last_digest)

    # Con rounds == 1 el bucle no se ejecuta y el bloque es U1.
    for _ in range(1, rounds):
        ctx = keyed_hash.start()
        ctx.update(last_digest)
        last_digest = ctx.finalize()
        for i, value in enumerate(last_digest):
            accumulator[i] ^= value

    return bytes(accumulator)


class PBKDF2:
    """Deriva una clave a partir de password, salt y función hash.

    La configuración (algoritmo y tamaño de bloque) se fija al construir la
    instancia y no puede modificarse después; una misma instancia puede
    compartirse entre hilos sin sincronización.

    Args:
        algorithm (HashLike): Digest del HMAC. Por defecto SHA-256.

    """

    __slots__ = ("_algorithm", "_block_size")

    def __init__(self, algorithm: HashLike = None) -> None:
        resolved = resolve_hash_algorithm(algorithm)
        object.__setattr__(self, "_algorithm", resolved)
        object.__setattr__(self, "_block_size", resolved.digest_size)

    def __setattr__(self, name, value):
        raise AttributeError("PBKDF2 es inmutable; crea una instancia nueva con otro algoritmo.")

    def __delattr__(self, name):
        raise AttributeError("PBKDF2 es inmutable.")

    def __repr__(self) -> str:
        return f"PBKDF2(algorithm={self._algorithm.name!r})"

    @property
    def algorithm(self) -> hashes.HashAlgorithm:
        return self._algorithm

    @property
    def block_size(self) -> int:
        """Longitud en bytes de la salida del digest (no su bloque interno)."""

        return self._block_size

    @property
    def max_key_length(self) -> int:
        return MAX_BLOCKS * self._block_size

    def validate(self, rounds: int, key_length: int) -> None:
        """Comprueba los parámetros numéricos antes de cualquier cálculo.

        Raises:
            InvalidRoundsError: Si `rounds` no es un entero >= 1.
            InvalidKeyLengthError: Si `key_length` no es un entero >= 0.
            KeyTooLongError: Si `key_length` supera `max_key_length`.

        """

        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
            raise InvalidRoundsError(f"El número de rondas debe ser un entero >= 1 (recibido {rounds!r})")
        if isinstance(key_length, bool) or not isinstance(key_length, int) or key_length < 0:
            raise InvalidKeyLengthError(
                f"La longitud de clave debe ser un entero >= 0 (recibido {key_length!r})"
            )
        if key_length > self.max_key_length:
            raise KeyTooLongError(f"Derived key too long: máximo {self.max_key_length} bytes")

    def generate_key(
        self, password: BytesOrText, salt: BytesOrText, rounds: int, key_length: int
    ) -> bytes:
        """Deriva una clave de exactamente `key_length` bytes.

        Args:
            password (BytesOrText): Secreto; el texto se codifica en UTF-8.
            salt (BytesOrText): Salt del llamante; el texto se codifica en UTF-8.
            rounds (int): Iteraciones HMAC por bloque (>= 1).
            key_length (int): Longitud en bytes de la clave derivada.

        Returns:
            bytes: Clave derivada.

        Raises:
            PBKDF2Error: Si los parámetros no son válidos (ver `validate`).

        """

        self.validate(rounds, key_length)

        number_of_blocks = -(-key_length // self._block_size)
        logger.debug(
            "PBKDF2-HMAC-%s: rounds=%d key_length=%d blocks=%d",
            self._algorithm.name,
            rounds,
            key_length,
            number_of_blocks,
        )

        keyed_hash = KeyedHash(_to_bytes(password, "password"), self._algorithm)
        salt_bytes = _to_bytes(salt, "salt")
        key = bytearray()

        for block_number in range(1, number_of_blocks + 1):
            block = _xor_block(keyed_hash, salt_bytes + _pack_block_index(block_number), rounds)
            # Solo el último bloque puede truncarse, conservando sus primeros bytes.
            key += block[: key_length - len(key)]

        return bytes(key)

    def generate_base64_key(
        self, password: BytesOrText, salt: BytesOrText, rounds: int, key_length: int
    ) -> str:
        """Igual que `generate_key`, codificando el resultado en Base64 estándar."""

        key = self.generate_key(password, salt, rounds, key_length)
        return base64.b64encode(key).decode("ascii")

    def verify_key(
        self,
        password: BytesOrText,
        salt: BytesOrText,
        rounds: int,
        expected: Union[str, bytes],
    ) -> bool:
        """Recalcula la clave y la compara en tiempo constante con `expected`.

        Args:
            password (BytesOrText): Password candidata.
            salt (BytesOrText): Salt usada en la derivación original.
            rounds (int): Rondas usadas en la derivación original.
            expected (Union[str, bytes]): Clave esperada en bruto o en Base64.

        Returns:
            bool: True si la clave derivada coincide.

        Raises:
            InvalidRoundsError: Si `rounds` no es un entero >= 1.
            TypeError: Si `expected` no es texto ni bytes.

        """

        self.validate(rounds, 0)
        if isinstance(expected, str):
            try:
                expected = base64.b64decode(expected, validate=True)
            except (binascii.Error, ValueError):
                # Texto no ASCII lanza ValueError en lugar de binascii.Error.
                logger.debug("PBKDF2 verify: clave esperada con Base64 inválido")
                return False
        expected = _to_bytes(expected, "expected")
        if not expected:
            return False

        derived = self.generate_key(password, salt, rounds, len(expected))
        return constant_time.bytes_eq(derived, expected)


def derive_key(
    password: BytesOrText,
    salt: BytesOrText,
    rounds: int,
    key_length: int,
    *,
    algorithm: HashLike = None,
) -> bytes:
    """Atajo de `PBKDF2(algorithm).generate_key(...)`."""

    return PBKDF2(algorithm).generate_key(password, salt, rounds, key_length)


def derive_key_base64(
    password: BytesOrText,
    salt: BytesOrText,
    rounds: int,
    key_length: int,
    *,
    algorithm: HashLike = None,
) -> str:
    return PBKDF2(algorithm).generate_base64_key(password, salt, rounds, key_length)
