# --------------------------------------------------------------
# File: keyed_hash.py
# Description: Envoltorio HMAC (one-shot e incremental) sobre `cryptography`.
# --------------------------------------------------------------
"""Selección de algoritmos de digest y cálculo HMAC reutilizando la clave."""

from __future__ import annotations

from typing import Dict, List, Type, Union

from cryptography.hazmat.primitives import hashes, hmac

__all__ = [
    "DEFAULT_HASH",
    "HashLike",
    "KeyedHash",
    "UnsupportedHashError",
    "canonical_hash_name",
    "hmac_digest",
    "resolve_hash_algorithm",
    "supported_hashes",
]

HashLike = Union[str, hashes.HashAlgorithm, Type[hashes.HashAlgorithm], None]

# Algoritmos admitidos por nombre (salida de longitud fija).
_ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512_224": hashes.SHA512_224,
    "sha512_256": hashes.SHA512_256,
    "sha3_224": hashes.SHA3_224,
    "sha3_256": hashes.SHA3_256,
    "sha3_384": hashes.SHA3_384,
    "sha3_512": hashes.SHA3_512,
}

DEFAULT_HASH = "sha256"


def _compact(name: str) -> str:
    # "SHA3-256", "sha3_256" y "sha3256" comparten la misma clave.
    return "".join(char for char in name.lower() if char.isalnum())


_ALGORITHMS_COMPACT = {_compact(name): cls for name, cls in _ALGORITHMS.items()}
_CANONICAL_NAMES = {_compact(name): name for name in _ALGORITHMS}


class UnsupportedHashError(ValueError):
    """El nombre de algoritmo no corresponde a ningún digest admitido."""


def supported_hashes() -> List[str]:
    """Devuelve los nombres de algoritmo aceptados por `resolve_hash_algorithm`."""

    return sorted(_ALGORITHMS)


def canonical_hash_name(algorithm: str) -> str:
    """Devuelve el nombre registrado (``"sha3_256"``...) para cualquier grafía admitida.

    Raises:
        UnsupportedHashError: Si el nombre no está registrado.

    """

    try:
        return _CANONICAL_NAMES[_compact(algorithm)]
    except KeyError:
        raise UnsupportedHashError(f"Algoritmo de hash no soportado: {algorithm!r}") from None


def resolve_hash_algorithm(algorithm: HashLike = None) -> hashes.HashAlgorithm:
    """Convierte nombre, clase o instancia en un `HashAlgorithm` utilizable.

    Args:
        algorithm (HashLike): Nombre (``"sha256"``, ``"SHA-512"``...), clase o
            instancia de `cryptography.hazmat.primitives.hashes.HashAlgorithm`.
            ``None`` selecciona SHA-256.

    Returns:
        hashes.HashAlgorithm: Instancia lista para construir un HMAC.

    Raises:
        UnsupportedHashError: Si el nombre no está registrado o el tipo no es válido.

    """

    if algorithm is None:
        algorithm = DEFAULT_HASH
    if isinstance(algorithm, hashes.HashAlgorithm):
        return algorithm
    if isinstance(algorithm, type) and issubclass(algorithm, hashes.HashAlgorithm):
        return algorithm()
    if isinstance(algorithm, str):
        try:
            return _ALGORITHMS_COMPACT[_compact(algorithm)]()
        except KeyError:
            raise UnsupportedHashError(f"Algoritmo de hash no soportado: {algorithm!r}") from None
    raise UnsupportedHashError(f"Tipo de algoritmo no válido: {type(algorithm).__name__}")


def hmac_digest(key: bytes, message: bytes, algorithm: HashLike = None) -> bytes:
    """Calcula HMAC(key, message) en una sola llamada."""

    ctx = hmac.HMAC(key, resolve_hash_algorithm(algorithm))
    ctx.update(message)
    return ctx.finalize()


class KeyedHash:
    """HMAC con la clave fijada una sola vez y cálculos incrementales.

    El contexto plantilla nunca se finaliza: `start()` devuelve una copia con
    el estado interno de la clave ya preparado, de modo que cada ronda solo
    procesa el mensaje.

    Attributes:
        algorithm (hashes.HashAlgorithm): Digest subyacente.
        digest_size (int): Longitud en bytes de cada salida HMAC.

    """

    __slots__ = ("algorithm", "digest_size", "_template")

    def __init__(self, key: bytes, algorithm: HashLike = None) -> None:
        self.algorithm = resolve_hash_algorithm(algorithm)
        self.digest_size = self.algorithm.digest_size
        self._template = hmac.HMAC(key, self.algorithm)

    def start(self) -> hmac.HMAC:
        """Abre un cálculo incremental; admite `update(chunk)` y `finalize()`."""

        return self._template.copy()

    def compute(self, message: bytes) -> bytes:
        """Calcula el HMAC completo de `message` con la clave configurada."""

        ctx = self.start()
        ctx.update(message)
        return ctx.finalize()
