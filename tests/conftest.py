# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y recargar módulos.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

_ENV_VARS = ("PBKDF2_HASH", "PBKDF2_ROUNDS", "PBKDF2_KEY_LENGTH")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Elimina las variables PBKDF2_* y recarga password_hash.config en cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    import password_hash.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def engine():
    """Motor PBKDF2 por defecto (HMAC-SHA256).

    Returns:
        PBKDF2: Instancia compartible entre pruebas.
    """
    from password_hash.pbkdf2 import PBKDF2

    return PBKDF2()
