# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas del modelo de parámetros y de la configuración por entorno.
# --------------------------------------------------------------

import importlib

import pytest
from pydantic import ValidationError

from password_hash.keyed_hash import supported_hashes
from password_hash.models import DerivationParams
from password_hash.pbkdf2 import PBKDF2


def test_params_defaults():
    params = DerivationParams()
    assert params.algorithm == "sha256"
    assert params.rounds == 1000
    assert params.key_length == 32


def test_params_build_engine():
    """Comprueba que el modelo construya un motor con el algoritmo pedido.

    Returns:
        None: El motor resultante respeta el tamaño de bloque del digest.
    """
    params = DerivationParams(algorithm="SHA-512", rounds=5, key_length=10)
    engine = params.build_engine()
    assert isinstance(engine, PBKDF2)
    assert params.algorithm == "sha512"
    assert engine.block_size == 64


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rounds": 0},
        {"rounds": -5},
        {"key_length": -1},
        {"algorithm": "md4"},
    ],
)
def test_params_reject_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        DerivationParams(**kwargs)


def test_params_are_frozen():
    params = DerivationParams()
    with pytest.raises(ValidationError):
        params.rounds = 1


def test_config_defaults():
    """Sin variables de entorno se usan los valores por defecto.

    Returns:
        None: Las aserciones revisan los parámetros construidos.
    """
    from password_hash import config

    params = config.default_params()
    assert params == DerivationParams(algorithm="sha256", rounds=1000, key_length=32)


def test_config_reads_environment(monkeypatch):
    """Comprueba que PBKDF2_* del entorno ajusten los parámetros por defecto.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para fijar variables de entorno.

    Returns:
        None: Los parámetros reflejan el entorno tras recargar el módulo.
    """
    monkeypatch.setenv("PBKDF2_HASH", "sha1")
    monkeypatch.setenv("PBKDF2_ROUNDS", "4096")
    monkeypatch.setenv("PBKDF2_KEY_LENGTH", "20")

    import password_hash.config as config

    config = importlib.reload(config)
    params = config.default_params()
    assert (params.algorithm, params.rounds, params.key_length) == ("sha1", 4096, 20)
    assert params.build_engine().block_size == 20


@pytest.mark.parametrize("name", supported_hashes())
def test_params_algorithm_uses_registered_name(name):
    """El nombre normalizado debe figurar en `supported_hashes()` para la interfaz.

    Args:
        name (str): Nombre registrado del algoritmo.

    Returns:
        None: Cualquier grafía admitida se normaliza al nombre del registro.
    """
    assert DerivationParams(algorithm=name).algorithm == name
    assert DerivationParams(algorithm=name.upper().replace("_", "-")).algorithm == name


def test_config_keeps_configured_sha3(monkeypatch):
    monkeypatch.setenv("PBKDF2_HASH", "SHA3-256")

    import password_hash.config as config

    config = importlib.reload(config)
    params = config.default_params()
    assert params.algorithm in supported_hashes()
    assert params.algorithm == "sha3_256"
    assert params.build_engine().algorithm.name == "sha3-256"
