import os
from dotenv import load_dotenv

from password_hash.models import DerivationParams

load_dotenv()

PBKDF2_HASH = os.getenv("PBKDF2_HASH", "sha256")
PBKDF2_ROUNDS = int(os.getenv("PBKDF2_ROUNDS", "1000"))
PBKDF2_KEY_LENGTH = int(os.getenv("PBKDF2_KEY_LENGTH", "32"))


def default_params() -> DerivationParams:
    return DerivationParams(
        algorithm=PBKDF2_HASH,
        rounds=PBKDF2_ROUNDS,
        key_length=PBKDF2_KEY_LENGTH,
    )
