"""
Runtime configuration for the Paillier engine.
Values come from the environment and are validated by pydantic.
"""

import os

from pydantic import BaseModel, Field


# ── Defaults ───────────────────────────────────────
DEFAULT_KEY_BITS = 2048
# Below 10 bits each half-size prime has a single candidate, so p == q always.
MIN_KEY_BITS = 10
DEFAULT_MR_ROUNDS = 20
DEFAULT_PRIME_ATTEMPTS = 100_000
DEFAULT_KEYGEN_ATTEMPTS = 16
DEFAULT_NONCE_ATTEMPTS = 64


class PaillierSettings(BaseModel):
    key_bits: int = Field(default=DEFAULT_KEY_BITS, ge=MIN_KEY_BITS)
    miller_rabin_rounds: int = Field(default=DEFAULT_MR_ROUNDS, ge=1, le=256)
    prime_attempts: int = Field(default=DEFAULT_PRIME_ATTEMPTS, ge=1)
    keygen_attempts: int = Field(default=DEFAULT_KEYGEN_ATTEMPTS, ge=1)
    nonce_attempts: int = Field(default=DEFAULT_NONCE_ATTEMPTS, ge=1)


def get_settings() -> PaillierSettings:
    """
    Build settings from the environment.
    Re-read on every call so tests and callers can change variables at runtime.
    """
    return PaillierSettings(
        key_bits=os.getenv("PAILLIER_KEY_BITS", str(DEFAULT_KEY_BITS)),
        miller_rabin_rounds=os.getenv("PAILLIER_MR_ROUNDS", str(DEFAULT_MR_ROUNDS)),
        prime_attempts=os.getenv("PAILLIER_PRIME_ATTEMPTS", str(DEFAULT_PRIME_ATTEMPTS)),
        keygen_attempts=os.getenv("PAILLIER_KEYGEN_ATTEMPTS", str(DEFAULT_KEYGEN_ATTEMPTS)),
        nonce_attempts=os.getenv("PAILLIER_NONCE_ATTEMPTS", str(DEFAULT_NONCE_ATTEMPTS)),
    )
