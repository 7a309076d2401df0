"""Paillier additively homomorphic encryption and encrypted vote tallying."""

from securetally.crypto import (
    Ciphertext,
    Plaintext,
    PrivateKey,
    PublicKey,
    add,
    add_cipher,
    decrypt,
    encrypt,
    generate_key,
    mul,
)
from securetally.errors import (
    DecryptionError,
    EncodingError,
    EncryptionError,
    KeyGenerationError,
    NoInverseExists,
    PaillierError,
    RandomnessError,
)

__version__ = "0.1.0"

__all__ = [
    "Ciphertext",
    "DecryptionError",
    "EncodingError",
    "EncryptionError",
    "KeyGenerationError",
    "NoInverseExists",
    "PaillierError",
    "Plaintext",
    "PrivateKey",
    "PublicKey",
    "RandomnessError",
    "add",
    "add_cipher",
    "decrypt",
    "encrypt",
    "generate_key",
    "mul",
]
