from securetally.crypto.encoding import Ciphertext, Plaintext
from securetally.crypto.paillier import (
    PrivateKey,
    PublicKey,
    add,
    add_cipher,
    decrypt,
    encrypt,
    generate_key,
    mul,
)

__all__ = [
    "Ciphertext",
    "Plaintext",
    "PrivateKey",
    "PublicKey",
    "add",
    "add_cipher",
    "decrypt",
    "encrypt",
    "generate_key",
    "mul",
]
