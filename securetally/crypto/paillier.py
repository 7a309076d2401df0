import logging
import math
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, Tuple

from securetally.config import MIN_KEY_BITS, get_settings
from securetally.crypto.arith import l_function, lcm, mod_inverse, mod_pow
from securetally.crypto.encoding import (
    BytesLike,
    Ciphertext,
    Plaintext,
    ciphertext_int,
    plaintext_int,
)
from securetally.crypto.primes import random_prime
from securetally.crypto.randomness import RandomSource, default_source, random_below
from securetally.errors import (
    DecryptionError,
    EncodingError,
    EncryptionError,
    KeyGenerationError,
    NoInverseExists,
    RandomnessError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    n: int
    g: int

    @classmethod
    def from_modulus(cls, n: int) -> "PublicKey":
        return cls(n=n, g=n + 1)

    @cached_property
    def n_sq(self) -> int:
        return self.n * self.n

    @property
    def bit_length(self) -> int:
        return self.n.bit_length()


@dataclass(frozen=True)
class PrivateKey:
    public_key: PublicKey
    lam: int
    mu: int

    @property
    def n(self) -> int:
        return self.public_key.n

    @property
    def n_sq(self) -> int:
        return self.public_key.n_sq

    def __repr__(self) -> str:
        return f"PrivateKey(public_key={self.public_key!r}, lam=<hidden>, mu=<hidden>)"


def generate_key(random: Optional[RandomSource] = None, bits: Optional[int] = None) -> Tuple[PublicKey, PrivateKey]:
    """
    Generate a Paillier key pair with an n of `bits` bits.

    Each prime has bits // 2 bits. The pair (p, q) is redrawn when p == q or
    when gcd(n, (p-1)(q-1)) != 1, up to the configured number of attempts.
    """
    settings = get_settings()
    if random is None:
        random = default_source()
    if bits is None:
        bits = settings.key_bits
    if bits < MIN_KEY_BITS:
        raise KeyGenerationError(f"key size must be at least {MIN_KEY_BITS} bits, got {bits}")

    half = bits // 2
    for attempt in range(settings.keygen_attempts):
        p = random_prime(random, half, rounds=settings.miller_rabin_rounds, attempts=settings.prime_attempts)
        q = random_prime(random, half, rounds=settings.miller_rabin_rounds, attempts=settings.prime_attempts)
        if p == q:
            logger.debug("rejected prime pair on attempt %d: p == q", attempt + 1)
            continue
        n = p * q
        if math.gcd(n, (p - 1) * (q - 1)) != 1:
            logger.debug("rejected prime pair on attempt %d: gcd(n, phi) != 1", attempt + 1)
            continue

        lam = lcm(p - 1, q - 1)
        try:
            mu = mod_inverse(lam, n)
        except NoInverseExists as exc:
            raise KeyGenerationError("lambda is not invertible modulo n") from exc

        pub = PublicKey.from_modulus(n)
        logger.debug("generated %d-bit Paillier key", n.bit_length())
        return pub, PrivateKey(public_key=pub, lam=lam, mu=mu)

    raise KeyGenerationError(f"no usable prime pair found in {settings.keygen_attempts} attempts")


def _draw_nonce(pub: PublicKey, random: RandomSource) -> int:
    attempts = get_settings().nonce_attempts
    for _ in range(attempts):
        try:
            r = random_below(random, pub.n)
        except RandomnessError as exc:
            raise EncryptionError("random source failed while drawing the nonce") from exc
        if r >= 1 and math.gcd(r, pub.n) == 1:
            return r
        logger.debug("nonce rejected, redrawing")
    raise EncryptionError(f"no nonce coprime to n found in {attempts} attempts")


def encrypt(pub: PublicKey, plaintext, random: Optional[RandomSource] = None, *, r: Optional[int] = None) -> Ciphertext:
    """
    Encrypt `plaintext` (big-endian bytes or a non-negative int) under `pub`.

    c = g^m * r^n mod n^2, with r drawn uniformly from [1, n) and coprime to n
    unless given explicitly. Values m >= n alias to m mod n.
    """
    try:
        m = plaintext_int(plaintext)
    except EncodingError as exc:
        raise EncryptionError(str(exc)) from exc

    if r is None:
        r = _draw_nonce(pub, random if random is not None else default_source())
    elif not 1 <= r < pub.n or math.gcd(r, pub.n) != 1:
        raise EncryptionError("nonce must lie in [1, n) and be coprime to n")

    c1 = mod_pow(pub.g, m, pub.n_sq)
    c2 = mod_pow(r, pub.n, pub.n_sq)
    return Ciphertext.from_int((c1 * c2) % pub.n_sq)


def decrypt(priv: PrivateKey, ciphertext) -> Plaintext:
    """
    Recover m = L(c^lambda mod n^2) * mu mod n.

    The ciphertext is not checked for membership in (Z/n^2Z)*; a value that
    was not produced by `encrypt` decrypts to an unspecified plaintext.
    """
    try:
        c = ciphertext_int(ciphertext)
    except EncodingError as exc:
        raise DecryptionError(str(exc)) from exc

    u = mod_pow(c, priv.lam, priv.n_sq)
    m = (l_function(u, priv.n) * priv.mu) % priv.n
    return Plaintext.from_int(m)


def add_cipher(pub: PublicKey, c1: BytesLike, c2: BytesLike) -> Ciphertext:
    """Ciphertext of m1 + m2 mod n."""
    return Ciphertext.from_int((ciphertext_int(c1) * ciphertext_int(c2)) % pub.n_sq)


def add(pub: PublicKey, c: BytesLike, k) -> Ciphertext:
    """Ciphertext of m + k mod n."""
    return Ciphertext.from_int((ciphertext_int(c) * mod_pow(pub.g, plaintext_int(k), pub.n_sq)) % pub.n_sq)


def mul(pub: PublicKey, c: BytesLike, k) -> Ciphertext:
    """Ciphertext of m * k mod n."""
    return Ciphertext.from_int(mod_pow(ciphertext_int(c), plaintext_int(k), pub.n_sq))
