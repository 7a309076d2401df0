import logging
from typing import Optional

from securetally.crypto.randomness import RandomSource, default_source, random_below, random_bits
from securetally.errors import KeyGenerationError, RandomnessError

logger = logging.getLogger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97)


def _split_even_part(n: int) -> tuple[int, int]:
    """Write n - 1 as d * 2^s with d odd."""
    d = n - 1
    s = (d & -d).bit_length() - 1
    return d >> s, s


def _is_composite_witness(a: int, d: int, s: int, n: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_probable_prime(n: int, rounds: int = 20, witnesses: Optional[RandomSource] = None) -> bool:
    """
    Trial division by small primes, then Miller-Rabin.

    `rounds` witnesses are drawn uniformly from [2, n - 2] using the
    `witnesses` source (``secrets.token_bytes`` when omitted). A composite
    survives with probability at most 4^-rounds.
    """
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p

    if witnesses is None:
        witnesses = default_source()
    d, s = _split_even_part(n)
    return not any(_is_composite_witness(random_below(witnesses, n - 3) + 2, d, s, n) for _ in range(rounds))


def random_prime(
    source: RandomSource,
    bits: int,
    *,
    rounds: int = 20,
    attempts: int = 100_000,
    witnesses: Optional[RandomSource] = None,
) -> int:
    """
    Draw a probable prime of exactly `bits` bits from `source`.

    The two top bits are forced so that the product of two such primes has
    exactly 2*bits bits, and the low bit is forced to keep candidates odd.
    Miller-Rabin witnesses come from `witnesses`, kept apart from `source`
    so that a seeded source yields the same prime on every run.
    """
    if bits < 2:
        raise KeyGenerationError(f"prime size must be at least 2 bits, got {bits}")

    top = (1 << (bits - 1)) | (1 << (bits - 2))
    for attempt in range(attempts):
        try:
            candidate = random_bits(source, bits) | top | 1
            found = is_probable_prime(candidate, rounds, witnesses)
        except RandomnessError as exc:
            raise KeyGenerationError("random source failed during prime search") from exc
        if found:
            logger.debug("found %d-bit prime after %d candidate(s)", bits, attempt + 1)
            return candidate
    raise KeyGenerationError(f"no {bits}-bit prime found in {attempts} attempts")
