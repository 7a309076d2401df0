"""
Random sources accepted by key generation and encryption.

A source is either a callable taking a byte count (``secrets.token_bytes``,
``os.urandom``, ``random.Random(seed).randbytes``) or a binary file-like
object with ``read(n)``. The engine never seeds or keeps a source.
"""

import secrets
from typing import BinaryIO, Callable, Union

from securetally.errors import RandomnessError

RandomSource = Union[Callable[[int], bytes], BinaryIO]

# Each masked draw lands below the bound with probability > 1/2.
MAX_REJECTIONS = 128


def default_source() -> RandomSource:
    return secrets.token_bytes


def read_exact(source: RandomSource, n: int) -> bytes:
    """Read exactly n bytes from source, raising RandomnessError on a short read."""
    reader = getattr(source, "read", None)
    try:
        data = reader(n) if reader is not None else source(n)
    except Exception as exc:
        raise RandomnessError(f"random source failed: {exc!r}") from exc
    if data is None:
        data = b""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise RandomnessError(f"random source returned {type(data).__name__}, expected bytes")
    if len(data) != n:
        raise RandomnessError(f"random source exhausted: wanted {n} bytes, got {len(data)}")
    return bytes(data)


def random_bits(source: RandomSource, bits: int) -> int:
    """Uniform integer with at most `bits` bits."""
    if bits <= 0:
        return 0
    raw = int.from_bytes(read_exact(source, (bits + 7) // 8), "big")
    return raw & ((1 << bits) - 1)


def random_below(source: RandomSource, upper: int) -> int:
    """Uniform integer in [0, upper) by masked rejection sampling."""
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    if upper == 1:
        return 0
    bits = (upper - 1).bit_length()
    for _ in range(MAX_REJECTIONS):
        candidate = random_bits(source, bits)
        if candidate < upper:
            return candidate
    raise RandomnessError(f"no value below {upper} after {MAX_REJECTIONS} draws")
