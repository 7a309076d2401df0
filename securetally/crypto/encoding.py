"""
Integer <-> byte boundary.

Every integer crosses the API as unsigned big-endian bytes with no fixed
width. Output is minimal length (``0`` encodes as a single zero byte);
input may carry leading zeros, and the empty sequence decodes to 0.

``Plaintext`` and ``Ciphertext`` are tagged ``bytes`` so that a decrypted
value cannot be fed back into ``decrypt`` by mistake. Plain ``bytes`` stay
accepted everywhere.
"""

from typing import Union

from securetally.errors import EncodingError

BytesLike = Union[bytes, bytearray, memoryview]


def int_to_bytes(value: int) -> bytes:
    if value < 0:
        raise EncodingError("cannot encode a negative integer")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


def bytes_to_int(data) -> int:
    if isinstance(data, bool):
        raise EncodingError("expected bytes or a non-negative int, got bool")
    if isinstance(data, int):
        if data < 0:
            raise EncodingError("cannot decode a negative integer")
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return int.from_bytes(data, "big")
    raise EncodingError(f"expected bytes or a non-negative int, got {type(data).__name__}")


class _TaggedInteger(bytes):
    @classmethod
    def from_int(cls, value: int):
        return cls(int_to_bytes(value))

    def to_int(self) -> int:
        return int.from_bytes(self, "big")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self)!r})"


class Plaintext(_TaggedInteger):
    pass


class Ciphertext(_TaggedInteger):
    pass


def plaintext_int(data) -> int:
    if isinstance(data, Ciphertext):
        raise EncodingError("expected a plaintext, got a Ciphertext")
    return bytes_to_int(data)


def ciphertext_int(data) -> int:
    if isinstance(data, Plaintext):
        raise EncodingError("expected a ciphertext, got a Plaintext")
    return bytes_to_int(data)
