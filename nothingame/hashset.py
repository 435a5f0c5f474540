"""Fixed-bucket hash set keyed by the raw bytes of its elements."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from typing import Union

Element = Union[bytes, bytearray, int, tuple]

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK = (1 << 64) - 1


def fnv1(data: bytes) -> int:
    """64-bit FNV-1 hash, treating each byte as a signed char."""
    hash_value = _FNV_OFFSET
    for byte in data:
        hash_value = (hash_value * _FNV_PRIME) & _MASK
        signed = byte if byte < 0x80 else (byte - 0x100) & _MASK
        hash_value ^= signed
    return hash_value


def _encode(element: Element) -> bytes:
    """Turn an element into the bytes that are hashed and compared."""
    if isinstance(element, (bytes, bytearray, memoryview)):
        return bytes(element)
    try:
        if isinstance(element, bool):
            raise TypeError
        if isinstance(element, int):
            return struct.pack("<Q", element)
        if isinstance(element, tuple) and all(
            isinstance(item, int) and not isinstance(item, bool) for item in element
        ):
            return struct.pack(f"<{len(element)}Q", *element)
    except struct.error as error:
        raise ValueError(f"element out of range: {element!r}") from error
    raise TypeError(f"unsupported hash set element: {element!r}")


class HashSet:
    """A set with a fixed number of buckets.

    Elements are bytes, unsigned integers or tuples of unsigned integers.
    Iteration walks the buckets in order, and each bucket in insertion order.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("a hash set needs at least one bucket")
        self._buckets: list[list[tuple[bytes, Element]]] = [[] for _ in range(n)]
        self._count = 0

    def _bucket(self, key: bytes) -> list[tuple[bytes, Element]]:
        return self._buckets[fnv1(key) % len(self._buckets)]

    def add(self, element: Element) -> None:
        key = _encode(element)
        bucket = self._bucket(key)
        if all(existing != key for existing, _ in bucket):
            bucket.append((key, element))
            self._count += 1

    def __contains__(self, element: object) -> bool:
        key = _encode(element)  # type: ignore[arg-type]
        return any(existing == key for existing, _ in self._bucket(key))

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Element]:
        for bucket in self._buckets:
            for _, element in bucket:
                yield element