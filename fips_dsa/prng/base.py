# File: fips_dsa/prng/base.py
"""
Random byte generator interface.

Every generator is also a plain random source: ``gen(nbytes) -> bytes``,
so it can be handed straight to ParameterGenerator.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from ..errors import InvalidParameterError

SeedMaterial = Union[bytes, bytearray, int]


def seed_to_bytes(seed: SeedMaterial) -> bytes:
    """Integers are taken as signed 64-bit values, big-endian."""
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    if isinstance(seed, int) and not isinstance(seed, bool):
        try:
            return seed.to_bytes(8, "big", signed=True)
        except OverflowError:
            raise InvalidParameterError("integer seed must fit in a signed 64-bit value") from None
    raise InvalidParameterError("seed must be bytes or int")


def check_region(buf: bytearray, start: int, length: Optional[int]) -> int:
    """Validate a buffer region and return its length."""
    if length is None:
        length = len(buf) - start
    if start < 0 or length < 0 or start + length > len(buf):
        raise InvalidParameterError("region lies outside the buffer")
    return length


class RandomGenerator(ABC):

    @abstractmethod
    def add_seed_material(self, seed: SeedMaterial) -> None:
        """Mix ``seed`` into the generator state."""

    @abstractmethod
    def next_bytes(self, buf: bytearray, start: int = 0, length: Optional[int] = None) -> None:
        """Fill ``buf[start:start + length]`` (the whole buffer by default)."""

    def __call__(self, nbytes: int) -> bytes:
        buf = bytearray(nbytes)
        self.next_bytes(buf)
        return bytes(buf)
