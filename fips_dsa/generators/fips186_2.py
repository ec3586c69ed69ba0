# File: fips_dsa/generators/fips186_2.py
"""
FIPS 186-2 (Appendix 2.2) generation of a 160-bit q and an L-bit p.

L must be in [512, 1024] and a multiple of 64; SHA-1 is the only digest.
"""
from __future__ import annotations

from typing import Iterator, Tuple

from .. import constants
from ..crypto.digests import get_digest
from ..crypto.primitives import hash_block, increment
from .base import PrimeSearch
from .generator_g import GeneratorMethod


def is_valid_dsa_strength(l_bits: int) -> bool:
    return (
        constants.LEGACY_MIN_L <= l_bits <= constants.LEGACY_MAX_L
        and l_bits % constants.LEGACY_L_STEP == 0
    )


class Fips186_2PrimeSearch(PrimeSearch):
    name = "fips186-2"

    def __init__(
        self,
        l_bits: int,
        certainty: int,
        generator_method: GeneratorMethod = GeneratorMethod.UNVERIFIABLE,
        generator_index: int = constants.DEFAULT_GENERATOR_INDEX,
    ):
        super().__init__(
            l_bits,
            constants.LEGACY_N,
            certainty,
            get_digest("sha1"),
            generator_method,
            generator_index,
        )
        self._block = self.algorithm.digest_size
        # full 160-bit blocks below the truncated top block
        self._n = (l_bits - 1) // constants.LEGACY_N

    @property
    def seed_length(self) -> int:
        return constants.LEGACY_SEED_LEN

    def derive_q(self, seed: bytes) -> int:
        part1 = hash_block(self.algorithm, seed)
        seed_plus_one = bytearray(seed)
        increment(seed_plus_one)
        part2 = hash_block(self.algorithm, seed_plus_one)

        u = bytearray(a ^ b for a, b in zip(part1, part2))
        u[0] |= 0x80
        u[-1] |= 0x01
        return int.from_bytes(u, "big")

    def iter_candidates(self, seed: bytes, q: int) -> Iterator[Tuple[int, int]]:
        block = self._block
        n = self._n
        w = bytearray(self.l_bits // 8)
        head = len(w) - n * block
        two_q = q << 1

        offset = bytearray(seed)
        increment(offset)

        for counter in range(constants.LEGACY_COUNTER_LIMIT):
            for k in range(n):
                increment(offset)
                end = len(w) - k * block
                w[end - block:end] = hash_block(self.algorithm, offset)

            # top block keeps only the low-order bytes of its digest
            increment(offset)
            w[:head] = hash_block(self.algorithm, offset)[block - head:]

            w[0] |= 0x80
            x = int.from_bytes(w, "big")
            c = x % two_q
            yield counter, x - (c - 1)
