# File: fips_dsa/generators/fips186_3.py
"""
FIPS 186-3 A.1.1.2: generation of probable primes p and q using an approved
hash function.

The seed is N bits long (seedlen = N), so N must be a multiple of 8, and the
digest output length must be at least N.
"""
from __future__ import annotations

from typing import Iterator, Tuple

from cryptography.hazmat.primitives import hashes

from .. import constants
from ..crypto.digests import digest_bits
from ..crypto.primitives import hash_block, increment
from .base import PrimeSearch
from .generator_g import GeneratorMethod


class Fips186_3PrimeSearch(PrimeSearch):
    name = "fips186-3"

    def __init__(
        self,
        l_bits: int,
        n_bits: int,
        certainty: int,
        algorithm: hashes.HashAlgorithm,
        generator_method: GeneratorMethod = GeneratorMethod.UNVERIFIABLE,
        generator_index: int = constants.DEFAULT_GENERATOR_INDEX,
    ):
        super().__init__(l_bits, n_bits, certainty, algorithm, generator_method, generator_index)
        self.outlen = digest_bits(algorithm)
        # n = ceiling(L / outlen) - 1, b = L - 1 - n * outlen
        self._n = (l_bits - 1) // self.outlen
        self._b = (l_bits - 1) % self.outlen

    @property
    def seed_length(self) -> int:
        return self.n_bits // 8

    def derive_q(self, seed: bytes) -> int:
        top = 1 << (self.n_bits - 1)
        u = int.from_bytes(hash_block(self.algorithm, seed), "big") % top
        return top + u + 1 - (u % 2)

    def iter_candidates(self, seed: bytes, q: int) -> Iterator[Tuple[int, int]]:
        n = self._n
        outlen = self.outlen
        low_mask = (1 << self._b) - 1
        top = 1 << (self.l_bits - 1)
        two_q = q << 1

        offset = bytearray(seed)

        for counter in range(4 * self.l_bits):
            # offset advances n + 1 times per counter
            w = 0
            for j in range(n + 1):
                increment(offset)
                v = int.from_bytes(hash_block(self.algorithm, offset), "big")
                if j == n:
                    v &= low_mask
                w += v << (j * outlen)

            x = w + top
            c = x % two_q
            yield counter, x - (c - 1)
