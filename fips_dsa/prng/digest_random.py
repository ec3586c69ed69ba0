# File: fips_dsa/prng/digest_random.py
"""
Deterministic hash-counter random generator.

state   = Hash(state || seed)            on every add_seed_material
block_i = Hash(state || counter_i)       counter is a 64-bit big-endian value

Output is the concatenation of the blocks. Bytes left over from a block are
served by the next request, so the stream does not depend on how it is split
into calls; adding seed material drops them.

Identical seed material yields identical output, which makes runs of the
parameter searches reproducible. Not a substitute for a vetted DRBG.
"""
from __future__ import annotations

import threading
from typing import Optional

from cryptography.hazmat.primitives import hashes

from ..crypto.primitives import hash_block
from .base import RandomGenerator, SeedMaterial, check_region, seed_to_bytes


class DigestRandomGenerator(RandomGenerator):

    def __init__(self, seed: Optional[SeedMaterial] = None, algorithm: Optional[hashes.HashAlgorithm] = None):
        self._algorithm = algorithm or hashes.SHA256()
        self._state = bytes(self._algorithm.digest_size)
        self._counter = 0
        self._pending = b""
        self._lock = threading.Lock()
        if seed is not None:
            self.add_seed_material(seed)

    def add_seed_material(self, seed: SeedMaterial) -> None:
        material = seed_to_bytes(seed)
        with self._lock:
            self._state = hash_block(self._algorithm, self._state + material)
            self._pending = b""

    def _next_block(self) -> bytes:
        self._counter += 1
        return hash_block(self._algorithm, self._state + self._counter.to_bytes(8, "big"))

    def next_bytes(self, buf: bytearray, start: int = 0, length: Optional[int] = None) -> None:
        length = check_region(buf, start, length)
        end = start + length
        with self._lock:
            pos = start
            while pos < end:
                if not self._pending:
                    self._pending = self._next_block()
                take = min(len(self._pending), end - pos)
                buf[pos:pos + take] = self._pending[:take]
                self._pending = self._pending[take:]
                pos += take
