# File: fips_dsa/crypto/primitives.py
"""
Arithmetic and hashing primitives used by the DSA parameter searches.

 - ``increment``: big-endian byte counter, wraps silently on overflow.
 - ``hash_block``: one-shot digest of a buffer through a cryptography hash.
 - ``is_probable_prime``: Miller-Rabin via gmpy2, sized from a certainty value.
 - ``random_in_range``: uniform integer in [lo, hi] from a byte source.

Randomness always comes from an injected ``rng(nbytes) -> bytes`` callable;
``secrets.token_bytes`` is the default.
"""
from __future__ import annotations

import secrets
from typing import Callable, Optional, Union

import gmpy2
from cryptography.hazmat.primitives import hashes

RandomSource = Callable[[int], bytes]
Buffer = Union[bytes, bytearray, memoryview]


def default_random(nbytes: int) -> bytes:
    """Return cryptographically secure random bytes."""
    return secrets.token_bytes(nbytes)


def increment(buf: bytearray) -> None:
    """
    Add one to ``buf`` in place, treating it as an unsigned big-endian integer.

    Carry runs from the last byte towards the first. A buffer of all 0xFF
    wraps to all zero.
    """
    for i in range(len(buf) - 1, -1, -1):
        buf[i] = (buf[i] + 1) & 0xFF
        if buf[i] != 0:
            break


def hash_block(algorithm: hashes.HashAlgorithm, data: Buffer) -> bytes:
    """Digest ``data`` with ``algorithm``; returns ``algorithm.digest_size`` bytes."""
    h = hashes.Hash(algorithm)
    h.update(bytes(data))
    return h.finalize()


def miller_rabin_rounds(certainty: int) -> int:
    # each round errs with probability <= 1/4
    return max(1, (certainty + 1) // 2)


def is_probable_prime(n: int, certainty: int) -> bool:
    """
    Probabilistic primality test with false positive rate <= 2**-certainty.

    Non-positive certainty accepts every candidate, mirroring the usual
    big-integer convention.
    """
    if n < 2:
        return False
    if certainty <= 0:
        return True
    return bool(gmpy2.is_prime(n, miller_rabin_rounds(certainty)))


def random_in_range(lo: int, hi: int, rng: Optional[RandomSource] = None) -> int:
    """
    Uniform integer in [lo, hi] (inclusive) by rejection sampling.

    Raises:
        ValueError: if lo > hi
    """
    if lo > hi:
        raise ValueError("'lo' must be at most 'hi'")
    if rng is None:
        rng = default_random
    span = hi - lo
    if span == 0:
        return lo
    bits = span.bit_length()
    nbytes = (bits + 7) // 8
    excess = nbytes * 8 - bits
    while True:
        candidate = int.from_bytes(rng(nbytes), "big") >> excess
        if candidate <= span:
            return lo + candidate
