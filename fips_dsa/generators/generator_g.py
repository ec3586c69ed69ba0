# File: fips_dsa/generators/generator_g.py
"""
Derivation of the subgroup generator g for accepted (p, q).

Two methods are offered:
 - UNVERIFIABLE (FIPS 186-2 / FIPS 186-3 A.2.1): g = h^((p-1)/q) mod p for
   random h in [2, p-2]. Cannot fail.
 - VERIFIABLE (FIPS 186-3 A.2.3): g = Hash(seed || "ggen" || index || count)^((p-1)/q) mod p.
   Bounded by a 16-bit count; raises NoGeneratorFoundError when exhausted.
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import Optional

from cryptography.hazmat.primitives import hashes

from .. import constants
from ..crypto.primitives import RandomSource, hash_block, increment, random_in_range
from ..errors import GenerationCancelledError, InvalidParameterError, NoGeneratorFoundError
from ..logger import get_logger, sanitize

logger = get_logger("fips_dsa.generator_g")


class GeneratorMethod(str, Enum):
    UNVERIFIABLE = "unverifiable"
    VERIFIABLE = "verifiable"


def check_cancel(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise GenerationCancelledError("parameter generation cancelled")


def calculate_generator_unverifiable(p: int, q: int, rng: Optional[RandomSource] = None) -> int:
    e = (p - 1) // q
    p_sub_2 = p - 2
    while True:
        h = random_in_range(2, p_sub_2, rng)
        g = pow(h, e, p)
        # rejects only g == 0 and g == 1
        if g.bit_length() > 1:
            return g


def calculate_generator_verifiable(
    algorithm: hashes.HashAlgorithm,
    p: int,
    q: int,
    seed: bytes,
    index: int = constants.DEFAULT_GENERATOR_INDEX,
    cancel: Optional[threading.Event] = None,
) -> int:
    """
    Canonical generator derived from the domain parameter seed.

    Args:
        algorithm: digest used for the W = Hash(U) step
        p, q: accepted primes
        seed: domain_parameter_seed of the search that produced q
        index: 8-bit index distinguishing generators for the same (p, q)
        cancel: checked before every count

    Raises:
        InvalidParameterError: index does not fit in one byte
        NoGeneratorFoundError: every count up to 0xFFFF produced g < 2
        GenerationCancelledError: cancel was set
    """
    if not 0 <= index <= 0xFF:
        raise InvalidParameterError("generator index must be in [0, 255]")
    e = (p - 1) // q

    # U = seed || "ggen" || index || count, count is the trailing two bytes
    u = bytearray(seed) + bytearray(constants.GGEN_TAG) + bytearray([index, 0, 0])

    for count in range(1, constants.GGEN_MAX_COUNT):
        check_cancel(cancel)
        increment(u)
        w = int.from_bytes(hash_block(algorithm, u), "big")
        g = pow(w, e, p)
        if g >= 2:
            logger.debug("verifiable generator accepted", extra=sanitize(count=count, index=index))
            return g

    logger.warning("verifiable generator budget exhausted", extra=sanitize(index=index, seed=seed))
    raise NoGeneratorFoundError(f"no generator found for index {index}")


def calculate_generator(
    method: GeneratorMethod,
    p: int,
    q: int,
    *,
    rng: Optional[RandomSource] = None,
    algorithm: Optional[hashes.HashAlgorithm] = None,
    seed: Optional[bytes] = None,
    index: int = constants.DEFAULT_GENERATOR_INDEX,
    cancel: Optional[threading.Event] = None,
) -> int:
    """Dispatch on ``method``; the verifiable branch needs ``algorithm`` and ``seed``."""
    if GeneratorMethod(method) is GeneratorMethod.VERIFIABLE:
        if algorithm is None or seed is None:
            raise InvalidParameterError("verifiable generator requires a digest and the search seed")
        return calculate_generator_verifiable(algorithm, p, q, seed, index, cancel)
    return calculate_generator_unverifiable(p, q, rng)
