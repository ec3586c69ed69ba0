# -*- coding: utf-8 -*-
"""
Operating system backed random generator (``secrets``).
"""

from __future__ import annotations

import secrets
from typing import Optional

from ..logger import get_logger
from .base import RandomGenerator, SeedMaterial, check_region, seed_to_bytes

logger = get_logger("fips_dsa.prng.os_random")


class OsRandomGenerator(RandomGenerator):
    """
    Cryptographically secure generator backed by the OS entropy pool.

    Seed material cannot influence the OS pool; it is validated and dropped.
    """

    def add_seed_material(self, seed: SeedMaterial) -> None:
        seed_to_bytes(seed)
        logger.debug("seed material ignored by OS generator")

    def next_bytes(self, buf: bytearray, start: int = 0, length: Optional[int] = None) -> None:
        length = check_region(buf, start, length)
        buf[start:start + length] = secrets.token_bytes(length)
