from .base import RandomGenerator, SeedMaterial
from .digest_random import DigestRandomGenerator
from .os_random import OsRandomGenerator
from .reversed_window import ReversedWindowGenerator

__all__ = [
    'RandomGenerator',
    'SeedMaterial',
    'DigestRandomGenerator',
    'OsRandomGenerator',
    'ReversedWindowGenerator',
]
