from .base import PrimeSearch
from .fips186_2 import Fips186_2PrimeSearch, is_valid_dsa_strength
from .fips186_3 import Fips186_3PrimeSearch
from .generator_g import (
    GeneratorMethod,
    calculate_generator,
    calculate_generator_unverifiable,
    calculate_generator_verifiable,
)

__all__ = [
    'PrimeSearch',
    'Fips186_2PrimeSearch',
    'Fips186_3PrimeSearch',
    'is_valid_dsa_strength',
    'GeneratorMethod',
    'calculate_generator',
    'calculate_generator_unverifiable',
    'calculate_generator_verifiable',
]
