"""
Verifiable DSA domain parameter generation (FIPS 186-2 and FIPS 186-3)

Example usage:

    from fips_dsa import ParameterGenerator

    gen = ParameterGenerator.for_strength(1024, certainty=80)
    params = gen.generate_parameters()
    params.p, params.q, params.g
    params.validation.seed, params.validation.counter

    gen = ParameterGenerator.for_lengths(2048, 256, certainty=112)
    params = gen.generate_parameters(max_attempts=1000)
"""

from .config import GeneratorConfig
from .errors import (
    DsaParameterError,
    GenerationCancelledError,
    GenerationExhaustedError,
    InvalidParameterError,
    NoGeneratorFoundError,
)
from .generators.dsa_parameters import ParameterGenerator
from .generators.generator_g import GeneratorMethod
from .params import DomainParameters, ValidationParameters

__version__ = "1.0.0"
__all__ = [
    "ParameterGenerator",
    "GeneratorConfig",
    "GeneratorMethod",
    "DomainParameters",
    "ValidationParameters",
    "DsaParameterError",
    "InvalidParameterError",
    "NoGeneratorFoundError",
    "GenerationExhaustedError",
    "GenerationCancelledError",
]
