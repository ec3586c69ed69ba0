# File: fips_dsa/generators/dsa_parameters.py
"""
Generate suitable parameters for DSA, in line with FIPS 186-2 (L <= 1024)
and FIPS 186-3 (L > 1024).

Two factories replace a single entry point with hidden dispatch:
 - ``ParameterGenerator.for_strength(L, certainty)``: legacy strengths only,
   N is derived (160).
 - ``ParameterGenerator.for_lengths(L, N, certainty)``: caller chooses both.

Note: generation can take a while; pass ``max_attempts`` or a ``cancel`` event
to bound it.
"""
from __future__ import annotations

import threading
from typing import Any, Optional

from pydantic import ValidationError

from ..config import GeneratorConfig
from ..crypto.digests import get_digest
from ..crypto.primitives import RandomSource, default_random
from ..errors import InvalidParameterError
from ..logger import get_logger, sanitize
from ..params import DomainParameters
from .base import PrimeSearch
from .fips186_2 import Fips186_2PrimeSearch, is_valid_dsa_strength
from .fips186_3 import Fips186_3PrimeSearch

logger = get_logger("fips_dsa.dsa_parameters")


def _build_config(**kwargs: Any) -> GeneratorConfig:
    try:
        return GeneratorConfig(**kwargs)
    except ValidationError as e:
        raise InvalidParameterError(str(e)) from e


class ParameterGenerator:
    """
    Holds an immutable configuration and a random source, and produces
    DomainParameters on demand. No state is carried between calls.
    """

    def __init__(self, config: GeneratorConfig, random: Optional[RandomSource] = None):
        self.config = config
        self.random = random or default_random

    @classmethod
    def for_strength(
        cls,
        l_bits: int,
        certainty: int,
        random: Optional[RandomSource] = None,
        **options: Any,
    ) -> "ParameterGenerator":
        """
        Legacy-strength generator.

        Args:
            l_bits: size of p, 512 - 1024 in 64 bit increments
            certainty: measure of robustness of the primes (at least 80 for FIPS 186-2)
            random: random byte source
            options: further GeneratorConfig fields (generator_method, max_attempts, ...)

        Raises:
            InvalidParameterError: l_bits outside the FIPS 186-2 range
        """
        if not is_valid_dsa_strength(l_bits):
            raise InvalidParameterError("size must be from 512 - 1024 and a multiple of 64")
        return cls(_build_config(l_bits=l_bits, certainty=certainty, **options), random)

    @classmethod
    def for_lengths(
        cls,
        l_bits: int,
        n_bits: int,
        certainty: int,
        random: Optional[RandomSource] = None,
        **options: Any,
    ) -> "ParameterGenerator":
        """
        Generator for an explicit (L, N) pair. L > 1024 selects FIPS 186-3.

        Raises:
            InvalidParameterError: N does not fit L or the configured digest
        """
        return cls(_build_config(l_bits=l_bits, n_bits=n_bits, certainty=certainty, **options), random)

    def _search(self) -> PrimeSearch:
        cfg = self.config
        if cfg.uses_legacy_search:
            return Fips186_2PrimeSearch(
                cfg.l_bits,
                cfg.certainty,
                generator_method=cfg.generator_method,
                generator_index=cfg.generator_index,
            )
        return Fips186_3PrimeSearch(
            cfg.l_bits,
            cfg.n_bits,
            cfg.certainty,
            get_digest(cfg.digest),
            generator_method=cfg.generator_method,
            generator_index=cfg.generator_index,
        )

    def generate_parameters(
        self,
        random: Optional[RandomSource] = None,
        max_attempts: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
    ) -> DomainParameters:
        """
        Generate p, q and g.

        Args:
            random: overrides the generator's random source for this call
            max_attempts: overrides ``config.max_attempts``
            cancel: checked between seeds and p candidates

        Raises:
            GenerationExhaustedError, GenerationCancelledError, NoGeneratorFoundError
        """
        search = self._search()
        budget = max_attempts if max_attempts is not None else self.config.max_attempts
        logger.debug(
            "starting parameter search",
            extra=sanitize(algorithm=search.name, L=search.l_bits, N=search.n_bits, max_attempts=budget),
        )
        return search.generate(random or self.random, max_attempts=budget, cancel=cancel)
