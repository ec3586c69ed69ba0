# File: fips_dsa/generators/base.py
"""
Shared seed/attempt loop for the FIPS 186 prime searches.

A concrete search supplies three pieces:
 - ``seed_length``: bytes drawn from the random source per attempt
 - ``derive_q(seed)``: the q candidate for a seed
 - ``iter_candidates(seed, q)``: (counter, p) for each step of the bounded counter loop

Everything else (primality acceptance, restarts, attempt budget, cancellation,
generator derivation, logging and metrics) lives here.
"""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from cryptography.hazmat.primitives import hashes

from .. import constants
from ..crypto.primitives import RandomSource, default_random, is_probable_prime
from ..errors import GenerationCancelledError, GenerationExhaustedError, NoGeneratorFoundError
from ..logger import get_logger, sanitize
from ..monitoring import metrics
from ..params import DomainParameters, ValidationParameters
from .generator_g import GeneratorMethod, calculate_generator, check_cancel

logger = get_logger("fips_dsa.search")


class PrimeSearch(ABC):
    name = "abstract"

    def __init__(
        self,
        l_bits: int,
        n_bits: int,
        certainty: int,
        algorithm: hashes.HashAlgorithm,
        generator_method: GeneratorMethod = GeneratorMethod.UNVERIFIABLE,
        generator_index: int = constants.DEFAULT_GENERATOR_INDEX,
    ):
        self.l_bits = l_bits
        self.n_bits = n_bits
        self.certainty = certainty
        self.algorithm = algorithm
        self.generator_method = GeneratorMethod(generator_method)
        self.generator_index = generator_index

    @property
    @abstractmethod
    def seed_length(self) -> int:
        ...

    @abstractmethod
    def derive_q(self, seed: bytes) -> int:
        ...

    @abstractmethod
    def iter_candidates(self, seed: bytes, q: int) -> Iterator[Tuple[int, int]]:
        ...

    def find_p(
        self, seed: bytes, q: int, cancel: Optional[threading.Event] = None
    ) -> Optional[Tuple[int, int]]:
        """
        Run the counter loop for an accepted (seed, q).

        Returns:
            (p, counter) for the first probable prime of exactly L bits, or
            None once the counter budget is spent.
        """
        for counter, p in self.iter_candidates(seed, q):
            check_cancel(cancel)
            metrics.p_candidates_total.labels(self.name).inc()
            if p.bit_length() != self.l_bits:
                continue
            if is_probable_prime(p, self.certainty):
                return p, counter
        return None

    def generate(
        self,
        rng: Optional[RandomSource] = None,
        max_attempts: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
    ) -> DomainParameters:
        """
        Draw seeds until a (p, q) pair is accepted, then derive g.

        Args:
            rng: random source; defaults to ``secrets.token_bytes``
            max_attempts: number of seeds to try; None loops until success
            cancel: event checked between seeds, between p candidates and between verifiable g counts

        Raises:
            GenerationExhaustedError: max_attempts seeds were tried without success
            GenerationCancelledError: cancel was set
            NoGeneratorFoundError: verifiable g derivation failed
        """
        if rng is None:
            rng = default_random
        with metrics.generation_seconds.labels(self.name).time():
            try:
                return self._search(rng, max_attempts, cancel)
            except GenerationExhaustedError:
                metrics.generation_failures_total.labels(self.name, "exhausted").inc()
                raise
            except GenerationCancelledError:
                metrics.generation_failures_total.labels(self.name, "cancelled").inc()
                raise
            except NoGeneratorFoundError:
                metrics.generation_failures_total.labels(self.name, "no_generator").inc()
                raise

    def _search(
        self,
        rng: RandomSource,
        max_attempts: Optional[int],
        cancel: Optional[threading.Event],
    ) -> DomainParameters:
        attempts = 0
        while True:
            if max_attempts is not None and attempts >= max_attempts:
                logger.warning(
                    "seed attempt budget exhausted",
                    extra=sanitize(algorithm=self.name, attempts=attempts, L=self.l_bits, N=self.n_bits),
                )
                raise GenerationExhaustedError(attempts, self.name)
            check_cancel(cancel)
            attempts += 1

            seed = bytes(rng(self.seed_length))
            metrics.seeds_total.labels(self.name).inc()

            q = self.derive_q(seed)
            if not is_probable_prime(q, self.certainty):
                continue
            logger.debug("q accepted", extra=sanitize(algorithm=self.name, attempt=attempts, seed=seed))

            found = self.find_p(seed, q, cancel)
            if found is None:
                logger.debug("counter budget spent, drawing a new seed", extra=sanitize(algorithm=self.name))
                continue
            p, counter = found

            g = calculate_generator(
                self.generator_method,
                p,
                q,
                rng=rng,
                algorithm=self.algorithm,
                seed=seed,
                index=self.generator_index,
                cancel=cancel,
            )
            logger.info(
                "domain parameters generated",
                extra=sanitize(
                    algorithm=self.name,
                    L=self.l_bits,
                    N=self.n_bits,
                    attempts=attempts,
                    counter=counter,
                    generator=self.generator_method.value,
                ),
            )
            return DomainParameters(p=p, q=q, g=g, validation=ValidationParameters(seed=seed, counter=counter))
