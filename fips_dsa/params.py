# -*- coding: utf-8 -*-
"""
Result types for DSA domain parameter generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from cryptography.hazmat.primitives.asymmetric import dsa

from . import constants
from .errors import InvalidParameterError


@dataclass(frozen=True)
class ValidationParameters:
    """Seed and counter trail from which (p, q) can be re-derived."""
    seed: bytes
    counter: int

    def __post_init__(self):
        # callers hand over the live search buffer
        object.__setattr__(self, "seed", bytes(self.seed))


@dataclass(frozen=True)
class DomainParameters:
    """
    DSA domain parameters (p, q, g) plus the validation trail.

    Only ever built fully populated by a successful search.
    """
    p: int
    q: int
    g: int
    validation: ValidationParameters

    @property
    def l_bits(self) -> int:
        return self.p.bit_length()

    @property
    def n_bits(self) -> int:
        return self.q.bit_length()

    def to_cryptography(self) -> dsa.DSAParameters:
        """
        Return the parameters as a ``cryptography`` DSAParameters object.

        cryptography only loads p of 1024/2048/3072/4096 bits with q of
        160/224/256 bits, so most FIPS 186-2 strengths (L = 512 - 960) and
        sizes such as L = 1536 cannot be exported.

        Raises:
            InvalidParameterError: (L, N) outside the sizes cryptography supports
        """
        if (
            self.l_bits not in constants.CRYPTOGRAPHY_P_BITS
            or self.n_bits not in constants.CRYPTOGRAPHY_Q_BITS
        ):
            raise InvalidParameterError(
                f"cryptography cannot load (L, N) = ({self.l_bits}, {self.n_bits}); "
                f"p must be {', '.join(map(str, constants.CRYPTOGRAPHY_P_BITS))} bits "
                f"and q {', '.join(map(str, constants.CRYPTOGRAPHY_Q_BITS))} bits"
            )
        return dsa.DSAParameterNumbers(p=self.p, q=self.q, g=self.g).parameters()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "p": format(self.p, "x"),
            "q": format(self.q, "x"),
            "g": format(self.g, "x"),
            "seed": self.validation.seed.hex(),
            "counter": self.validation.counter,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DomainParameters":
        return cls(
            p=int(d["p"], 16),
            q=int(d["q"], 16),
            g=int(d["g"], 16),
            validation=ValidationParameters(seed=bytes.fromhex(d["seed"]), counter=int(d["counter"])),
        )
