"""
config.py

Pydantic-based configuration model for DSA parameter generation.
Instances are frozen; build a new one to change any setting.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import constants
from .crypto.digests import digest_bits, get_digest
from .generators.fips186_2 import is_valid_dsa_strength
from .generators.generator_g import GeneratorMethod


def default_n_bits(l_bits: int) -> int:
    return constants.LEGACY_N if l_bits <= constants.LEGACY_MAX_L else constants.EXTENDED_DEFAULT_N


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    l_bits: int = Field(..., description="Bit length of p (L)")
    n_bits: int = Field(None, description="Bit length of q (N); derived from L when omitted")
    certainty: int = Field(constants.DEFAULT_CERTAINTY, ge=1, description="Primality confidence, error <= 2^-certainty")
    digest: str = Field(constants.DEFAULT_DIGEST, description="Digest for the FIPS 186-3 search")
    generator_method: GeneratorMethod = Field(GeneratorMethod.UNVERIFIABLE, description="How g is derived")
    generator_index: int = Field(constants.DEFAULT_GENERATOR_INDEX, ge=0, le=255, description="Index for verifiable g")
    max_attempts: Optional[int] = Field(None, ge=1, description="Seed attempt budget; None is unbounded")
    enforce_approved_pairs: bool = Field(False, description="Restrict (L, N) to the FIPS 186-3 section 4.2 list")

    @model_validator(mode="before")
    @classmethod
    def _fill_n_bits(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("n_bits") is None and data.get("l_bits") is not None:
            data = dict(data)
            data["n_bits"] = default_n_bits(int(data["l_bits"]))
        return data

    @field_validator("digest")
    @classmethod
    def _known_digest(cls, v: str) -> str:
        get_digest(v)
        return v

    @model_validator(mode="after")
    def _check_lengths(self) -> "GeneratorConfig":
        L, N = self.l_bits, self.n_bits
        if self.uses_legacy_search:
            if not is_valid_dsa_strength(L):
                raise ValueError("size must be from 512 - 1024 and a multiple of 64")
            if N != constants.LEGACY_N:
                raise ValueError(f"L <= {constants.LEGACY_MAX_L} uses FIPS 186-2, which fixes N = {constants.LEGACY_N}")
        else:
            if N < constants.LEGACY_N or N % 8 != 0:
                raise ValueError(f"N must be a multiple of 8 and at least {constants.LEGACY_N}")
            if N >= L:
                raise ValueError("N must be smaller than L")
            outlen = digest_bits(get_digest(self.digest))
            if outlen < N:
                raise ValueError(f"digest {self.digest} outputs {outlen} bits, fewer than N = {N}")
        if self.enforce_approved_pairs and (L, N) not in constants.APPROVED_LN_PAIRS:
            raise ValueError(f"(L, N) = ({L}, {N}) is not an approved FIPS 186-3 pair")
        return self

    @property
    def uses_legacy_search(self) -> bool:
        return self.l_bits <= constants.LEGACY_MAX_L
