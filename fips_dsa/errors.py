# -*- coding: utf-8 -*-
"""
Custom exception types for DSA domain parameter generation.
"""

from __future__ import annotations


class DsaParameterError(Exception):
    """Base class for every error raised by fips_dsa."""
    pass


class InvalidParameterError(DsaParameterError, ValueError):
    """
    Exception raised when a generator is configured with unusable input.

    This covers an L outside the FIPS 186-2 range for the legacy entry point,
    an unknown digest name, or an N that does not fit the chosen digest.
    It is always raised before any search work begins.
    """
    pass


class NoGeneratorFoundError(DsaParameterError):
    """
    Exception raised when the verifiable generator derivation exhausts its
    count budget without producing g >= 2.
    """
    pass


class GenerationExhaustedError(DsaParameterError):
    """
    Exception raised when a caller-supplied seed attempt budget runs out
    before an acceptable (p, q) pair was found.
    """

    def __init__(self, attempts: int, algorithm: str):
        super().__init__(f"{algorithm}: no parameters found after {attempts} seed attempts")
        self.attempts = attempts
        self.algorithm = algorithm


class GenerationCancelledError(DsaParameterError):
    """
    Exception raised when the cancel event passed to a generation call is set.
    """
    pass
