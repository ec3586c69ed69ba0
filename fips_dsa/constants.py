"""
fips_dsa/constants.py

Central constants used across the parameter generators.
Environment variables override the tunable defaults.
"""

from typing import Any, Dict
import os


def get_env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Tunable defaults with environment variable overrides
DEFAULTS: Dict[str, Any] = {
    # Primality confidence (false positive rate <= 2**-certainty)
    "DEFAULT_CERTAINTY": get_env_int("FIPS_DSA_CERTAINTY", 80),

    # Digest used by the FIPS 186-3 search
    "DEFAULT_DIGEST": os.getenv("FIPS_DSA_DIGEST", "sha256"),

    # Logging
    "LOG_LEVEL": os.getenv("FIPS_DSA_LOG_LEVEL", "INFO"),
}

DEFAULT_CERTAINTY: int = int(DEFAULTS["DEFAULT_CERTAINTY"])
DEFAULT_DIGEST: str = str(DEFAULTS["DEFAULT_DIGEST"])
LOG_LEVEL: str = str(DEFAULTS["LOG_LEVEL"])

# FIPS 186-2 modulus range
LEGACY_MIN_L = 512
LEGACY_MAX_L = 1024
LEGACY_L_STEP = 64
LEGACY_N = 160
LEGACY_SEED_LEN = 20
LEGACY_COUNTER_LIMIT = 4096

# FIPS 186-3 default subgroup size above the legacy range
EXTENDED_DEFAULT_N = 256

# FIPS 186-3 section 4.2
APPROVED_LN_PAIRS = frozenset({(1024, 160), (2048, 224), (2048, 256), (3072, 256)})

# FIPS 186-3 A.2.3
GGEN_TAG = b"ggen"
GGEN_MAX_COUNT = 1 << 16
DEFAULT_GENERATOR_INDEX = 1

# sizes accepted by cryptography's DSAParameterNumbers
CRYPTOGRAPHY_P_BITS = (1024, 2048, 3072, 4096)
CRYPTOGRAPHY_Q_BITS = (160, 224, 256)

__all__ = [
    'DEFAULT_CERTAINTY', 'DEFAULT_DIGEST', 'LOG_LEVEL',
    'LEGACY_MIN_L', 'LEGACY_MAX_L', 'LEGACY_L_STEP', 'LEGACY_N',
    'LEGACY_SEED_LEN', 'LEGACY_COUNTER_LIMIT', 'EXTENDED_DEFAULT_N',
    'APPROVED_LN_PAIRS', 'GGEN_TAG', 'GGEN_MAX_COUNT', 'DEFAULT_GENERATOR_INDEX',
    'CRYPTOGRAPHY_P_BITS', 'CRYPTOGRAPHY_Q_BITS',
    'get_env_int',
]
