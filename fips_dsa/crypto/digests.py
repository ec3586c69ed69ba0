# fips_dsa/crypto/digests.py
"""Digest registry: maps configuration names onto cryptography hash algorithms."""
from __future__ import annotations

from typing import Dict, Type

from cryptography.hazmat.primitives import hashes

from ..errors import InvalidParameterError

_DIGESTS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512_224": hashes.SHA512_224,
    "sha512_256": hashes.SHA512_256,
    "sha3_224": hashes.SHA3_224,
    "sha3_256": hashes.SHA3_256,
    "sha3_384": hashes.SHA3_384,
    "sha3_512": hashes.SHA3_512,
}


def _normalize(name: str) -> str:
    # "SHA-256" -> "sha256", "sha3-384" -> "sha3_384", "SHA-512/256" -> "sha512_256"
    key = name.strip().lower().replace("/", "_")
    if key.startswith(("sha3-", "sha3_", "sha-3-", "sha-3_")):
        return "sha3_" + key.split("3", 1)[1][1:]
    return key.replace("-", "")


def digest_names() -> list:
    return sorted(_DIGESTS)


def get_digest(name: str) -> hashes.HashAlgorithm:
    """Return a fresh hash algorithm instance for ``name`` (e.g. "sha256", "SHA-384")."""
    try:
        return _DIGESTS[_normalize(name)]()
    except KeyError:
        raise InvalidParameterError(
            f"unknown digest {name!r}; expected one of {', '.join(digest_names())}"
        ) from None


def digest_bits(algorithm: hashes.HashAlgorithm) -> int:
    """Output length of ``algorithm`` in bits (outlen)."""
    return algorithm.digest_size * 8
