# File: fips_dsa/utils/serialization.py
"""
Safe serialization and deserialization of DomainParameters.

Features:
 - UTF-8 JSON with hex-encoded integers and seed.
 - Size cap before parsing, so oversized payloads are rejected cheaply.
 - Robust error messages; every failure surfaces as SerializationError.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..logger import get_logger
from ..params import DomainParameters

logger = get_logger("fips_dsa.serialization")

# generous for L = 15360 plus metadata
MAX_PAYLOAD_BYTES = 64 * 1024

_REQUIRED_KEYS = ("p", "q", "g", "seed", "counter")


class SerializationError(Exception):
    pass


def serialize_parameters(params: DomainParameters, *, indent: Optional[int] = None) -> bytes:
    """
    Serialize parameters to JSON bytes.
    """
    payload: Dict[str, Any] = params.to_dict()
    payload["L"] = params.l_bits
    payload["N"] = params.n_bits
    return json.dumps(payload, indent=indent).encode("utf-8")


def deserialize_parameters(b: bytes) -> DomainParameters:
    """
    Parse bytes produced by ``serialize_parameters``.
    """
    if not isinstance(b, (bytes, bytearray)):
        raise SerializationError("payload must be bytes")
    if len(b) > MAX_PAYLOAD_BYTES:
        logger.warning("parameter payload exceeds size limit", extra={"length": len(b)})
        raise SerializationError("payload too large")

    try:
        obj = json.loads(bytes(b).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SerializationError("payload is not valid JSON") from e

    if not isinstance(obj, dict):
        raise SerializationError("payload must be a JSON object")
    missing = [k for k in _REQUIRED_KEYS if k not in obj]
    if missing:
        raise SerializationError(f"payload missing keys: {', '.join(missing)}")

    try:
        return DomainParameters.from_dict(obj)
    except (TypeError, ValueError) as e:
        raise SerializationError("payload holds malformed values") from e
