"""
Structured logger helper for fips_dsa.
All package loggers hang off the ``fips_dsa`` logger, which emits JSON lines.
"""

import logging
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from . import constants

_MAX_BYTES_PREVIEW = 64
_ROOT_NAME = "fips_dsa"


def _sanitize_value(v: Any) -> Any:
    if isinstance(v, (bytes, bytearray)):
        preview = bytes(v[:_MAX_BYTES_PREVIEW]).hex()
        if len(v) > _MAX_BYTES_PREVIEW:
            preview += "...(truncated)"
        return {"hex": preview, "length": len(v)}
    if isinstance(v, int) and not isinstance(v, bool) and v.bit_length() > 64:
        # big primes: keep the log line bounded
        return {"bits": v.bit_length(), "hex_prefix": hex(v)[:18]}
    if isinstance(v, dict):
        return {k: _sanitize_value(vv) for k, vv in v.items()}
    if isinstance(v, list):
        return [_sanitize_value(x) for x in v]
    return v


def sanitize(**kwargs: Any) -> Dict[str, Any]:
    """Build a logging ``extra`` mapping with bytes and big integers shortened."""
    return {k: _sanitize_value(v) for k, v in kwargs.items()}


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)
        root.setLevel(getattr(logging, constants.LOG_LEVEL.upper(), logging.INFO))
    return root


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)
