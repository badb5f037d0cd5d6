"""Helpers for safe debug logging.

pystrkey handles secret seeds and raw key material. This module redacts
those values before they reach a DEBUG log line.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pystrkey.versions import KeyType

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "seed",
        "secret",
        "secret_seed",
        "data",
        "raw",
        "strkey",
    }
)


def redact_strkey(value: Any) -> str:
    """Return a log-safe rendering of a rejected strkey candidate.

    Only the type and length are kept. A rejected input may be a secret seed
    passed where a public key was expected, so no characters are shown.
    """
    if not isinstance(value, str):
        return f"<{type(value).__name__}>"
    return f"<redacted:{len(value)}c>"


def redact_for_log(value: Any, *, max_string: int = 128, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, KeyType):
        return value.value

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SENSITIVE_VALUE_KEYS:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
