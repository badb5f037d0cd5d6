"""Strict, unpadded RFC 4648 base32 on top of :mod:`base64`."""

from __future__ import annotations

import base64

from pystrkey.exceptions import InvalidEncodingError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_QUANTUM = 8


def b32encode(data: bytes) -> str:
    """Encode *data* as uppercase base32 with the ``=`` padding stripped."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def b32decode(text: str) -> bytes:
    """Decode unpadded uppercase base32.

    Lowercase letters, whitespace, non-ASCII characters and lengths that
    cannot come from a whole number of bytes are rejected. Trailing bits of
    the last symbol are **not** checked here; callers that need canonical
    input must re-encode and compare.

    Raises
    ------
    InvalidEncodingError
        If *text* is not decodable.
    """
    remainder = len(text) % _QUANTUM
    padded = text + "=" * ((_QUANTUM - remainder) % _QUANTUM)
    try:
        return base64.b32decode(padded)
    except ValueError as exc:
        # binascii.Error is a ValueError subclass; non-ASCII str input raises ValueError directly.
        raise InvalidEncodingError(f"invalid encoded string: {exc}") from exc
