"""Internal constants shared across the library."""

from __future__ import annotations

# ------------------------------------------------------------------
# Blob layout:  version (1) | data (N) | checksum (2)
# ------------------------------------------------------------------

VERSION_BYTE_SIZE = 1
CHECKSUM_SIZE = 2
RAW_KEY_SIZE = 32
"""Size of the identifier carried by every current key type."""

_BITS_PER_SYMBOL = 5


def encoded_length(data_size: int) -> int:
    """Return the strkey length in characters for a *data_size*-byte identifier.

    Raises :class:`ValueError` if *data_size* is negative.
    """
    if data_size < 0:
        raise ValueError(f"data size must be non-negative, got {data_size}")
    bits = (VERSION_BYTE_SIZE + data_size + CHECKSUM_SIZE) * 8
    return -(-bits // _BITS_PER_SYMBOL)


ENCODED_KEY_LENGTH = encoded_length(RAW_KEY_SIZE)  # 56
