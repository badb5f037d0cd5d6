"""CRC16/XModem checksum used by the strkey payload.

``binascii.crc_hqx`` implements CRC-CCITT (polynomial 0x1021, MSB first);
seeded with 0 it is exactly CRC16/XModem.
"""

from __future__ import annotations

import binascii
import struct


def compute_checksum(payload: bytes) -> bytes:
    """Compute the CRC16/XModem of *payload*, serialised little-endian.

    Parameters
    ----------
    payload : bytes
        Version byte followed by the raw identifier.

    Returns
    -------
    bytes
        2-byte checksum.
    """
    return struct.pack("<H", binascii.crc_hqx(payload, 0))


def verify_checksum(expected: bytes, actual: bytes) -> bool:
    """Return ``True`` when both checksums have the same length and bytes."""
    if len(expected) != len(actual):
        return False
    return all(e == a for e, a in zip(expected, actual))
