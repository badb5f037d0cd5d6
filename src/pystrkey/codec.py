"""Strkey encoder, decoder and validator.

A strkey is ``base32(version | data | crc16xmodem_le(version | data))``
without padding. Decoding runs a fixed sequence of checks and reports the
first one that fails:

1. input type
2. base32 syntax
3. canonical form (re-encoding must reproduce the input exactly)
4. version byte
5. checksum
"""

from __future__ import annotations

import logging
from typing import Any

from pystrkey._base32 import b32decode, b32encode
from pystrkey._checksum import compute_checksum, verify_checksum
from pystrkey._constants import CHECKSUM_SIZE, ENCODED_KEY_LENGTH, RAW_KEY_SIZE, VERSION_BYTE_SIZE
from pystrkey._redact import redact_for_log, redact_strkey
from pystrkey.exceptions import (
    InvalidChecksumError,
    InvalidEncodingError,
    InvalidInputTypeError,
    InvalidVersionByteError,
    NullDataError,
    StrKeyError,
)
from pystrkey.versions import KeyType, resolve_key_type

_logger = logging.getLogger(__name__)


def _as_bytes(data: Any) -> bytes:
    if data is None:
        raise NullDataError()
    if isinstance(data, (str, int)):
        raise InvalidInputTypeError(f"data must be bytes-like, not {type(data).__name__}")
    try:
        return memoryview(data).tobytes()
    except TypeError as exc:
        raise InvalidInputTypeError(f"data must be bytes-like, not {type(data).__name__}") from exc


def encode_check(key_type: KeyType | str, data: bytes | bytearray | memoryview) -> str:
    """Encode *data* as a strkey of the given type.

    Parameters
    ----------
    key_type : KeyType or str
        Key type, or its name (see :func:`~pystrkey.versions.resolve_key_type`).
    data : bytes-like
        Raw identifier. May be empty; must not be ``None``.

    Returns
    -------
    str
        Uppercase, unpadded base32 strkey.

    Raises
    ------
    NullDataError
        If *data* is ``None``.
    InvalidInputTypeError
        If *data* is not bytes-like.
    UnknownKeyTypeError
        If *key_type* is a string that names no key type.
    """
    raw = _as_bytes(data)
    version_byte = resolve_key_type(key_type).version_byte

    payload = bytes([version_byte]) + raw
    return b32encode(payload + compute_checksum(payload))


def decode_check(key_type: KeyType | str, encoded: str) -> bytes:
    """Decode a strkey of the given type back to its raw identifier.

    Parameters
    ----------
    key_type : KeyType or str
        Expected key type, or its name.
    encoded : str
        Candidate strkey.

    Returns
    -------
    bytes
        The raw identifier carried by *encoded*.

    Raises
    ------
    InvalidInputTypeError
        If *encoded* is not a ``str``.
    InvalidEncodingError
        If *encoded* is not base32, or is not the canonical encoding.
    UnknownKeyTypeError
        If *key_type* is a string that names no key type.
    InvalidVersionByteError
        If *encoded* is a strkey of another type.
    InvalidChecksumError
        If the embedded checksum does not match.
    """
    try:
        return _decode(key_type, encoded)
    except StrKeyError as exc:
        _logger.debug(
            "Rejected %s strkey %s: %s",
            redact_for_log(key_type),
            redact_strkey(encoded),
            exc.kind.value,
        )
        raise


def _decode(key_type: KeyType | str, encoded: Any) -> bytes:
    if not isinstance(encoded, str):
        raise InvalidInputTypeError(f"encoded argument must be of type str, not {type(encoded).__name__}")

    blob = b32decode(encoded)
    version_byte = blob[0] if blob else None
    payload = blob[:-CHECKSUM_SIZE]
    checksum = blob[-CHECKSUM_SIZE:]
    data = payload[VERSION_BYTE_SIZE:]

    if b32encode(blob) != encoded:
        raise InvalidEncodingError("invalid encoded string: not in canonical form")

    expected_version = resolve_key_type(key_type).version_byte
    if version_byte != expected_version:
        raise InvalidVersionByteError(expected_version, version_byte)

    expected_checksum = compute_checksum(payload)
    if not verify_checksum(expected_checksum, checksum):
        raise InvalidChecksumError(expected_checksum, checksum)

    return bytes(data)


def is_valid(key_type: KeyType | str, candidate: str | None) -> bool:
    """Return ``True`` if *candidate* is a valid 32-byte strkey of *key_type*.

    Strings of the wrong length are rejected without decoding. Every
    decoding failure is reported as ``False``.
    """
    if candidate is not None and (not isinstance(candidate, str) or len(candidate) != ENCODED_KEY_LENGTH):
        return False

    try:
        decoded = decode_check(key_type, candidate)  # type: ignore[arg-type]
    except StrKeyError:
        return False
    return len(decoded) == RAW_KEY_SIZE
