"""Custom exception hierarchy for pystrkey."""

from __future__ import annotations

import enum
from typing import ClassVar


class StrKeyErrorKind(enum.Enum):
    """Tag identifying why a strkey operation was rejected."""

    NULL_DATA = "null_data"
    UNKNOWN_KEY_TYPE = "unknown_key_type"
    INVALID_INPUT_TYPE = "invalid_input_type"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_VERSION_BYTE = "invalid_version_byte"
    INVALID_CHECKSUM = "invalid_checksum"
    CONFIG = "config"


class StrKeyError(Exception):
    """Base exception for all pystrkey errors."""

    kind: ClassVar[StrKeyErrorKind]


class StrKeyConfigError(StrKeyError):
    """Invalid configuration value."""

    kind = StrKeyErrorKind.CONFIG


class NullDataError(StrKeyError):
    """Encoder was called without data."""

    kind = StrKeyErrorKind.NULL_DATA

    def __init__(self, message: str = "cannot encode null data") -> None:
        super().__init__(message)


class UnknownKeyTypeError(StrKeyError):
    """A key type name did not match any registered version byte."""

    kind = StrKeyErrorKind.UNKNOWN_KEY_TYPE

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(
            f"{name!r} is not a valid version byte name. expected one of "
            '"ed25519PublicKey", "ed25519SecretSeed", "preAuthTx", "sha256Hash"'
        )


class InvalidInputTypeError(StrKeyError, TypeError):
    """Argument has the wrong Python type (e.g. ``bytes`` where ``str`` is required)."""

    kind = StrKeyErrorKind.INVALID_INPUT_TYPE


class InvalidEncodingError(StrKeyError):
    """Input is not valid base32 or is not the canonical encoding of its bytes."""

    kind = StrKeyErrorKind.INVALID_ENCODING


class InvalidVersionByteError(StrKeyError):
    """Decoded version byte does not belong to the requested key type.

    ``actual`` is ``None`` when the input decoded to no bytes at all.
    """

    kind = StrKeyErrorKind.INVALID_VERSION_BYTE

    def __init__(self, expected: int, actual: int | None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid version byte. expected {expected}, got {actual}")


class InvalidChecksumError(StrKeyError):
    """Embedded checksum does not match the payload."""

    kind = StrKeyErrorKind.INVALID_CHECKSUM

    def __init__(self, expected: bytes, actual: bytes) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid checksum. expected {expected.hex()}, got {actual.hex()}")
