"""pystrkey - versioned, checksummed base32 encoding for ledger keys and hashes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pystrkey")
except PackageNotFoundError:
    __version__ = "0+local"
from pystrkey._checksum import compute_checksum, verify_checksum
from pystrkey._constants import ENCODED_KEY_LENGTH, RAW_KEY_SIZE, encoded_length
from pystrkey.codec import decode_check, encode_check, is_valid
from pystrkey.exceptions import (
    InvalidChecksumError,
    InvalidEncodingError,
    InvalidInputTypeError,
    InvalidVersionByteError,
    NullDataError,
    StrKeyConfigError,
    StrKeyError,
    StrKeyErrorKind,
    UnknownKeyTypeError,
)
from pystrkey.strkey import (
    decode_ed25519_public_key,
    decode_ed25519_secret_seed,
    decode_pre_auth_tx,
    decode_sha256_hash,
    encode_ed25519_public_key,
    encode_ed25519_secret_seed,
    encode_pre_auth_tx,
    encode_sha256_hash,
    is_valid_ed25519_public_key,
    is_valid_ed25519_secret_seed,
    is_valid_pre_auth_tx,
    is_valid_sha256_hash,
)
from pystrkey.versions import VERSION_BYTES, KeyType, resolve_key_type, version_byte_of

__all__ = [
    "__version__",
    "ENCODED_KEY_LENGTH",
    "InvalidChecksumError",
    "InvalidEncodingError",
    "InvalidInputTypeError",
    "InvalidVersionByteError",
    "KeyType",
    "NullDataError",
    "RAW_KEY_SIZE",
    "StrKeyConfigError",
    "StrKeyError",
    "StrKeyErrorKind",
    "UnknownKeyTypeError",
    "VERSION_BYTES",
    "compute_checksum",
    "decode_check",
    "decode_ed25519_public_key",
    "decode_ed25519_secret_seed",
    "decode_pre_auth_tx",
    "decode_sha256_hash",
    "encode_check",
    "encode_ed25519_public_key",
    "encode_ed25519_secret_seed",
    "encode_pre_auth_tx",
    "encode_sha256_hash",
    "encoded_length",
    "is_valid",
    "is_valid_ed25519_public_key",
    "is_valid_ed25519_secret_seed",
    "is_valid_pre_auth_tx",
    "is_valid_sha256_hash",
    "resolve_key_type",
    "verify_checksum",
    "version_byte_of",
]
