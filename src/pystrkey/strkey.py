"""Per-key-type strkey helpers.

Thin wrappers over :mod:`pystrkey.codec` with the key type fixed.
"""

from __future__ import annotations

from pystrkey.codec import decode_check, encode_check, is_valid
from pystrkey.versions import KeyType

# ------------------------------------------------------------------
# ed25519 public key  (G...)
# ------------------------------------------------------------------


def encode_ed25519_public_key(data: bytes) -> str:
    """Encode a raw ed25519 public key as a ``G...`` strkey."""
    return encode_check(KeyType.ED25519_PUBLIC_KEY, data)


def decode_ed25519_public_key(data: str) -> bytes:
    """Decode a ``G...`` strkey to the raw ed25519 public key."""
    return decode_check(KeyType.ED25519_PUBLIC_KEY, data)


def is_valid_ed25519_public_key(public_key: str | None) -> bool:
    """Return ``True`` if *public_key* is a valid ed25519 public key strkey."""
    return is_valid(KeyType.ED25519_PUBLIC_KEY, public_key)


# ------------------------------------------------------------------
# ed25519 secret seed  (S...)
# ------------------------------------------------------------------


def encode_ed25519_secret_seed(data: bytes) -> str:
    """Encode a raw ed25519 seed as an ``S...`` strkey."""
    return encode_check(KeyType.ED25519_SECRET_SEED, data)


def decode_ed25519_secret_seed(data: str) -> bytes:
    """Decode an ``S...`` strkey to the raw ed25519 seed."""
    return decode_check(KeyType.ED25519_SECRET_SEED, data)


def is_valid_ed25519_secret_seed(seed: str | None) -> bool:
    """Return ``True`` if *seed* is a valid ed25519 secret seed strkey."""
    return is_valid(KeyType.ED25519_SECRET_SEED, seed)


# ------------------------------------------------------------------
# pre-authorized transaction hash  (T...)
# ------------------------------------------------------------------


def encode_pre_auth_tx(data: bytes) -> str:
    """Encode a pre-authorized transaction hash as a ``T...`` strkey."""
    return encode_check(KeyType.PRE_AUTH_TX, data)


def decode_pre_auth_tx(data: str) -> bytes:
    """Decode a ``T...`` strkey to the raw transaction hash."""
    return decode_check(KeyType.PRE_AUTH_TX, data)


def is_valid_pre_auth_tx(pre_auth_tx: str | None) -> bool:
    """Return ``True`` if *pre_auth_tx* is a valid ``T...`` strkey.

    Same 56-character, 32-byte rule as the ed25519 validators.
    """
    return is_valid(KeyType.PRE_AUTH_TX, pre_auth_tx)


# ------------------------------------------------------------------
# sha256 hash  (X...)
# ------------------------------------------------------------------


def encode_sha256_hash(data: bytes) -> str:
    """Encode a sha256 digest as an ``X...`` strkey."""
    return encode_check(KeyType.SHA256_HASH, data)


def decode_sha256_hash(data: str) -> bytes:
    """Decode an ``X...`` strkey to the raw sha256 digest."""
    return decode_check(KeyType.SHA256_HASH, data)


def is_valid_sha256_hash(sha256_hash: str | None) -> bool:
    """Return ``True`` if *sha256_hash* is a valid ``X...`` strkey.

    Same 56-character, 32-byte rule as the ed25519 validators.
    """
    return is_valid(KeyType.SHA256_HASH, sha256_hash)
