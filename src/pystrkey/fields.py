"""Pydantic field types for strkey strings.

Use them as field annotations to reject malformed keys at model
validation time::

    class Account(BaseModel):
        account_id: Ed25519PublicKeyStr
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import AfterValidator

from pystrkey._constants import RAW_KEY_SIZE
from pystrkey.codec import decode_check
from pystrkey.exceptions import StrKeyError
from pystrkey.versions import KeyType, resolve_key_type


def _strkey_validator(key_type: KeyType) -> Callable[[str], str]:
    def validate(value: str) -> str:
        try:
            decoded = decode_check(key_type, value)
        except StrKeyError as exc:
            raise ValueError(f"invalid {key_type.value} strkey: {exc}") from exc
        if len(decoded) != RAW_KEY_SIZE:
            raise ValueError(f"invalid {key_type.value} strkey: expected {RAW_KEY_SIZE} bytes, got {len(decoded)}")
        return value

    validate.__name__ = f"validate_{key_type.name.lower()}"
    return validate


def strkey_field_type(key_type: KeyType | str) -> Any:
    """Build an ``Annotated[str, ...]`` type that only accepts strkeys of *key_type*."""
    resolved = resolve_key_type(key_type)
    return Annotated[str, AfterValidator(_strkey_validator(resolved))]


Ed25519PublicKeyStr = strkey_field_type(KeyType.ED25519_PUBLIC_KEY)
"""``G...`` account identifier."""

Ed25519SecretSeedStr = strkey_field_type(KeyType.ED25519_SECRET_SEED)
"""``S...`` secret seed."""

PreAuthTxStr = strkey_field_type(KeyType.PRE_AUTH_TX)
"""``T...`` pre-authorized transaction hash."""

Sha256HashStr = strkey_field_type(KeyType.SHA256_HASH)
"""``X...`` sha256 hash."""
