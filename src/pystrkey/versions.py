"""Key types and their version bytes.

Every strkey starts with a version byte naming the kind of identifier it
carries. The upper five bits of that byte become the first base32 symbol,
which is why all public keys start with ``G`` and all secret seeds with
``S``.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

from pystrkey._base32 import ALPHABET
from pystrkey.exceptions import UnknownKeyTypeError


class KeyType(enum.Enum):
    """Identifier kinds that have a registered version byte."""

    ED25519_PUBLIC_KEY = "ed25519PublicKey"
    ED25519_SECRET_SEED = "ed25519SecretSeed"
    PRE_AUTH_TX = "preAuthTx"
    SHA256_HASH = "sha256Hash"

    @property
    def version_byte(self) -> int:
        return VERSION_BYTES[self]

    @property
    def prefix(self) -> str:
        """First character of every strkey of this type."""
        return ALPHABET[self.version_byte >> 3]


VERSION_BYTES: Mapping[KeyType, int] = MappingProxyType(
    {
        KeyType.ED25519_PUBLIC_KEY: 6 << 3,  # G
        KeyType.ED25519_SECRET_SEED: 18 << 3,  # S
        KeyType.PRE_AUTH_TX: 19 << 3,  # T
        KeyType.SHA256_HASH: 23 << 3,  # X
    }
)

_BY_NAME: Mapping[str, KeyType] = MappingProxyType(
    {**{kt.value: kt for kt in KeyType}, **{kt.name: kt for kt in KeyType}}
)


def resolve_key_type(name: KeyType | str) -> KeyType:
    """Resolve a :class:`KeyType` from itself, its wire name or its member name.

    Parameters
    ----------
    name : KeyType or str
        ``KeyType.PRE_AUTH_TX``, ``"preAuthTx"`` and ``"PRE_AUTH_TX"`` all
        resolve to the same member.

    Returns
    -------
    KeyType
        The matching key type.

    Raises
    ------
    UnknownKeyTypeError
        If *name* does not match any registered key type.
    """
    if isinstance(name, KeyType):
        return name
    if isinstance(name, str):
        key_type = _BY_NAME.get(name)
        if key_type is not None:
            return key_type
    raise UnknownKeyTypeError(name)


def version_byte_of(key_type: KeyType | str) -> int:
    """Return the version byte for *key_type* (see :func:`resolve_key_type`)."""
    return resolve_key_type(key_type).version_byte
