from __future__ import annotations

import pytest

from pystrkey._constants import ENCODED_KEY_LENGTH, encoded_length
from pystrkey.exceptions import StrKeyErrorKind, UnknownKeyTypeError
from pystrkey.versions import VERSION_BYTES, KeyType, resolve_key_type, version_byte_of


class TestVersionBytes:
    def test_values(self) -> None:
        assert KeyType.ED25519_PUBLIC_KEY.version_byte == 0x30
        assert KeyType.ED25519_SECRET_SEED.version_byte == 0x90
        assert KeyType.PRE_AUTH_TX.version_byte == 0x98
        assert KeyType.SHA256_HASH.version_byte == 0xB8

    def test_every_key_type_is_registered(self) -> None:
        assert set(VERSION_BYTES) == set(KeyType)

    def test_prefixes(self) -> None:
        assert [kt.prefix for kt in KeyType] == ["G", "S", "T", "X"]

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            VERSION_BYTES[KeyType.PRE_AUTH_TX] = 0  # type: ignore[index]


class TestResolveKeyType:
    @pytest.mark.parametrize("name", [KeyType.PRE_AUTH_TX, "preAuthTx", "PRE_AUTH_TX"])
    def test_accepts_member_wire_name_and_member_name(self, name: KeyType | str) -> None:
        assert resolve_key_type(name) is KeyType.PRE_AUTH_TX

    @pytest.mark.parametrize("name", ["accountId", "seed", "preauthtx", "", 0x30, None])
    def test_unknown_name_raises(self, name: object) -> None:
        with pytest.raises(UnknownKeyTypeError) as exc_info:
            resolve_key_type(name)  # type: ignore[arg-type]
        assert exc_info.value.name == name
        assert exc_info.value.kind is StrKeyErrorKind.UNKNOWN_KEY_TYPE

    def test_version_byte_of_by_name(self) -> None:
        assert version_byte_of("sha256Hash") == 0xB8


def test_encoded_length() -> None:
    assert ENCODED_KEY_LENGTH == 56
    assert encoded_length(32) == 56
    assert encoded_length(0) == 5
    assert encoded_length(33) == 58
    with pytest.raises(ValueError):
        encoded_length(-1)
