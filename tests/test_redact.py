from __future__ import annotations

from pystrkey._redact import redact_for_log, redact_strkey
from pystrkey.versions import KeyType
from vectors import SEQUENTIAL_SECRET_SEED, ZERO_PUBLIC_KEY


def test_redact_strkey_keeps_only_length() -> None:
    assert redact_strkey(SEQUENTIAL_SECRET_SEED) == "<redacted:56c>"
    assert redact_strkey(ZERO_PUBLIC_KEY) == "<redacted:56c>"
    assert redact_strkey("") == "<redacted:0c>"


def test_redact_strkey_non_string_shows_type() -> None:
    assert redact_strkey(b"raw") == "<bytes>"
    assert redact_strkey(None) == "<NoneType>"


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "command": "decode",
        "key_type": KeyType.ED25519_SECRET_SEED,
        "strkey": SEQUENTIAL_SECRET_SEED,
        "nested": {"data": "00ff", "seed": b"\x00" * 32},
        "blob": b"\x01\x02",
    }

    redacted = redact_for_log(payload)
    assert redacted["command"] == "decode"
    assert redacted["key_type"] == "ed25519SecretSeed"
    assert redacted["strkey"] == "<redacted>"
    assert redacted["nested"]["data"] == "<redacted>"
    assert redacted["nested"]["seed"] == "<redacted>"
    assert redacted["blob"] == "<bytes:2b>"


def test_redact_for_log_truncates_unlisted_key_names() -> None:
    # A run of public keys under a key that is not in the sensitive set.
    signers = ZERO_PUBLIC_KEY * 3
    redacted = redact_for_log({"signers": signers, "key_type": "preAuthTx"}, max_string=56)
    assert redacted["signers"] == f"{ZERO_PUBLIC_KEY}…<truncated>"
    assert redacted["key_type"] == "preAuthTx"
