"""Configuration for the pystrkey command line."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pystrkey.exceptions import StrKeyConfigError, UnknownKeyTypeError
from pystrkey.versions import KeyType, resolve_key_type

DATA_FORMATS: tuple[str, ...] = ("hex", "base64")

_ENV_CONFIG_MAP = {
    "STRKEY_KEY_TYPE": "key_type",
    "STRKEY_DATA_FORMAT": "data_format",
    "STRKEY_LOG_LEVEL": "log_level",
}


@dataclasses.dataclass(frozen=True)
class StrKeyConfig:
    """Command line configuration.

    Parameters
    ----------
    key_type : KeyType
        Key type used when ``--type`` is not given.
    data_format : str
        How raw bytes are written on the command line: ``"hex"`` or
        ``"base64"``.
    log_level : str
        Root log level name (e.g. ``"DEBUG"``).
    """

    key_type: KeyType = KeyType.ED25519_PUBLIC_KEY
    data_format: str = "hex"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "key_type", resolve_key_type(self.key_type))
        except UnknownKeyTypeError as exc:
            raise StrKeyConfigError(f"invalid key_type: {exc}") from exc

        data_format = str(self.data_format).strip().lower()
        if data_format not in DATA_FORMATS:
            raise StrKeyConfigError(f"data_format must be one of {', '.join(DATA_FORMATS)} (got {self.data_format!r})")
        object.__setattr__(self, "data_format", data_format)

        log_level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise StrKeyConfigError(f"unknown log_level {self.log_level!r}")
        object.__setattr__(self, "log_level", log_level)

    @classmethod
    def from_env(cls, **overrides: Any) -> StrKeyConfig:
        """Create configuration from ``STRKEY_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        StrKeyConfigError
            If a value is not recognised.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
