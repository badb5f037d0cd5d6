"""Command line interface: ``pystrkey encode|decode|validate``."""

from __future__ import annotations

import argparse
import base64
import logging
import sys
from collections.abc import Sequence

from pystrkey import __version__
from pystrkey._redact import redact_for_log
from pystrkey.codec import decode_check, encode_check, is_valid
from pystrkey.config import DATA_FORMATS, StrKeyConfig
from pystrkey.exceptions import StrKeyError
from pystrkey.versions import KeyType, resolve_key_type

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _parse_raw(value: str, data_format: str) -> bytes:
    text = value.strip()
    try:
        if data_format == "base64":
            return base64.b64decode(text, validate=True)
        return bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"data is not valid {data_format}: {exc}") from exc


def _format_raw(data: bytes, data_format: str) -> str:
    if data_format == "base64":
        return base64.b64encode(data).decode("ascii")
    return data.hex()


def _build_parser(config: StrKeyConfig) -> argparse.ArgumentParser:
    type_names = [kt.value for kt in KeyType]

    parser = argparse.ArgumentParser(prog="pystrkey", description="Encode, decode and validate strkeys.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-t",
        "--type",
        dest="key_type",
        choices=type_names,
        default=config.key_type.value,
        help=f"Key type (default: {config.key_type.value})",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", parents=[common], help="Encode raw bytes as a strkey")
    enc.add_argument("data", help="Raw identifier")
    enc.add_argument("--input-format", choices=DATA_FORMATS, default=config.data_format)

    dec = sub.add_parser("decode", parents=[common], help="Decode a strkey to raw bytes")
    dec.add_argument("strkey")
    dec.add_argument("--output-format", choices=DATA_FORMATS, default=config.data_format)

    val = sub.add_parser("validate", parents=[common], help="Check that a strkey is a valid 32-byte key")
    val.add_argument("strkey")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    try:
        config = StrKeyConfig.from_env()
    except StrKeyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    args = _build_parser(config).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logger.debug("Arguments: %s", redact_for_log(vars(args)))

    key_type = resolve_key_type(args.key_type)
    try:
        if args.command == "encode":
            print(encode_check(key_type, _parse_raw(args.data, args.input_format)))
        elif args.command == "decode":
            print(_format_raw(decode_check(key_type, args.strkey), args.output_format))
        else:
            valid = is_valid(key_type, args.strkey)
            print("valid" if valid else "invalid")
            return EXIT_OK if valid else EXIT_INVALID
    except (StrKeyError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK
