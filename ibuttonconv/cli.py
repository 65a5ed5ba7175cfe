"""Command line front end: convert a Cyfral or Metakom key into a DS1990 key."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .options import (
    KeyProtocol,
    UnsupportedProtocolError,
    convert,
    error_description,
    options_for,
)

__all__ = ["ConvertedKey", "parse_hex", "key_name_from_path", "main"]

KEY_NAME_SIZE = 23
APP_FILENAME_EXTENSION = ".ibtn"

_HEX_SEPARATORS = re.compile(r"[\s:\-]+")


@dataclass(frozen=True)
class ConvertedKey:
    """A DS1990 key produced from a source key."""

    source_name: str
    data: bytes
    protocol: KeyProtocol = KeyProtocol.DS1990

    def hex(self) -> str:
        """Return the key bytes as space separated upper-case hex pairs."""
        return " ".join(f"{byte:02X}" for byte in self.data)

    def render_info(self) -> str:
        """Return the text of the information screen for this key."""
        return f"Source key: {self.source_name}\n{self.protocol.value}\n{self.hex()}\n"


def parse_hex(text: str) -> bytes:
    """Parse hex bytes written with or without spaces, colons or dashes."""
    digits = _HEX_SEPARATORS.sub("", text)
    if not digits:
        raise ValueError("no hex digits given")
    if len(digits) % 2:
        raise ValueError(f"odd number of hex digits in {text!r}")
    try:
        return bytes.fromhex(digits)
    except ValueError:
        raise ValueError(f"invalid hex data {text!r}") from None


def key_name_from_path(path: str | os.PathLike[str]) -> str:
    """Return the file name of ``path`` without its extension, cut to the key name size."""
    name = os.path.basename(os.fspath(path))
    stem, _ = os.path.splitext(name)
    return stem[: KEY_NAME_SIZE - 1]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ibuttonconv",
        description="Convert a Cyfral or Metakom key code into a DS1990 key code.",
    )
    parser.add_argument("protocol", help="protocol of the source key: Cyfral or Metakom")
    parser.add_argument("data", nargs="?", help="source key bytes in hex")
    parser.add_argument(
        "option",
        nargs="?",
        help="conversion method; leave out to list the methods available",
    )
    parser.add_argument(
        "--source",
        metavar="PATH",
        help="path of the source key file, used to name the source key",
    )
    parser.add_argument(
        "--info", action="store_true", help="show the information screen of the converted key"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        available = options_for(args.protocol)
    except UnsupportedProtocolError as exc:
        print(error_description(exc), file=sys.stderr)
        return 1

    if args.data is None or args.option is None:
        for option in available:
            print(option.label)
        return 0

    try:
        source = parse_hex(args.data)
        data = convert(args.protocol, source, args.option)
    except UnsupportedProtocolError as exc:
        print(error_description(exc), file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{error_description(exc)}: {exc}", file=sys.stderr)
        return 2

    source_name = key_name_from_path(args.source) if args.source else ""
    key = ConvertedKey(source_name=source_name, data=data)
    print(key.render_info() if args.info else key.hex(), end="\n" if not args.info else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())