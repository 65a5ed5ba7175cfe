"""Conversion options offered for each source key protocol."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from . import converters

__all__ = [
    "KeyProtocol",
    "CyfralOption",
    "MetakomOption",
    "UnsupportedProtocolError",
    "convert_cyfral",
    "convert_metakom",
    "options_for",
    "convert",
    "error_description",
]

UNSUPPORTED_PROTOCOL_ERROR = 0

_UNSUPPORTED_TEXT = "Protocol is not supported"
_GENERIC_TEXT = "Error occured"


class KeyProtocol(Enum):
    """Key protocols known to the converter, by their protocol name."""

    DS1990 = "DS1990"
    CYFRAL = "Cyfral"
    METAKOM = "Metakom"


class CyfralOption(Enum):
    """Cyfral conversion methods, in menu order."""

    C1 = "C1"
    C2 = "C2"
    C2_ALT = "C2 (Alt)"
    C3 = "C3"
    C4 = "C4"
    C5 = "C5"
    C6 = "C6"
    C7 = "C7"

    @property
    def label(self) -> str:
        return self.value


class MetakomOption(Enum):
    """Metakom conversion methods, in menu order."""

    DIRECT = "Direct"
    REVERSED = "Reversed"

    @property
    def label(self) -> str:
        return self.value


class UnsupportedProtocolError(Exception):
    """Raised when a key of a protocol that cannot be converted is given."""

    def __init__(self, protocol: object) -> None:
        self.protocol = protocol
        name = protocol.value if isinstance(protocol, KeyProtocol) else protocol
        super().__init__(f"{_UNSUPPORTED_TEXT}: {name}")


_CYFRAL_CONVERTERS: dict[CyfralOption, Callable[[bytes], bytes]] = {
    CyfralOption.C1: converters.cyfral_to_dallas_c1,
    CyfralOption.C2: converters.cyfral_to_dallas_c2,
    CyfralOption.C2_ALT: converters.cyfral_to_dallas_c2_alt,
    CyfralOption.C3: converters.cyfral_to_dallas_c3,
    CyfralOption.C4: converters.cyfral_to_dallas_c4,
    CyfralOption.C5: converters.cyfral_to_dallas_c5,
    CyfralOption.C6: converters.cyfral_to_dallas_c6,
    CyfralOption.C7: converters.cyfral_to_dallas_c7,
}


def _resolve_protocol(protocol: KeyProtocol | str) -> KeyProtocol:
    if isinstance(protocol, KeyProtocol):
        return protocol
    try:
        return KeyProtocol(protocol)
    except ValueError:
        raise UnsupportedProtocolError(protocol) from None


def _coerce_option(option, option_type):
    if isinstance(option, option_type):
        return option
    if isinstance(option, str):
        try:
            return option_type(option)
        except ValueError:
            pass
    raise ValueError(f"{option!r} is not a {option_type.__name__}")


def convert_cyfral(cyfral_code: bytes | Iterable[int], option: CyfralOption | str) -> bytes:
    """Convert a two-byte Cyfral code to a DS1990 code with the given method."""
    return _CYFRAL_CONVERTERS[_coerce_option(option, CyfralOption)](cyfral_code)


def convert_metakom(metakom_code: bytes | Iterable[int], option: MetakomOption | str) -> bytes:
    """Convert a four-byte Metakom code to a DS1990 code with the given method."""
    chosen = _coerce_option(option, MetakomOption)
    return converters.metakom_to_dallas(metakom_code, chosen is MetakomOption.REVERSED)


def options_for(protocol: KeyProtocol | str) -> tuple[Enum, ...]:
    """Return the conversion options offered for a key of ``protocol``."""
    resolved = _resolve_protocol(protocol)
    if resolved is KeyProtocol.METAKOM:
        return tuple(MetakomOption)
    if resolved is KeyProtocol.CYFRAL:
        return tuple(CyfralOption)
    raise UnsupportedProtocolError(protocol)


def convert(protocol: KeyProtocol | str, data: bytes | Iterable[int], option) -> bytes:
    """Convert key ``data`` of ``protocol`` to a DS1990 code."""
    resolved = _resolve_protocol(protocol)
    if resolved is KeyProtocol.METAKOM:
        return convert_metakom(data, option)
    if resolved is KeyProtocol.CYFRAL:
        return convert_cyfral(data, option)
    raise UnsupportedProtocolError(protocol)


def error_description(error: object) -> str:
    """Return the text shown for an error, given as an exception or an error code."""
    if isinstance(error, UnsupportedProtocolError):
        return _UNSUPPORTED_TEXT
    if isinstance(error, int) and not isinstance(error, bool) and error == UNSUPPORTED_PROTOCOL_ERROR:
        return _UNSUPPORTED_TEXT
    return _GENERIC_TEXT