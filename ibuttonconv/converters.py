"""Conversions of Cyfral and Metakom key codes into Dallas DS1990 ROM codes."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "maxim_crc8",
    "cyfral_bits_to_nibble_c3",
    "cyfral_to_intermediate_c3",
    "metakom_to_dallas",
    "cyfral_to_dallas_c1",
    "cyfral_to_dallas_c2",
    "cyfral_to_dallas_c2_alt",
    "cyfral_to_dallas_c3",
    "cyfral_to_dallas_c4",
    "cyfral_to_dallas_c5",
    "cyfral_to_dallas_c6",
    "cyfral_to_dallas_c7",
]

CYFRAL_SIZE = 2
METAKOM_SIZE = 4
DALLAS_SIZE = 8

_DALLAS_FAMILY = 0x01

_C5_C6_NIBBLES_MAP = (
    0xF, 0xB, 0x7, 0x3, 0xE, 0xA, 0x6, 0x2,
    0xD, 0x9, 0x5, 0x1, 0xC, 0x8, 0x4, 0x0,
)

_C3_NIBBLES = {0b00: 0x08, 0b01: 0x04, 0b10: 0x02, 0b11: 0x01}


def _as_bytes(code: bytes | Iterable[int], size: int, kind: str) -> bytes:
    if isinstance(code, (int, str)):
        raise TypeError(f"{kind} code must be a sequence of bytes")
    data = bytes(code)
    if len(data) != size:
        raise ValueError(f"{kind} code must be {size} bytes long, got {len(data)}")
    return data


def _finish(body: Iterable[int]) -> bytes:
    """Append the Maxim CRC to the first seven bytes of a Dallas ROM code."""
    head = bytes(body)
    return head + bytes([maxim_crc8(head)])


def maxim_crc8(data: bytes | Iterable[int], crc: int = 0) -> int:
    """Return the Dallas/Maxim 1-Wire CRC-8 of ``data`` starting from ``crc``."""
    crc &= 0xFF
    for byte in bytes(data):
        for _ in range(8):
            mix = (crc ^ byte) & 0x01
            crc >>= 1
            if mix:
                crc ^= 0x8C
            byte >>= 1
    return crc


def cyfral_bits_to_nibble_c3(val: int) -> int:
    """Map the two low bits of ``val`` to a one-hot nibble."""
    return _C3_NIBBLES[val & 0b11]


def cyfral_to_intermediate_c3(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Expand a Cyfral code into the four-byte form used by the C3 method."""
    code = _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    parts = []
    for byte in code:
        hi = (cyfral_bits_to_nibble_c3(byte >> 6) << 4) | cyfral_bits_to_nibble_c3(byte >> 4)
        lo = (cyfral_bits_to_nibble_c3(byte >> 2) << 4) | cyfral_bits_to_nibble_c3(byte)
        parts.append((hi, lo))
    (hi0, lo0), (hi1, lo1) = parts
    return bytes([hi1, lo1, hi0, lo0])


def metakom_to_dallas(metakom_code: bytes | Iterable[int], reversed: bool = False) -> bytes:
    """Convert a Metakom code, optionally with its bytes in reverse order."""
    code = _as_bytes(metakom_code, METAKOM_SIZE, "Metakom")
    if reversed:
        code = code[::-1]
    return _finish(bytes([_DALLAS_FAMILY]) + code + b"\x00\x00")


def cyfral_to_dallas_c1(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with method C1."""
    code = _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    return _finish(bytes([_DALLAS_FAMILY]) + code + b"\x01\x00\x00\x00")


def cyfral_to_dallas_c2(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with method C2."""
    code = _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    first_hi, first_lo = code[0] >> 4, code[0] & 0x0F
    second_hi, second_lo = code[1] >> 4, code[1] & 0x0F

    first_hi |= (second_lo & 0x02) << 1
    second_lo |= second_lo >> 3

    return _finish(
        [
            _DALLAS_FAMILY,
            (first_hi << 4) | first_lo,
            (second_hi << 4) | second_lo,
            0x01, 0x00, 0x00, 0x00,
        ]
    )


def cyfral_to_dallas_c2_alt(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with the alternative C2 method."""
    code = _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    mask_high = code[1] & 0xAA
    first = code[1] | (mask_high >> 3)
    second = code[0] | ((mask_high << 5) & 0xFF)
    return _finish([_DALLAS_FAMILY, second, first, 0x01, 0x00, 0x00, 0x00])


def cyfral_to_dallas_c3(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with method C3."""
    intermediate = cyfral_to_intermediate_c3(cyfral_code)
    return _finish(bytes([_DALLAS_FAMILY]) + intermediate + b"\x00\x00")


def cyfral_to_dallas_c4(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Return the fixed code of method C4; the Cyfral code only gets validated."""
    _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    return bytes([0x01, 0xFF, 0xFF, 0xFF, 0xFF, 0x00, 0x00, 0x9B])


def _cyfral_to_dallas_c5_c6(cyfral_code: bytes | Iterable[int], is_c5: bool) -> bytes:
    code = _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    body = [_DALLAS_FAMILY]
    for position, byte in enumerate(code):
        nibble_hi = _C5_C6_NIBBLES_MAP[byte >> 4]
        nibble_lo = _C5_C6_NIBBLES_MAP[byte & 0x0F]
        if is_c5 and position == 1:
            nibble_hi = 0
        body.append((nibble_hi << 4) | nibble_lo)
    body.extend([0x80, 0x00, 0x00, 0x00])
    return _finish(body)


def cyfral_to_dallas_c5(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with method C5."""
    return _cyfral_to_dallas_c5_c6(cyfral_code, True)


def cyfral_to_dallas_c6(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with method C6."""
    return _cyfral_to_dallas_c5_c6(cyfral_code, False)


def cyfral_to_dallas_c7(cyfral_code: bytes | Iterable[int]) -> bytes:
    """Convert a Cyfral code with method C7 (every nibble inverted)."""
    code = _as_bytes(cyfral_code, CYFRAL_SIZE, "Cyfral")
    inverted = bytes(((0xF - (b >> 4)) << 4) | (0xF - (b & 0x0F)) for b in code)
    return _finish(bytes([_DALLAS_FAMILY]) + inverted + b"\x00\x00\x00\x00")