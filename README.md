# ibuttonconv

Convert the data of Cyfral and Metakom iButton keys into Dallas DS1990
key codes.

Intercom readers built for Cyfral or Metakom keys are often fitted with an
adapter that also accepts Dallas keys. The adapter maps each Cyfral or
Metakom code onto a DS1990 code in one of several known ways. This package
computes those DS1990 codes together with their 1-Wire CRC-8 check byte.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Conversions

Every conversion returns an 8-byte DS1990 code as `bytes`: family byte
`0x01`, six data bytes and a Maxim/Dallas CRC-8 over the first seven bytes.

Cyfral keys hold 2 bytes of data and have the methods C1, C2, C2 (Alt), C3,
C4, C5, C6 and C7. C4 always yields `01 FF FF FF FF 00 00 9B`, whatever the
input.

Metakom keys hold 4 bytes of data and have two methods: Direct, which copies
the bytes in order, and Reversed, which copies them in reverse order.

Input of the wrong length raises `ValueError`; an `int` or `str` in place of
the byte sequence raises `TypeError`.

## Library use

`ibuttonconv.converters` has one function per method, each taking the
source bytes (any `bytes` or iterable of ints) and returning the DS1990 code:

```python
from ibuttonconv.converters import (
    cyfral_to_dallas_c1,
    cyfral_to_dallas_c4,
    maxim_crc8,
    metakom_to_dallas,
)

cyfral_to_dallas_c4(b"\x12\x34")            # b"\x01\xff\xff\xff\xff\x00\x00\x9b"
dallas = cyfral_to_dallas_c1(b"\x12\x34")
reversed_dallas = metakom_to_dallas(b"\x01\x02\x03\x04", True)
crc = maxim_crc8(dallas[:7])                # equals dallas[7]
```

The other functions are `cyfral_to_dallas_c2`, `cyfral_to_dallas_c2_alt`,
`cyfral_to_dallas_c3`, `cyfral_to_dallas_c5`, `cyfral_to_dallas_c6` and
`cyfral_to_dallas_c7`, plus the helpers `cyfral_bits_to_nibble_c3` and
`cyfral_to_intermediate_c3` used by the C3 method.

`ibuttonconv.options` selects a conversion by protocol and method:

- `KeyProtocol` names the protocols `DS1990`, `Cyfral` and `Metakom`.
- `CyfralOption` and `MetakomOption` name the methods; each member's
  `label` is its menu text, such as `"C2 (Alt)"` or `"Reversed"`.
- `options_for(protocol)` returns the methods a protocol offers.
- `convert(protocol, data, option)` performs the chosen conversion;
  `convert_cyfral` and `convert_metakom` do the same for one protocol each.
  Protocols and options may be given as enum members or by their text.
- Any protocol other than Cyfral or Metakom, DS1990 included, raises
  `UnsupportedProtocolError`. An option that does not belong to the
  protocol raises `ValueError`.
- `error_description(error)` returns the message shown for an error:
  `"Protocol is not supported"` for `UnsupportedProtocolError` (or error
  code `0`), `"Error occured"` for anything else.

## Command line

Installing the package provides the `ibuttonconv` command:

```
ibuttonconv PROTOCOL [DATA OPTION] [--source PATH] [--info]
```

Given only a protocol, it lists the methods that protocol offers:

```
$ ibuttonconv Metakom
Direct
Reversed
```

Given the source bytes in hex (spaces, colons and dashes between digits are
allowed) and a method, it prints the DS1990 code:

```
$ ibuttonconv Cyfral 1234 C4
01 FF FF FF FF 00 00 9B
$ ibuttonconv Cyfral "12 34" "C2 (Alt)"
```

`--info` prints an information block instead: the source key's name, the
protocol `DS1990` and the code. The name is taken from `--source PATH`: the
file name without its extension, cut to 22 characters.

Exit status is 0 on success, 1 for an unsupported protocol and 2 for bad
hex data, a wrong data length or an unknown method; the message goes to
standard error.

## What it does not do

The package works on key bytes given to it directly. It does not read or
write `.ibtn` key files, does not talk to any key reader or writer, and has
no interactive menu: `--source` is used only to name the source key.