import pytest

from ibuttonconv import converters
from ibuttonconv.options import (
    CyfralOption,
    KeyProtocol,
    MetakomOption,
    UnsupportedProtocolError,
    convert,
    convert_cyfral,
    convert_metakom,
    error_description,
    options_for,
)

CYFRAL_LABELS = ["C1", "C2", "C2 (Alt)", "C3", "C4", "C5", "C6", "C7"]

DISPATCH_CASES = [
    (CyfralOption.C1, converters.cyfral_to_dallas_c1),
    (CyfralOption.C2, converters.cyfral_to_dallas_c2),
    (CyfralOption.C2_ALT, converters.cyfral_to_dallas_c2_alt),
    (CyfralOption.C3, converters.cyfral_to_dallas_c3),
    (CyfralOption.C4, converters.cyfral_to_dallas_c4),
    (CyfralOption.C5, converters.cyfral_to_dallas_c5),
    (CyfralOption.C6, converters.cyfral_to_dallas_c6),
    (CyfralOption.C7, converters.cyfral_to_dallas_c7),
]


def test_cyfral_option_menu_order():
    labels = [option.label for option in options_for(KeyProtocol.CYFRAL)]
    assert labels == CYFRAL_LABELS


def test_metakom_option_menu_order():
    labels = [option.label for option in options_for("Metakom")]
    assert labels == ["Direct", "Reversed"]


@pytest.mark.parametrize("protocol", [KeyProtocol.DS1990, "DS1992", "Unknown"])
def test_options_for_unsupported(protocol):
    with pytest.raises(UnsupportedProtocolError) as info:
        options_for(protocol)
    assert info.value.protocol == protocol


@pytest.mark.parametrize("option, function", DISPATCH_CASES)
def test_convert_cyfral_dispatch(option, function):
    code = b"\xa5\x3c"
    assert convert_cyfral(code, option) == function(code)
    assert convert(KeyProtocol.CYFRAL, code, option) == function(code)


def test_convert_cyfral_by_label():
    code = b"\x12\x34"
    assert convert_cyfral(code, "C2 (Alt)") == convert_cyfral(code, CyfralOption.C2_ALT)


def test_convert_metakom_options():
    code = b"\x01\x02\x03\x04"
    assert convert_metakom(code, MetakomOption.DIRECT)[1:5] == code
    assert convert_metakom(code, "Reversed")[1:5] == code[::-1]
    expected = convert_metakom(code, MetakomOption.REVERSED)
    assert convert("Metakom", code, MetakomOption.REVERSED) == expected


def test_convert_result_has_valid_crc():
    result = convert("Cyfral", b"\x55\xaa", CyfralOption.C6)
    assert converters.maxim_crc8(result) == 0


def test_mismatched_option():
    with pytest.raises(ValueError):
        convert(KeyProtocol.CYFRAL, b"\x00\x00", MetakomOption.DIRECT)
    with pytest.raises(ValueError):
        convert_metakom(b"\x00\x00\x00\x00", "C1")


def test_convert_unsupported_protocol():
    with pytest.raises(UnsupportedProtocolError):
        convert(KeyProtocol.DS1990, b"\x00" * 8, CyfralOption.C1)


def test_convert_wrong_data_length():
    with pytest.raises(ValueError):
        convert(KeyProtocol.METAKOM, b"\x00\x00", MetakomOption.DIRECT)


def test_error_descriptions():
    unsupported = UnsupportedProtocolError("DS1992")
    assert error_description(unsupported) == "Protocol is not supported"
    assert error_description(0) == "Protocol is not supported"
    assert error_description(7) == "Error occured"
    assert error_description(RuntimeError("boom")) == "Error occured"