import pytest

from petlib.bn import Bn

from cpzk.exceptions import InputTypeError
from cpzk.utils import ensure_bn, bn_to_str


BIG = 2 ** 2100 + 12345


def test_ensure_bn_passes_bn_through():
    value = Bn(42)
    assert ensure_bn(value) is value


def test_ensure_bn_int():
    assert ensure_bn(42) == Bn(42)
    assert int(ensure_bn(BIG)) == BIG
    assert int(ensure_bn(-BIG)) == -BIG


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42),
        ("  42\n", 42),
        ("-7", -7),
        ("0x2a", 42),
        ("0X2A", 42),
        ("-0xff", -255),
        (str(BIG), BIG),
        (hex(BIG), BIG),
    ],
)
def test_ensure_bn_strings(text, expected):
    assert int(ensure_bn(text)) == expected


@pytest.mark.parametrize(
    "value", ["", "abc", "12abc", "0x", "0xzz", "1.5", "+-3", "ff", None, 1.0, True, [1], b"12"]
)
def test_ensure_bn_rejects_malformed(value):
    with pytest.raises(InputTypeError):
        ensure_bn(value)


def test_ensure_bn_error_names_argument():
    with pytest.raises(InputTypeError, match="response"):
        ensure_bn("nope", "response")


def test_input_type_error_is_type_error():
    with pytest.raises(TypeError):
        ensure_bn(object())


def test_bn_to_str():
    assert bn_to_str(Bn(255)) == "255"
    assert bn_to_str(Bn(255), encoding="hex") == "0xff"
    assert int(ensure_bn(bn_to_str(ensure_bn(BIG), "hex"))) == BIG


def test_bn_to_str_unknown_encoding():
    with pytest.raises(ValueError):
        bn_to_str(Bn(1), encoding="base64")


HUGE = 2 ** 20000 + 1


@pytest.mark.parametrize("value", [HUGE, -HUGE], ids=["huge", "negative-huge"])
def test_ensure_bn_int_beyond_str_digit_limit(value):
    bn = ensure_bn(value)
    assert bn_to_str(bn, encoding="hex") == hex(value)


def test_bn_to_str_decimal_beyond_str_digit_limit():
    bn = ensure_bn(HUGE)
    text = bn_to_str(bn)
    assert len(text) > 4300
    assert text.endswith("1")
    assert ensure_bn(text) == bn
    assert bn_to_str(-bn) == "-" + text


def test_bn_to_str_hex_has_no_padding():
    assert bn_to_str(Bn(8), encoding="hex") == "0x8"
    assert bn_to_str(Bn(0), encoding="hex") == "0x0"
    assert bn_to_str(Bn(-255), encoding="hex") == "-0xff"
    assert bn_to_str(Bn(0)) == "0"
