"""
Conversions between big numbers and their native and textual forms.
"""

import re

from petlib.bn import Bn

from cpzk.exceptions import InputTypeError


_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"-?0[xX][0-9a-fA-F]+")


def ensure_bn(x, name="value"):
    """
    Ensure that value is big number.

    Accepts big numbers, Python integers and strings holding a decimal number or a
    ``0x``-prefixed hexadecimal number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> ensure_bn("0x2a") == ensure_bn(" 42 ")
    True

    Args:
        x: Value to convert.
        name: Name of the argument, used in error messages.

    Raises:
        InputTypeError: If the value is not integer-like.
    """
    if isinstance(x, Bn):
        return x

    # bool is an int subclass, but never a meaningful group value.
    if isinstance(x, int) and not isinstance(x, bool):
        # Through hex, since int to decimal str is capped in length.
        value = Bn.from_hex(format(abs(x), "x"))
        return -value if x < 0 else value

    if isinstance(x, str):
        text = x.strip()
        negative = text.startswith("-")
        if _DECIMAL_RE.fullmatch(text):
            value = Bn.from_decimal(text.lstrip("-"))
        elif _HEX_RE.fullmatch(text):
            value = Bn.from_hex(text.lstrip("-")[2:])
        else:
            raise InputTypeError(
                "Malformed number for {0}: {1!r}. Expected a decimal or 0x-prefixed "
                "hexadecimal string.".format(name, x)
            )
        return -value if negative else value

    raise InputTypeError(
        "Wrong type of {0}: {1}. Expected a big number, an int or a string.".format(
            name, type(x).__name__
        )
    )


def bn_to_str(x, encoding="dec"):
    """
    Render a big number as a decimal or ``0x``-prefixed lowercase hex string.

    >>> bn_to_str(Bn(255), encoding="hex")
    '0xff'
    """
    x = ensure_bn(x)
    if encoding == "dec":
        return x.repr()
    elif encoding == "hex":
        magnitude = -x if x < 0 else x
        digits = magnitude.hex().lower().lstrip("0") or "0"
        return ("-0x" if x < 0 else "0x") + digits
    raise ValueError("Unknown encoding: {}".format(encoding))
