"""String quoting and numeric text helpers shared by the encoder and decoder."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Final

# Escaped control characters mapped to the characters they revive to.
UNESCAPES: Final = MappingProxyType(
    {
        "\\": "\\",
        '"': '"',
        "/": "/",
        "b": "\b",
        "t": "\t",
        "n": "\n",
        "f": "\f",
        "r": "\r",
    }
)

# Characters with a two-character escape when quoted.
ESCAPES: Final = MappingProxyType(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)

# Longest exponent-free form allowed for large numbers (1e21 is the first
# value written with an exponent).
_MAX_PLAIN_EXPONENT: Final = 21
_MIN_PLAIN_EXPONENT: Final = -6


def pad_zero(width: int, value: int | str) -> str:
    """Left-pads the text of ``value`` with zeros to ``width`` characters."""
    return str(value).rjust(width, "0")


def _build_quote_table() -> dict[int, str]:
    table = {ord(char): escaped for char, escaped in ESCAPES.items()}
    for code in range(0x20):
        table.setdefault(code, "\\u" + pad_zero(4, format(code, "x")))
    return table


_QUOTE_TABLE: Final = _build_quote_table()


def quote(text: str) -> str:
    """
    Double-quotes a string, escaping quotes, backslashes and control characters.

    Control characters without a short escape are written as ``\\u00XX`` with
    lowercase hex digits; every other character is passed through as-is.
    """
    return '"' + text.translate(_QUOTE_TABLE) + '"'


def _shortest_digits(number: float) -> tuple[str, int]:
    """
    Splits a positive finite float into its shortest round-trip digits and
    decimal point position ``n`` so that ``number == 0.digits * 10**n``.
    """
    mantissa, _, exponent = repr(number).partition("e")
    integral, _, fraction = mantissa.partition(".")
    digits = integral + fraction
    point = len(integral) + (int(exponent) if exponent else 0)

    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    return stripped.rstrip("0"), point


def format_number(number: float) -> str:
    """
    Formats a float the way script engines print numbers.

    Integral values drop their fraction (``1.0`` is ``"1"``), negative zero
    prints as ``"0"`` and exponents are used below ``1e-6`` and from ``1e21``.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"
    if number < 0:
        return "-" + format_number(-number)

    digits, point = _shortest_digits(number)
    count = len(digits)

    if count <= point <= _MAX_PLAIN_EXPONENT:
        return digits + "0" * (point - count)
    if 0 < point <= _MAX_PLAIN_EXPONENT:
        return digits[:point] + "." + digits[point:]
    if _MIN_PLAIN_EXPONENT < point <= 0:
        return "0." + "0" * -point + digits

    exponent = point - 1
    sign = "+" if exponent >= 0 else "-"
    head = digits if count == 1 else digits[0] + "." + digits[1:]
    return f"{head}e{sign}{abs(exponent)}"
