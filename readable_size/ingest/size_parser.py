"""Parse readable size strings like '1 KiB' or '1.523 KB' into exact byte counts.

The parser is strict. Each stage fails with its own error:
1. Reject leading whitespace
2. Take the longest decimal literal at the start of the string
3. Skip whitespace, then take the following run of non-whitespace as the unit
4. Reject anything but whitespace after the unit
5. Look up the lower-cased unit, multiply exactly and round up to whole bytes
"""

import decimal
import math
import re
import string
from typing import Iterable

from readable_size.errors import (
    InvalidNumericComponentError,
    LeadingWhitespaceError,
    NegativeSizeError,
    ResultTooLargeError,
    TrailingCharactersError,
    UnknownUnitError,
)
from readable_size.units import UINT64_MAX, lookup_multiplier

_NUMERIC_RE = re.compile(
    r"(?P<mantissa>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))(?:[eE](?P<exponent>[+-]?[0-9]+))?"
)
_UNIT_RE = re.compile(r"\s*(\S*)", re.ASCII)

# Unit symbols are ASCII; str.lower() would also fold e.g. KELVIN SIGN to 'k'
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Digits of the largest multiplier (1024 ** 6), plus one
_MULTIPLIER_DIGITS = 20

# Any non-zero mantissa shifted this many places past its own length is
# above UINT64_MAX, or below one byte after multiplying
_EXPONENT_SLACK = 2 * _MULTIPLIER_DIGITS


def _clamped_literal(number: re.Match) -> str:
    """Return the scanned literal with its exponent clamped to a small range.

    Clamping keeps the sign, the zero-ness and the side of the UInt64 range
    (or of one byte) that the value falls on, so the parse result is unchanged.
    """
    mantissa = number.group("mantissa")
    exponent = number.group("exponent")
    if exponent is None:
        return mantissa

    bound = len(mantissa) + _EXPONENT_SLACK
    digits = exponent.lstrip("+-").lstrip("0") or "0"
    if len(digits) > len(str(bound)):
        magnitude = bound
    else:
        magnitude = min(int(digits), bound)
    sign = "-" if exponent.startswith("-") else ""
    return f"{mantissa}e{sign}{magnitude}"


def _raw_bytes(literal: str, multiplier: int) -> decimal.Decimal:
    """Multiply the literal by the unit multiplier without any rounding."""
    with decimal.localcontext() as ctx:
        ctx.prec = len(literal) + _MULTIPLIER_DIGITS
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        return decimal.Decimal(literal) * multiplier


def parse_readable_size(text: str) -> int:
    """Convert a readable size string into a byte count.

    Fractional byte counts are rounded up, giving the smallest whole number
    of bytes that holds the requested size: '1.0001 KiB' is 1025 bytes.

    Only ASCII digits and ASCII whitespace are recognised.

    Raises a ReadableSizeError subclass describing the first problem found.
    """
    if text and text[0] in string.whitespace:
        raise LeadingWhitespaceError(text)

    number = _NUMERIC_RE.match(text)
    if not number:
        raise InvalidNumericComponentError(text)

    unit_match = _UNIT_RE.match(text, number.end())
    if text[unit_match.end():].strip(string.whitespace):
        raise TrailingCharactersError(text)

    unit = unit_match.group(1).translate(_ASCII_LOWER)
    multiplier = lookup_multiplier(unit)
    if multiplier is None:
        raise UnknownUnitError(unit)

    raw = _raw_bytes(_clamped_literal(number), multiplier)
    if raw < 0:
        raise NegativeSizeError(text)
    if raw > UINT64_MAX:
        raise ResultTooLargeError(str(raw))

    return math.ceil(raw)


def parse_readable_sizes(values: Iterable[str]) -> list[int]:
    """Parse every value in order. The first invalid value aborts the whole batch."""
    return [parse_readable_size(value) for value in values]
