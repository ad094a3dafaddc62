"""Parse the command-line shift argument into a :class:`Shift`.

Parsing happens in two stages with distinct failures:

1. **Syntax** — the text must be a decimal integer that fits an
   unsigned byte (0-255), else :class:`FailedToParseError`.
2. **Range** — the value must lie in 1-25, else
   :class:`ShiftNotWithinRangeError`.
"""

from __future__ import annotations

import re

from caesar_stream.core.models import Shift
from caesar_stream.exceptions import FailedToParseError

BYTE_MAX: int = 0xFF

_ASCII_WHITESPACE: str = " \t\n\v\f\r"
_INTEGER_RE = re.compile(r"([+-]?)([0-9]+)")


def parse_byte(text: str) -> int:
    """Parse *text* as an unsigned 8-bit integer.

    Surrounding ASCII whitespace, an explicit sign and any number of
    leading zeros are accepted, so ``" +7 "``, ``"0007"`` and ``"-0"``
    parse while ``"-1"``, ``"256"`` and ``"1_0"`` do not.

    Raises
    ------
    FailedToParseError
        If *text* is not a decimal integer in 0-255.
    """
    match = _INTEGER_RE.fullmatch(text.strip(_ASCII_WHITESPACE))
    if match is None:
        raise FailedToParseError(text)
    sign, digits = match.groups()
    # Bound the length before int(), which refuses very long digit strings.
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(BYTE_MAX)):
        raise FailedToParseError(text)
    value = int(digits)
    if sign == "-" and value != 0:
        raise FailedToParseError(text)
    if value > BYTE_MAX:
        raise FailedToParseError(text)
    return value


def parse_shift(text: str) -> Shift:
    """Parse and validate a shift argument.

    Raises
    ------
    FailedToParseError
        If *text* is not a decimal integer in 0-255.
    ShiftNotWithinRangeError
        If the parsed value is outside 1-25.
    """
    return Shift(parse_byte(text))
