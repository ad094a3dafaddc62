"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

from caesar_stream.exceptions import (
    CaesarStreamError,
    FailedToParseError,
    ShiftNotWithinRangeError,
    StreamOpenError,
    WrongNumberOfArgumentsError,
)

SUCCESS: int = 0
"""Clean exit — the stream was transformed or help was shown."""

WRONG_NUMBER_OF_ARGUMENTS: int = 1
"""The CLI was not given exactly three arguments."""

IO_ERROR: int = 2
"""The input or output stream could not be opened."""

FAILED_TO_PARSE: int = 3
"""The shift argument is not an integer in 0-255."""

SHIFT_NOT_WITHIN_RANGE: int = 4
"""The shift argument is outside 1-25."""

UNEXPECTED_ERROR: int = 70
"""An exception outside the known hierarchy escaped.  Matches
``EX_SOFTWARE`` from ``sysexits.h`` and never collides with a user error."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""


_ERROR_CODES: dict[type[CaesarStreamError], int] = {
    WrongNumberOfArgumentsError: WRONG_NUMBER_OF_ARGUMENTS,
    StreamOpenError: IO_ERROR,
    FailedToParseError: FAILED_TO_PARSE,
    ShiftNotWithinRangeError: SHIFT_NOT_WITHIN_RANGE,
}


def for_error(exc: CaesarStreamError) -> int:
    """Return the exit code for a user-facing error.

    Subclasses inherit the code of their nearest mapped ancestor; a bare
    :class:`CaesarStreamError` maps to ``WRONG_NUMBER_OF_ARGUMENTS`` (1),
    the generic failure code.
    """
    for cls in type(exc).__mro__:
        if cls in _ERROR_CODES:
            return _ERROR_CODES[cls]
    return WRONG_NUMBER_OF_ARGUMENTS
