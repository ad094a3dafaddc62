"""Custom exception hierarchy for caesar-stream.

Every user-facing failure is a subclass of :class:`CaesarStreamError`.
Raw ``OSError`` instances raised while opening streams must never
propagate beyond the infrastructure layer — they are caught there and
re-raised as :class:`StreamOpenError`.

Anything that is *not* a :class:`CaesarStreamError` is a defect in the
program and is reported by the CLI error boundary as such.

Hierarchy
---------
CaesarStreamError
├── WrongNumberOfArgumentsError
├── StreamOpenError
├── FailedToParseError
└── ShiftNotWithinRangeError
"""

from __future__ import annotations

from collections.abc import Sequence


class CaesarStreamError(Exception):
    """Base exception for all caesar-stream errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments -------------------------------------------------------------

class WrongNumberOfArgumentsError(CaesarStreamError):
    """Raised when the CLI is not given exactly three arguments."""

    def __init__(self, arguments: Sequence[str]) -> None:
        self.arguments: tuple[str, ...] = tuple(arguments)
        super().__init__(
            "Expected 3 arguments (shift, input, output), "
            f"got {len(self.arguments)}: {list(self.arguments)!r}",
            hint="Run 'caesar-stream help' for usage.",
        )


# --- Streams ---------------------------------------------------------------

class StreamOpenError(CaesarStreamError):
    """Raised when an input or output stream cannot be opened."""

    def __init__(self, message: str, *, direction: str, path: str) -> None:
        self.direction: str = direction
        """``"input"`` or ``"output"``."""
        self.path: str = path
        super().__init__(
            f"Problems opening provided {direction} file {path!r}: {message}"
        )


# --- Shift -----------------------------------------------------------------

class FailedToParseError(CaesarStreamError):
    """Raised when the shift argument is not an integer in 0-255."""

    def __init__(self, text: str) -> None:
        self.text: str = text
        super().__init__(f"Failed to parse {text!r} as a byte (0-255).")


class ShiftNotWithinRangeError(CaesarStreamError):
    """Raised when a parsed shift lies outside 1-25."""

    def __init__(self, value: int) -> None:
        self.value: int = value
        super().__init__(
            f"Shift {value} is not within range 1-25.",
            hint="A shift of 0 or 26 leaves every letter unchanged.",
        )
