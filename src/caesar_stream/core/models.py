"""Domain models for caesar-stream.

Both models are immutable value objects with no I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from caesar_stream.exceptions import ShiftNotWithinRangeError

ALPHABET_SIZE: int = 26
"""Number of letters in each case-specific ASCII alphabet."""

SHIFT_MIN: int = 1
SHIFT_MAX: int = ALPHABET_SIZE - 1


# ---------------------------------------------------------------------------
# Shift
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Shift:
    """A validated letter offset in ``SHIFT_MIN..SHIFT_MAX``.

    Shifts of 0 and 26 would leave every letter in place, so they are
    rejected at construction time.
    """

    value: int

    def __post_init__(self) -> None:
        if not SHIFT_MIN <= self.value <= SHIFT_MAX:
            raise ShiftNotWithinRangeError(self.value)

    def inverse(self) -> Shift:
        """Return the shift that undoes this one (``26 - value``)."""
        return Shift(ALPHABET_SIZE - self.value)


# ---------------------------------------------------------------------------
# Stream direction
# ---------------------------------------------------------------------------

class StreamDirection(enum.Enum):
    """Which end of the pipeline a stream is bound to."""

    INPUT = "input"
    OUTPUT = "output"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.value
