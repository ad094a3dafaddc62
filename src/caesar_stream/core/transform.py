"""Letter-preserving Caesar transform over byte streams.

Only ASCII letters move: ``A-Z`` and ``a-z`` each rotate within their
own 26-letter alphabet, every other byte is copied verbatim.  The
per-byte mapping is precomputed once per shift as a 256-entry
translation table, so transforming a chunk is a single
:meth:`bytes.translate` call.

Streaming discipline (enforced by :func:`transform`):

1. **Read** — up to ``buffer_size`` bytes from the source.
2. **Translate** — the whole chunk through the table.
3. **Write** — the full chunk to the sink, then repeat.

An empty read ends the loop.  The input is never held in memory as a
whole and the source does not need to be seekable.
"""

from __future__ import annotations

from functools import lru_cache

from caesar_stream.core.models import ALPHABET_SIZE, Shift
from caesar_stream.core.protocols import ByteSink, ByteSource

BUFFER_SIZE: int = 64 * 1024
"""Maximum number of bytes read from the source per iteration."""

_UPPER_A: int = ord("A")
_LOWER_A: int = ord("a")


# ---------------------------------------------------------------------------
# Byte mapping
# ---------------------------------------------------------------------------

def _shift_byte(byte: int, offset: int) -> int:
    for base in (_UPPER_A, _LOWER_A):
        if base <= byte < base + ALPHABET_SIZE:
            return (byte - base + offset) % ALPHABET_SIZE + base
    return byte


@lru_cache(maxsize=ALPHABET_SIZE)
def translation_table(shift: Shift) -> bytes:
    """Return the 256-byte translation table for *shift*."""
    return bytes(_shift_byte(byte, shift.value) for byte in range(256))


# ---------------------------------------------------------------------------
# In-memory helpers
# ---------------------------------------------------------------------------

def shift_bytes(data: bytes, shift: Shift) -> bytes:
    """Shift every ASCII letter in *data* forward by *shift*."""
    return data.translate(translation_table(shift))


def encrypt(data: bytes, shift: Shift) -> bytes:
    """Encrypt *data* with *shift*."""
    return shift_bytes(data, shift)


def decrypt(data: bytes, shift: Shift) -> bytes:
    """Undo :func:`encrypt` by shifting with ``26 - shift``."""
    return shift_bytes(data, shift.inverse())


# ---------------------------------------------------------------------------
# Streaming
# ---------------------------------------------------------------------------

def transform(
    source: ByteSource,
    sink: ByteSink,
    shift: Shift,
    *,
    buffer_size: int = BUFFER_SIZE,
) -> int:
    """Stream *source* through the cipher into *sink*.

    Blocks for as long as *source* blocks; reading an interactive
    standard input only ends when end-of-file is signalled.

    Returns
    -------
    int
        Total number of bytes written, always equal to the number read.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    table = translation_table(shift)
    total = 0
    while chunk := source.read(buffer_size):
        sink.write(chunk.translate(table))
        total += len(chunk)
    return total
