"""Protocols (interfaces) consumed by the core layer.

The transform engine depends ONLY on these structural contracts, so it
works the same for regular files, standard streams and in-memory
buffers such as :class:`io.BytesIO`.
"""

from __future__ import annotations

from typing import Protocol


class ByteSource(Protocol):
    """Anything that can be read from in bounded chunks."""

    def read(self, size: int = -1, /) -> bytes:
        """Return up to *size* bytes; an empty result signals end of stream."""
        ...  # pragma: no cover


class ByteSink(Protocol):
    """Anything that accepts raw bytes."""

    def write(self, data: bytes, /) -> int | None:
        """Write *data* in full."""
        ...  # pragma: no cover
