"""Infrastructure: opening the input and output streams.

The reserved path ``-`` selects the process's standard input or
standard output; anything else is treated as a filesystem path.

Rules
-----
* Every ``OSError`` raised while opening is re-raised as
  :class:`~caesar_stream.exceptions.StreamOpenError`.
* Standard streams are borrowed, never closed.
* On POSIX, input files take a shared advisory ``flock`` so that a
  writer holding an exclusive lock makes opening fail.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import BinaryIO

if sys.platform != "win32":
    import fcntl

from caesar_stream.core.models import StreamDirection
from caesar_stream.exceptions import StreamOpenError

STANDARD_STREAM: str = "-"
"""Path token denoting stdin (as input) or stdout (as output)."""


# ---------------------------------------------------------------------------
# Handle
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class StreamHandle:
    """An open binary stream bound to one end of the pipeline.

    Attributes
    ----------
    stream : BinaryIO
        The underlying binary stream.
    path : str
        The path it was opened from, or ``"-"``.
    direction : StreamDirection
        Whether this is the input or the output.
    owned : bool
        ``True`` when the handle opened the stream itself and must close
        it.  Standard streams are not owned.
    """

    stream: BinaryIO
    path: str
    direction: StreamDirection
    owned: bool
    closed: bool = False

    def close(self) -> None:
        """Release the stream; safe to call more than once.

        Owned streams are closed.  A borrowed standard output is only
        flushed so the process can keep writing to it.
        """
        if self.closed:
            return
        self.closed = True
        if self.owned:
            self.stream.close()
        elif self.direction is StreamDirection.OUTPUT:
            self.stream.flush()

    def __enter__(self) -> StreamHandle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Opening
# ---------------------------------------------------------------------------

def open_stream(path: str, direction: StreamDirection) -> StreamHandle:
    """Open *path* for the given *direction*.

    ``INPUT`` opens an existing file read-only; ``OUTPUT`` creates or
    truncates the file for writing.

    Raises
    ------
    StreamOpenError
        If the file cannot be opened (missing, permission denied, is a
        directory, locked by a writer, ...).
    TypeError
        If *direction* is not a :class:`StreamDirection`.  This is a
        programming error and deliberately not a user-facing one.
    """
    if not isinstance(direction, StreamDirection):
        raise TypeError(f"Unknown stream direction {direction!r}.")

    if path == STANDARD_STREAM:
        return StreamHandle(
            stream=_standard_stream(direction),
            path=path,
            direction=direction,
            owned=False,
        )

    mode = "rb" if direction is StreamDirection.INPUT else "wb"
    try:
        stream = open(path, mode)  # noqa: SIM115
    except OSError as exc:
        raise StreamOpenError(
            exc.strerror or str(exc),
            direction=direction.label,
            path=path,
        ) from exc

    if direction is StreamDirection.INPUT:
        try:
            _lock_against_writers(stream)
        except OSError as exc:
            stream.close()
            raise StreamOpenError(
                "file is locked by another writer",
                direction=direction.label,
                path=path,
            ) from exc
    return StreamHandle(stream=stream, path=path, direction=direction, owned=True)


def _lock_against_writers(stream: BinaryIO) -> None:
    """Take a non-blocking shared lock on *stream*.

    Readers may share the file; an exclusive lock held elsewhere raises
    ``BlockingIOError``.  The lock is released when the stream closes.
    Windows has no ``flock`` and is left unlocked.
    """
    if sys.platform == "win32":
        return
    fcntl.flock(stream.fileno(), fcntl.LOCK_SH | fcntl.LOCK_NB)


def _standard_stream(direction: StreamDirection) -> BinaryIO:
    """Return the binary buffer behind stdin or stdout."""
    if direction is StreamDirection.INPUT:
        return sys.stdin.buffer
    return sys.stdout.buffer
