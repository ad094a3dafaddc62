"""Infrastructure layer — filesystem and standard stream access.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~caesar_stream.exceptions.CaesarStreamError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from caesar_stream.infra.streams import STANDARD_STREAM, StreamHandle, open_stream

__all__: list[str] = [
    "STANDARD_STREAM",
    "StreamHandle",
    "open_stream",
]
