"""Core layer — pure cipher logic and value objects.

Rules
-----
* No ``print()`` calls.
* No filesystem access; streams are passed in by the caller.
* No imports from ``cli`` or ``infra``.
"""

from caesar_stream.core.models import Shift, StreamDirection
from caesar_stream.core.protocols import ByteSink, ByteSource
from caesar_stream.core.shift_parser import parse_shift
from caesar_stream.core.transform import (
    BUFFER_SIZE,
    decrypt,
    encrypt,
    shift_bytes,
    transform,
)

__all__: list[str] = [
    "BUFFER_SIZE",
    "ByteSink",
    "ByteSource",
    "Shift",
    "StreamDirection",
    "decrypt",
    "encrypt",
    "parse_shift",
    "shift_bytes",
    "transform",
]
