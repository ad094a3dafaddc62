"""caesar-stream — Caesar cipher filter for byte streams.

Shifts the ASCII letters of a file or standard stream by a fixed
offset, leaving every other byte untouched.
"""

from caesar_stream.version import __version__

__all__: list[str] = ["__version__"]
