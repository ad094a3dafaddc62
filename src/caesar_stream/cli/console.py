"""Shared Rich console for diagnostics.

All messages go to standard error: standard output may be the data
pipe carrying the transformed stream.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console() -> Console:
    """Create a Rich console instance targeting stderr."""
    return Console(stderr=True, soft_wrap=True, highlight=False)


console = get_rich_console()
