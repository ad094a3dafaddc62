"""Allow ``python -m caesar_stream`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m caesar_stream`` behaves identically to the
``caesar-stream`` console script.
"""

from __future__ import annotations

from caesar_stream.cli.app import cli

if __name__ == "__main__":
    cli()
