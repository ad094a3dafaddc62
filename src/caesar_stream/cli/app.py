"""CLI application entry point and command routing for caesar-stream.

This module is the **sole error boundary** for the entire application.
It catches :class:`~caesar_stream.exceptions.CaesarStreamError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages via Rich on standard error and returning well-defined exit
codes.

Architecture notes
------------------
* No cipher logic lives here — all work is delegated to the core and
  infrastructure layers.
* Standard output is reserved for data and the help text; diagnostics
  go to the Rich console on standard error.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys

from rich.markup import escape

from caesar_stream.cli import exit_codes
from caesar_stream.cli.console import console
from caesar_stream.core.models import StreamDirection
from caesar_stream.core.shift_parser import parse_shift
from caesar_stream.core.transform import transform
from caesar_stream.exceptions import CaesarStreamError, WrongNumberOfArgumentsError
from caesar_stream.infra.streams import open_stream

HELP_COMMAND: str = "help"

_EPILOG = """\
Use '-' as input to read standard input and as output to write standard
output.  To decrypt, run again with 26 minus the encryption shift.

examples:
  caesar-stream 3 plain.txt secret.txt
  caesar-stream 23 secret.txt -
  echo 'Hello' | caesar-stream 13 - -

exit codes:
  0  success
  1  wrong number of arguments
  2  input or output could not be opened
  3  shift is not an integer in 0-255
  4  shift is not within 1-25
"""


# ---------------------------------------------------------------------------
# Usage text
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser that renders the usage text.

    Arguments are matched by count rather than parsed as options, so
    ``-`` and negative numbers always reach the shift and path handlers
    verbatim.  The parser only describes them for ``caesar-stream help``.
    """
    parser = argparse.ArgumentParser(
        prog="caesar-stream",
        description=(
            "Shift the ASCII letters of a stream by a fixed offset "
            "(Caesar cipher).  Every other byte is copied unchanged."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("shift", help="letter offset, an integer from 1 to 25")
    parser.add_argument("input", help="input file path, or '-' for standard input")
    parser.add_argument("output", help="output file path, or '-' for standard output")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_transform(shift_text: str, input_path: str, output_path: str) -> int:
    """Run the cipher from *input_path* to *output_path*.

    Flow:
    1. Parse and validate the shift.
    2. Open the input, then the output.  If the output fails, the input
       is closed before the error propagates.
    3. Stream the input through the cipher.
    4. Close both streams and report completion on stderr.
    """
    shift = parse_shift(shift_text)

    with open_stream(input_path, StreamDirection.INPUT) as source, open_stream(
        output_path, StreamDirection.OUTPUT
    ) as sink:
        processed = transform(source.stream, sink.stream, shift)

    console.print(f"[bold green]Done.[/bold green] {processed} bytes processed.")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the caesar-stream CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    WrongNumberOfArgumentsError
        Unless *argv* is ``["help"]`` or holds exactly three arguments.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    if arguments == [HELP_COMMAND]:
        _build_parser().print_help()
        return exit_codes.SUCCESS

    if len(arguments) != 3:
        raise WrongNumberOfArgumentsError(arguments)

    shift_text, input_path, output_path = arguments
    return _handle_transform(shift_text, input_path, output_path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at the null device.

    After the reader of a pipe has gone away, the interpreter would
    otherwise fail again flushing stdout at shutdown.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Known errors become a one-line message and their own exit code.
    Anything else is a defect: it is reported with its traceback and
    :data:`~caesar_stream.cli.exit_codes.UNEXPECTED_ERROR`, never with a
    user error code.
    """
    try:
        code = main()
        sys.exit(code)
    except CaesarStreamError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.for_error(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        if isinstance(exc, BrokenPipeError):
            _silence_stdout()
        console.print(
            "[bold red]Unexpected error.[/bold red] Please report this issue."
        )
        console.print_exception()
        sys.exit(exit_codes.UNEXPECTED_ERROR)
