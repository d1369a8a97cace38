"""CLI application entry point and command routing for atbash-cipher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~atbash_cipher.exceptions.AtbashError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No cipher logic lives here: all work is delegated to the core and
  infrastructure layers.
* Cipher results are written to stdout as plain lines; everything else
  goes through the stderr console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from atbash_cipher.cli import exit_codes
from atbash_cipher.cli.console import console, escape
from atbash_cipher.exceptions import AtbashError
from atbash_cipher.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to process.  Read from --in-file or stdin when omitted.",
    )
    parser.add_argument(
        "--in-file",
        type=Path,
        default=None,
        help="Read input from a UTF-8 file, one result per line.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject input containing characters the cipher would drop.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``atbash encode [TEXT]``: encipher, grouped in blocks of five
    * ``atbash decode [TEXT]``: decipher, ungrouped
    * ``atbash doctor``: environment diagnostics
    * ``atbash --version``
    """
    parser = argparse.ArgumentParser(
        prog="atbash",
        description="Atbash substitution cipher.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encipher text.")
    _add_input_arguments(encode_parser)
    encode_parser.add_argument(
        "--no-group",
        dest="group",
        action="store_false",
        help="Do not split ciphertext into blocks of five.",
    )

    decode_parser = subparsers.add_parser("decode", help="Decipher text.")
    _add_input_arguments(decode_parser)

    subparsers.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _load_lines(args: argparse.Namespace) -> list[str]:
    """Return the input lines selected by *args*."""
    from atbash_cipher.infra.text_source import read_file_lines, read_stream_lines

    if args.text is not None:
        return [args.text]
    if args.in_file is not None:
        return read_file_lines(args.in_file)
    return read_stream_lines(sys.stdin)


def _check_strict(lines: list[str]) -> None:
    """Raise :class:`UnencodableInputError` if any line holds droppable text."""
    from atbash_cipher.core.transcoder import find_unencodable
    from atbash_cipher.exceptions import UnencodableInputError

    offending = find_unencodable("\n".join(lines))
    if offending:
        raise UnencodableInputError(
            offending,
            hint="Only A-Z, a-z, 0-9 and whitespace are accepted with --strict.",
        )


def _handle_transcode(
    args: argparse.Namespace,
    transform: Callable[[str], str],
) -> int:
    """Apply *transform* to every input line and print one result per line."""
    lines = _load_lines(args)
    if args.strict:
        _check_strict(lines)
    for line in lines:
        print(transform(line))
    return exit_codes.SUCCESS


def _handle_encode(args: argparse.Namespace) -> int:
    from atbash_cipher.core.transcoder import encode

    return _handle_transcode(args, lambda line: encode(line, group=args.group))


def _handle_decode(args: argparse.Namespace) -> int:
    from atbash_cipher.core.transcoder import decode

    return _handle_transcode(args, decode)


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from atbash_cipher.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the atbash CLI.

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
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor()

    if args.command == "encode":
        return _handle_encode(args)

    return _handle_decode(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_error(exc: AtbashError) -> None:
    """Render a known error and its hint; user text is never read as markup."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AtbashError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted; no further input was processed.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Internal error in atbash.[/bold red] "
            "This is a bug; please report it.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
