"""``atbash doctor``: environment diagnostics command.

Gathers system information, runs a short cipher self-test and renders a
Rich table summarising whether the runtime environment is healthy.

This module lives in the CLI layer: it may import from ``core`` and
it renders via Rich.  No cipher logic resides here; the self-test only
calls the public transcoder.
"""

from __future__ import annotations

import platform
import string
import sys
from importlib import metadata

from atbash_cipher.cli import exit_codes
from atbash_cipher.cli.console import console, rich_available
from atbash_cipher.core.models import Emitted
from atbash_cipher.core.transcoder import decode, encode, substitute
from atbash_cipher.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich is optional at runtime, so a missing install is only a warning.
    """
    if not rich_available():
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _self_test_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the cipher self-test row."""
    failures: list[str] = []
    if encode("test") != "gvhg":
        failures.append("encode")
    if decode(encode("Attack at dawn 1066")) != "attackatdawn1066":
        failures.append("round-trip")
    for letter in string.ascii_lowercase:
        once = substitute(letter)
        if not isinstance(once, Emitted) or substitute(once.char) != Emitted(letter):
            failures.append("involution")
            break

    if failures:
        return "self-test", ", ".join(failures), "[red]FAIL[/red]"
    return "self-test", "encode, decode, involution", "[green]OK[/green]"


def _platform_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the platform row.

    Informational only; the cipher has no platform-specific behaviour.
    """
    return "platform", platform.platform(terse=True), "[green]OK[/green]"


def _package_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the atbash-cipher version row."""
    return "atbash-cipher", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\natbash doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<34} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<34} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _package_version_check(),
        _python_version_check(),
        _rich_check(),
        _self_test_check(),
        _platform_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    use_rich = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        use_rich = False

    if use_rich:
        table = Table(
            title="atbash doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=14)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if use_rich:
            console.print("[bold red]atbash is not ready: see the FAIL rows above.[/bold red]")
        else:
            print("atbash is not ready: see the FAIL rows above.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if use_rich:
        console.print("[bold green]atbash is ready to encode and decode.[/bold green]")
    else:
        print("atbash is ready to encode and decode.", file=sys.stderr)
    return exit_codes.SUCCESS
