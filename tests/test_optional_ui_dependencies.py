"""Regression tests for the optional Rich dependency.

These tests verify that every command keeps working when Rich is not
importable: results still reach stdout and diagnostics fall back to
plain stderr output.
"""

from __future__ import annotations

import sys

import pytest

from atbash_cipher.cli import exit_codes
from atbash_cipher.cli.app import cli, main
from atbash_cipher.cli.console import escape, get_rich_console, rich_available
from atbash_cipher.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_encode_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["encode", "test"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "gvhg\n"


def test_doctor_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code == exit_codes.SUCCESS
    err = capsys.readouterr().err
    assert "NOT INSTALLED" in err
    assert "atbash is ready to encode and decode." in err


def test_error_boundary_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["atbash", "decode", "--strict", "gv!hg"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "cannot be enciphered" in capsys.readouterr().err


def test_rich_console_reports_missing_dependency(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    assert rich_available() is False
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape("[/x] path") == "[/x] path"
