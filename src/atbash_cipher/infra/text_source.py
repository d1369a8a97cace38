"""Infrastructure: reading input text from a file or a stream.

This module is the only place that touches the filesystem or stdin.

Rules
-----
* Every ``OSError`` / ``UnicodeDecodeError`` is re-raised as
  :class:`~atbash_cipher.exceptions.InputReadError`.
* No ``print()``: callers handle user-facing output.
* Line terminators are stripped; line content is returned verbatim.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from atbash_cipher.exceptions import InputReadError


def read_file_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Return the lines of the text file at *path*.

    Raises
    ------
    InputReadError
        If the file is missing, unreadable, or not valid *encoding*.
    """
    try:
        content = path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise InputReadError(
            f"Input file not found: {path}",
            hint="Check the path passed to --in-file.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise InputReadError(
            f"Input file is not valid {encoding}: {path}",
            hint="Re-save the file as UTF-8 text.",
        ) from exc
    except OSError as exc:
        raise InputReadError(f"Cannot read input file {path}: {exc}") from exc
    return content.splitlines()


def read_stream_lines(stream: TextIO) -> list[str]:
    """Return every line available on *stream* (typically ``sys.stdin``).

    Raises
    ------
    InputReadError
        If the stream cannot be read or decoded.
    """
    try:
        content = stream.read()
    except UnicodeDecodeError as exc:
        raise InputReadError(
            "Standard input is not valid text in the current encoding.",
            hint="Pipe UTF-8 text or use --in-file.",
        ) from exc
    except OSError as exc:
        raise InputReadError(f"Cannot read standard input: {exc}") from exc
    return content.splitlines()
