"""Infrastructure layer: external system integration.

This layer wraps all interaction with the filesystem and standard
streams.  Every raw OS exception must be caught here and re-raised as
an :class:`~atbash_cipher.exceptions.AtbashError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from atbash_cipher.infra.text_source import read_file_lines, read_stream_lines

__all__: list[str] = [
    "read_file_lines",
    "read_stream_lines",
]
