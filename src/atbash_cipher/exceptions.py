"""Custom exception hierarchy for atbash-cipher.

The transcoder itself is total: any string input produces a string
output and non-encodable characters are silently omitted.  The
exceptions below cover the layers around it (input reading, strict
validation in the CLI, optional UI dependencies) plus the one
programming error the formatting stage can detect.

Raw third-party or OS exceptions must NEVER propagate beyond the
infrastructure layer: they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
AtbashError
├── InvalidGroupSizeError
├── UnencodableInputError
├── InputReadError
└── EnvironmentError
"""

from __future__ import annotations


class AtbashError(Exception):
    """Base exception for all atbash-cipher errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Formatting ------------------------------------------------------------

class InvalidGroupSizeError(AtbashError):
    """Raised when ciphertext grouping is requested with a size below 1."""


# --- Input validation ------------------------------------------------------

class UnencodableInputError(AtbashError):
    """Raised in strict mode when input holds characters the cipher drops."""

    def __init__(
        self,
        characters: tuple[str, ...],
        *,
        hint: str | None = None,
    ) -> None:
        shown = ", ".join(repr(ch) for ch in characters)
        super().__init__(
            f"Input contains characters that cannot be enciphered: {shown}",
            hint=hint,
        )
        self.characters: tuple[str, ...] = characters


# --- Input reading ---------------------------------------------------------

class InputReadError(AtbashError):
    """Raised when input text cannot be read from a file or stdin."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AtbashError):
    """Raised when an optional runtime dependency is not available."""
