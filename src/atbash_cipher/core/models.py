"""Domain models for the Atbash transcoder.

All models are **frozen** dataclasses or enums: immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Cipher constants
# ---------------------------------------------------------------------------

ALPHABET_SIZE: int = 26
"""Number of letters in the Latin alphabet the cipher mirrors."""

GROUP_SIZE: int = 5
"""Width of each ciphertext block produced by :func:`encode`."""

GROUP_SEPARATOR: str = " "
"""Separator placed between ciphertext blocks."""


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------

class CharClass(enum.Enum):
    """Class of a single input character, by ASCII range membership."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Substitution result (sum type)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Emitted:
    """A character produced by the substitution step."""

    char: str
    """Output character: always in ``a``–``z`` or ``0``–``9``."""


@dataclass(frozen=True, slots=True)
class Omitted:
    """No output: the input character is outside the cipher's alphabet."""

    source: str
    """The dropped input character, kept for diagnostics only."""


CipherResult = Emitted | Omitted
"""Outcome of substituting one character."""
