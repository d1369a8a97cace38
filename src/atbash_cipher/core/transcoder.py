"""Pure Atbash transcoder.

Pipeline order (enforced by :func:`encode`):

1. **Classify**: ASCII range test per character.
2. **Substitute**: mirror letters, keep digits, omit everything else.
3. **Group**: optionally split the result into blocks of five.

Classification is limited to the ASCII ranges; a
Unicode-aware ``str.isalpha`` would match letters such as ``é`` that
the cipher has no mirror for.
"""

from __future__ import annotations

import string
from collections.abc import Iterable

from atbash_cipher.core.grouping import group_blocks
from atbash_cipher.core.models import (
    ALPHABET_SIZE,
    CharClass,
    CipherResult,
    Emitted,
    Omitted,
)

_ASCII_WHITESPACE: frozenset[str] = frozenset(string.whitespace)


# ---------------------------------------------------------------------------
# 1. Classify
# ---------------------------------------------------------------------------

def classify(char: str) -> CharClass:
    """Return the :class:`CharClass` of a single character.

    Anything that is not exactly one character is ``OTHER``.
    """
    if len(char) != 1:
        return CharClass.OTHER
    if "a" <= char <= "z":
        return CharClass.LOWER
    if "A" <= char <= "Z":
        return CharClass.UPPER
    if "0" <= char <= "9":
        return CharClass.DIGIT
    return CharClass.OTHER


# ---------------------------------------------------------------------------
# 2. Substitute
# ---------------------------------------------------------------------------

def _mirror(char: str, base: str) -> str:
    """Reflect *char* within the alphabet starting at *base*; emit lowercase."""
    index = ord(char) - ord(base)
    return chr(ord("a") + ALPHABET_SIZE - 1 - index)


def substitute(char: str) -> CipherResult:
    """Substitute one character.

    * ``a``–``z`` and ``A``–``Z`` map to the lowercase letter at the
      mirrored position (``a``/``A`` → ``z``, ``m`` → ``n``).
    * ``0``–``9`` are emitted unchanged.
    * Anything else is :class:`Omitted`.
    """
    char_class = classify(char)
    if char_class is CharClass.LOWER:
        return Emitted(_mirror(char, "a"))
    if char_class is CharClass.UPPER:
        return Emitted(_mirror(char, "A"))
    if char_class is CharClass.DIGIT:
        return Emitted(char)
    return Omitted(char)


def transcode(text: Iterable[str]) -> str:
    """Substitute every character of *text* and drop the omitted ones."""
    produced: list[str] = []
    for char in text:
        result = substitute(char)
        if isinstance(result, Emitted):
            produced.append(result.char)
    return "".join(produced)


# ---------------------------------------------------------------------------
# 3. Public encode / decode
# ---------------------------------------------------------------------------

def encode(text: Iterable[str], group: bool = True) -> str:
    """Encipher *text*, grouping the output into blocks of five by default.

    Never raises for string input; characters outside ``[A-Za-z0-9]``
    simply do not appear in the result.
    """
    produced = transcode(text)
    if group:
        return group_blocks(produced)
    return produced


def decode(text: Iterable[str]) -> str:
    """Decipher *text*.

    Atbash is its own inverse, so this is :func:`encode` without
    grouping.  Block separators in the input are ordinary spaces and
    are dropped like any other non-encodable character.
    """
    return encode(text, group=False)


# ---------------------------------------------------------------------------
# Input inspection
# ---------------------------------------------------------------------------

def find_unencodable(
    text: Iterable[str],
    *,
    allow_whitespace: bool = True,
) -> tuple[str, ...]:
    """Return the distinct characters of *text* that :func:`substitute` omits.

    Characters are reported in order of first appearance.  ASCII
    whitespace is skipped when *allow_whitespace* is true, since it is the expected
    separator in both plaintext and grouped ciphertext.
    """
    seen: set[str] = set()
    found: list[str] = []
    for char in text:
        if char in seen:
            continue
        if allow_whitespace and char in _ASCII_WHITESPACE:
            continue
        if isinstance(substitute(char), Omitted):
            seen.add(char)
            found.append(char)
    return tuple(found)
