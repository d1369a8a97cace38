"""Pure ciphertext grouping: the formatting stage of the transcoder.

Every function in this module is a **pure** transformation: no I/O,
no side effects, fully deterministic.  Grouping knows nothing about
the cipher; it only partitions an already-substituted string.
"""

from __future__ import annotations

from atbash_cipher.core.models import GROUP_SEPARATOR, GROUP_SIZE
from atbash_cipher.exceptions import InvalidGroupSizeError


def chunk(chars: str, size: int = GROUP_SIZE) -> list[str]:
    """Split *chars* into consecutive pieces of at most *size* characters.

    The final piece may be shorter.  Empty input yields an empty list.

    Raises
    ------
    InvalidGroupSizeError
        If *size* is smaller than 1.
    """
    if size < 1:
        raise InvalidGroupSizeError(
            f"Group size must be at least 1, got {size}.",
        )
    return [chars[start:start + size] for start in range(0, len(chars), size)]


def group_blocks(
    chars: str,
    size: int = GROUP_SIZE,
    separator: str = GROUP_SEPARATOR,
) -> str:
    """Join the chunks of *chars* with *separator*.

    ``group_blocks("gvhgrmt123")`` returns ``"gvhgr mt123"``.  No leading
    or trailing separator is ever produced.
    """
    return separator.join(chunk(chars, size))
