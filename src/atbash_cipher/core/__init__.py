"""Core layer: the pure Atbash transcoder.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from atbash_cipher.core.grouping import chunk, group_blocks
from atbash_cipher.core.models import (
    GROUP_SEPARATOR,
    GROUP_SIZE,
    CharClass,
    CipherResult,
    Emitted,
    Omitted,
)
from atbash_cipher.core.transcoder import (
    classify,
    decode,
    encode,
    find_unencodable,
    substitute,
    transcode,
)

__all__: list[str] = [
    "GROUP_SEPARATOR",
    "GROUP_SIZE",
    "CharClass",
    "CipherResult",
    "Emitted",
    "Omitted",
    "chunk",
    "classify",
    "decode",
    "encode",
    "find_unencodable",
    "group_blocks",
    "substitute",
    "transcode",
]
