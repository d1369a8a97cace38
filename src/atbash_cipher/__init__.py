"""atbash-cipher: the Atbash substitution cipher as a library and CLI.

The public API re-exports the pure transcoder from :mod:`atbash_cipher.core`.
"""

from atbash_cipher.core import (
    GROUP_SIZE,
    CharClass,
    CipherResult,
    Emitted,
    Omitted,
    classify,
    decode,
    encode,
    find_unencodable,
    group_blocks,
    substitute,
)
from atbash_cipher.version import __version__

__all__: list[str] = [
    "GROUP_SIZE",
    "CharClass",
    "CipherResult",
    "Emitted",
    "Omitted",
    "__version__",
    "classify",
    "decode",
    "encode",
    "find_unencodable",
    "group_blocks",
    "substitute",
]
