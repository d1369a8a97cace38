"""Allow ``python -m atbash_cipher`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m atbash_cipher`` behaves identically to the ``atbash``
console script.
"""

from __future__ import annotations

from atbash_cipher.cli.app import cli

if __name__ == "__main__":
    cli()
