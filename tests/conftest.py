"""Shared pytest fixtures and configuration for the atbash-cipher test suite.

Guidelines
----------
* No internet access in any test.
* Core tests must be pure: no side effects.
* Filesystem tests use ``tmp_path`` only; tests must not depend on OS state.
"""

from __future__ import annotations
