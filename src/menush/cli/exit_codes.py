"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The user chose ``Exit`` from the menu."""

GENERAL_ERROR: int = 1
"""A fatal MenushError (including user cancellation) ended the session."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
