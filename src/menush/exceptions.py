"""Custom exception hierarchy for menush.

Every error condition the shell knows about maps to a subclass of
:class:`MenushError`.  Only :class:`InvalidArgumentInput` is recovered
locally (the user is re-prompted); the others unwind to the single
shutdown point in :mod:`menush.cli.app`.

Hierarchy
---------
MenushError
├── ConfigurationError
├── InputCancelled
├── InvalidArgumentInput
└── EnvironmentError
"""

from __future__ import annotations


class MenushError(Exception):
    """Base exception for all menush errors.

    The CLI error boundary renders ``str(exc)`` and the optional hint,
    and writes the message to the audit log.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Manifest --------------------------------------------------------------

class ConfigurationError(MenushError):
    """Raised when no usable manifest can be loaded.

    Covers a missing or unreadable file, a parse failure, a malformed
    record and a non-executable command path.  Always fatal.
    """


# --- User input ------------------------------------------------------------

class InputCancelled(MenushError):
    """Raised when the user interrupts or closes input at any prompt."""

    def __init__(self, message: str = "Exiting.", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class InvalidArgumentInput(MenushError):
    """Raised when an argument string contains a disallowed character."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MenushError):
    """Raised when a required runtime dependency is not available."""
