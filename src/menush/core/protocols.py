"""Protocols (interfaces) consumed by the core layer.

These define the contracts for the session's external collaborators:
the interactive front end, the process-execution primitive and the
audit sink.  Core code depends ONLY on these protocols — never on
concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol


class MenuFrontEnd(Protocol):
    """Contract for the terminal front end.

    Every reading method raises
    :class:`~menush.exceptions.InputCancelled` when the user interrupts
    or input reaches end-of-file.
    """

    def clear(self) -> None:
        """Erase the screen and move the cursor home."""
        ...  # pragma: no cover

    def choose(self, title: str, labels: Sequence[str]) -> int:
        """Present *labels* in order and return the zero-based index chosen."""
        ...  # pragma: no cover

    def ask_text(self, message: str, validate: Callable[[str], str]) -> str:
        """Read a line, re-prompting until *validate* accepts it.

        *validate* returns the accepted text or raises
        :class:`~menush.exceptions.InvalidArgumentInput`, whose message
        is shown before re-prompting.
        """
        ...  # pragma: no cover

    def notice(self, message: str) -> None:
        """Show an informational message."""
        ...  # pragma: no cover

    def pause(self, message: str) -> None:
        """Show *message* and block until the user presses Enter."""
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for the process-execution primitive."""

    def run(self, argv: Sequence[str]) -> int:
        """Run *argv* in the foreground and return its exit status.

        Must not raise for a failing or unstartable command; a failure
        is reported as a non-zero status.
        """
        ...  # pragma: no cover


class AuditSink(Protocol):
    """Contract for the append-only audit trail.

    Implementations are fail-open: a delivery failure must never raise.
    """

    def manifest_loaded(self, identity: str, path: str) -> None:
        ...  # pragma: no cover

    def command_started(self, identity: str, command_line: str) -> None:
        ...  # pragma: no cover

    def command_failed(self, status: int) -> None:
        ...  # pragma: no cover

    def fatal(self, message: str) -> None:
        ...  # pragma: no cover
