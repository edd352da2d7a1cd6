"""Domain models for menush.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The manifest is loaded once per process
and never changes afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Menu entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MenuEntry:
    """One permitted command."""

    prompt: str
    """Label shown in the menu."""

    path: str
    """Absolute path to the executable, checked at load time."""

    defaults: str = ""
    """Fixed arguments from the manifest, appended verbatim."""

    allow_args: bool = False
    """Whether the user is asked for extra arguments before running."""


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Manifest:
    """Immutable, ordered collection of :class:`MenuEntry` items.

    Order is display order.  The tuple guarantees immutability.
    """

    entries: tuple[MenuEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> MenuEntry:
        return self.entries[index]

    @property
    def prompts(self) -> list[str]:
        return [entry.prompt for entry in self.entries]


# ---------------------------------------------------------------------------
# Loop outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Continue:
    """Loop step finished; present the menu again."""


@dataclass(frozen=True, slots=True)
class Terminate:
    """Loop step asks the session to end with *code*."""

    code: int = 0


Outcome = Continue | Terminate
