"""Command-line composition.

Pure string transforms — no I/O.  The composed line is what the user
sees and what the audit log records; the argument vector built
alongside it is what actually gets executed, without a shell.
"""

from __future__ import annotations

import shlex

from menush.core.models import MenuEntry


def compose_command_line(entry: MenuEntry, user_args: str = "") -> str:
    """Join path, fixed defaults and user arguments with single spaces.

    Surrounding whitespace is trimmed, so empty segments leave no
    trailing space: ``/bin/echo hello world`` or ``/bin/date``.
    """
    return f"{entry.path} {entry.defaults} {user_args}".strip()


def split_defaults(defaults: str) -> list[str]:
    """Split administrator *defaults* using POSIX shell quoting rules.

    Raises
    ------
    ValueError
        On unbalanced quotes.
    """
    return shlex.split(defaults)


def build_argv(entry: MenuEntry, user_args: str = "") -> list[str]:
    """Return the argument vector for *entry*.

    The executable path is kept as a single element even if it contains
    spaces.  User arguments have already passed the allow-list, which
    excludes quotes, so they split on whitespace.
    """
    return [entry.path, *split_defaults(entry.defaults), *user_args.split()]
