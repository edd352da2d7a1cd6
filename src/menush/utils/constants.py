"""Compiled-in constants.

menush reads no configuration file of its own and no environment
variables; every location it touches is fixed here.
"""

from __future__ import annotations

from pathlib import Path

PROGRAM_NAME: str = "menush"
"""Syslog identifier and console-script name."""

USER_MENU_DIR: Path = Path("/etc/menush")
"""Directory holding one manifest per identity."""

DEFAULT_MENU_NAME: str = "__default__"
"""Shared fallback manifest inside :data:`USER_MENU_DIR`."""

SYSLOG_ADDRESS: str = "/dev/log"
"""Local syslog socket used by the audit log."""

SYSLOG_FALLBACK_ADDRESS: tuple[str, int] = ("localhost", 514)
"""UDP syslog endpoint used when :data:`SYSLOG_ADDRESS` is missing."""

SAFE_ARGUMENT_CHARS: str = "-.+=_/, "
"""Punctuation allowed in user-supplied arguments, besides ASCII letters and digits."""

COMMAND_NOT_FOUND_STATUS: int = 127
"""Exit status reported when a command cannot be started."""
