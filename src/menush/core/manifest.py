"""Pure manifest validation.

Turns the raw records produced by the YAML parser into a
:class:`~menush.core.models.Manifest`.  Validation is fail-closed: the
first bad record aborts the whole load, no entry is skipped.

The executability check is injected so this module performs no
filesystem access itself.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from menush.core.command_line import split_defaults
from menush.core.models import Manifest, MenuEntry
from menush.exceptions import ConfigurationError

BAD_FORMAT_MESSAGE: str = "Bad command menu format"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def build_entry(record: Any, is_executable: Callable[[str], bool]) -> MenuEntry:
    """Validate a single raw *record* and return a :class:`MenuEntry`.

    Raises
    ------
    ConfigurationError
        ``"Bad command menu format"`` for structural problems, or
        ``"Invalid command: <path>"`` when *path* is not executable.
    """
    if not isinstance(record, dict):
        raise ConfigurationError(BAD_FORMAT_MESSAGE)

    prompt = record.get("prompt")
    path = record.get("path")
    if _is_blank(prompt) or _is_blank(path) or not isinstance(path, str):
        raise ConfigurationError(BAD_FORMAT_MESSAGE)

    allow_args = record.get("allow_args")
    if allow_args is None:
        allow_args = False
    elif not isinstance(allow_args, bool):
        raise ConfigurationError(
            BAD_FORMAT_MESSAGE,
            hint=f"allow_args must be true or false (entry {prompt!r}).",
        )

    defaults = record.get("defaults")
    defaults = "" if defaults is None else str(defaults)
    try:
        split_defaults(defaults)
    except ValueError as exc:
        raise ConfigurationError(
            BAD_FORMAT_MESSAGE,
            hint=f"defaults for entry {prompt!r} cannot be parsed: {exc}",
        ) from exc

    if not is_executable(path):
        raise ConfigurationError(f"Invalid command: {path}")

    return MenuEntry(
        prompt=str(prompt),
        path=path,
        defaults=defaults,
        allow_args=allow_args,
    )


def build_manifest(
    records: Any,
    is_executable: Callable[[str], bool],
) -> Manifest:
    """Validate every record in *records* and return the manifest.

    *records* must be a list; an empty list yields an empty manifest.
    """
    if not isinstance(records, list):
        raise ConfigurationError(BAD_FORMAT_MESSAGE)
    return Manifest(
        entries=tuple(build_entry(record, is_executable) for record in records),
    )
