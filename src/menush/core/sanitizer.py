"""Allow-list validation of user-supplied command arguments.

The whole candidate string must consist of ASCII letters, ASCII digits
and the punctuation in :data:`~menush.utils.constants.SAFE_ARGUMENT_CHARS`.
Nothing is stripped or escaped: a string with one bad character is
rejected outright and the caller re-prompts.
"""

from __future__ import annotations

import re

from menush.exceptions import InvalidArgumentInput
from menush.utils.constants import SAFE_ARGUMENT_CHARS

SAFE_ARGUMENT_PATTERN: re.Pattern[str] = re.compile(
    rf"[A-Za-z0-9{re.escape(SAFE_ARGUMENT_CHARS)}]*",
    re.ASCII,
)

INVALID_ARGUMENT_MESSAGE: str = (
    "Only letters, digits, spaces and - . + = _ / , are allowed."
)


def is_safe_argument(text: str) -> bool:
    """Return ``True`` when every character of *text* is allowed.

    The empty string is accepted and means "no extra arguments".
    """
    return SAFE_ARGUMENT_PATTERN.fullmatch(text) is not None


def sanitize_arguments(text: str) -> str:
    """Return *text* unchanged, or raise :class:`InvalidArgumentInput`."""
    if not is_safe_argument(text):
        raise InvalidArgumentInput(INVALID_ARGUMENT_MESSAGE)
    return text
