"""Infrastructure: resolve the authenticated identity.

The login name comes from the controlling terminal, falling back to
the password database entry for the real uid.  Environment variables
such as ``USER`` are never consulted.
"""

from __future__ import annotations

import os
import pwd

from menush.exceptions import ConfigurationError


def current_identity() -> str:
    """Return the name of the currently authenticated user.

    Raises
    ------
    ConfigurationError
        When neither source yields a name.
    """
    try:
        return os.getlogin()
    except OSError:
        pass

    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError as exc:
        raise ConfigurationError(
            "Unable to determine the current user.",
        ) from exc
