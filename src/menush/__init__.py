"""menush — restricted interactive menu shell.

Presents an authenticated user with an administrator-defined menu of
commands and refuses to run anything outside it.
"""

from menush.version import __version__

__all__: list[str] = ["__version__"]
