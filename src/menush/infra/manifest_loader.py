"""Infrastructure: locate, read and parse the manifest for an identity.

Resolution order
----------------
1. ``<config-dir>/<identity>`` if that file exists.
2. ``<config-dir>/__default__`` otherwise.

The chosen file must be readable, parse as YAML, and pass
:func:`~menush.core.manifest.build_manifest`.  Every failure becomes a
:class:`~menush.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from menush.core.manifest import build_manifest
from menush.core.models import Manifest
from menush.exceptions import ConfigurationError
from menush.utils.constants import DEFAULT_MENU_NAME, USER_MENU_DIR

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE: str = "No menu definition found!"


def is_executable(path: str) -> bool:
    """Return ``True`` for an absolute path to an executable regular file."""
    return (
        os.path.isabs(path)
        and os.path.isfile(path)
        and os.access(path, os.X_OK)
    )


class ManifestLoader:
    """Loads the manifest that applies to an identity.

    Parameters
    ----------
    config_dir:
        Directory holding per-identity manifests.
    default_name:
        File name of the shared fallback manifest inside *config_dir*.
    """

    def __init__(
        self,
        config_dir: Path = USER_MENU_DIR,
        default_name: str = DEFAULT_MENU_NAME,
    ) -> None:
        self._config_dir: Path = Path(config_dir)
        self._default_name: str = default_name

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, identity: str) -> Path:
        """Return the manifest path for *identity*.

        Raises
        ------
        ConfigurationError
            When *identity* is not a plain file name, or the chosen
            file does not exist or is unreadable.
        """
        if identity in ("", ".", "..") or Path(identity).name != identity:
            raise ConfigurationError(f"Invalid user name: {identity!r}")

        user_path = self._config_dir / identity
        default_path = self._config_dir / self._default_name
        path = user_path if os.path.exists(user_path) else default_path

        if not (os.path.isfile(path) and os.access(path, os.R_OK)):
            raise ConfigurationError(
                NOT_FOUND_MESSAGE,
                hint=f"Create {user_path} or {default_path}.",
            )
        return path

    # ------------------------------------------------------------------
    # Reading / parsing
    # ------------------------------------------------------------------

    @staticmethod
    def read(path: Path) -> Any:
        """Return the YAML document stored at *path*."""
        try:
            with path.open(encoding="utf-8") as fh:
                return yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Unable to parse menu definition {path}: {exc}",
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                f"Unable to read menu definition {path}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self, path: Path) -> Manifest:
        """Read and validate the manifest at *path*, usually from :meth:`resolve`."""
        logger.debug("Reading manifest %s", path)
        return build_manifest(self.read(path), is_executable)
