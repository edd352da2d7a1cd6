"""Shared pytest fixtures and configuration for the menush test suite.

Guidelines
----------
* No test touches ``/etc/menush``, syslog or the real terminal.
* Manifests and executables are created under ``tmp_path``.
* questionary is mocked at the ``_import_questionary`` seam.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from fakes import ListHandler


@pytest.fixture
def list_handler() -> ListHandler:
    return ListHandler()


@pytest.fixture
def make_executable(tmp_path: Path) -> Callable[[str], str]:
    """Return a factory creating an executable script under ``tmp_path/bin``."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _make(name: str = "tool") -> str:
        script = bin_dir / name
        script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        script.chmod(0o755)
        return str(script)

    return _make


@pytest.fixture
def menu_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "menush"
    directory.mkdir()
    return directory
