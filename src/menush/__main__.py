"""Allow ``python -m menush`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m menush`` behaves identically to the ``menush`` console
script.
"""

from __future__ import annotations

from menush.cli.app import cli

if __name__ == "__main__":
    cli()
