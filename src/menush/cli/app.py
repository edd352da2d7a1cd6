"""CLI application entry point for menush.

:func:`run_shell` is the **single shutdown point** of the shell.  It
acquires the audit log, resolves the identity, loads the manifest and
runs the menu loop.  Any :class:`~menush.exceptions.MenushError` that
reaches it — a bad manifest, a cancelled prompt, a missing UI
library — is reported on stderr, written to the audit log at error
level and turned into exit code 1.  Any other exception raised inside
the session takes the same path.  The audit log is released on every
path.

:func:`cli` wraps everything in a last-resort boundary so the process
never exits with a raw stack trace; only failures outside the session,
before the audit log exists, end with exit code 2.
"""

from __future__ import annotations

import argparse
import logging
import sys

from menush.cli import exit_codes
from menush.cli.console import console, escape_markup
from menush.core.protocols import AuditSink, CommandRunner, MenuFrontEnd
from menush.core.session import MenuSession
from menush.exceptions import InputCancelled, MenushError
from menush.infra.audit_log import AuditLog
from menush.infra.manifest_loader import ManifestLoader
from menush.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    menush takes no operands; only ``--help`` and ``--version`` exist,
    and neither touches the manifest or the audit log.
    """
    parser = argparse.ArgumentParser(
        prog="menush",
        description="Restricted shell offering a fixed menu of commands.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Session wiring
# ---------------------------------------------------------------------------

def _report_fatal(exc: MenushError, audit: AuditSink) -> int:
    """Write *exc* to stderr and the audit log; return the abort exit code."""
    message = str(exc)
    if isinstance(exc, InputCancelled):
        console.print(f"\n[yellow]{escape_markup(message)}[/yellow]")
    else:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(message)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
    audit.fatal(message)
    return exit_codes.GENERAL_ERROR


def _run_session(
    audit: AuditSink,
    *,
    identity: str | None,
    loader: ManifestLoader,
    front_end: MenuFrontEnd | None,
    runner: CommandRunner | None,
) -> int:
    """Load the manifest for the current identity and run the menu loop."""
    if identity is None:
        from menush.infra.identity import current_identity

        identity = current_identity()

    path = loader.resolve(identity)
    audit.manifest_loaded(identity, str(path))
    manifest = loader.load(path)

    if front_end is None:
        from menush.cli.menu_prompt import QuestionaryFrontEnd

        front_end = QuestionaryFrontEnd()
    if runner is None:
        from menush.infra.command_runner import SubprocessCommandRunner

        runner = SubprocessCommandRunner()

    session = MenuSession(
        manifest,
        identity,
        front_end=front_end,
        runner=runner,
        audit=audit,
    )
    return session.run()


def run_shell(
    *,
    identity: str | None = None,
    loader: ManifestLoader | None = None,
    front_end: MenuFrontEnd | None = None,
    runner: CommandRunner | None = None,
    audit: AuditLog | None = None,
) -> int:
    """Run one menush session and return the process exit code.

    Every collaborator defaults to the production implementation;
    passing one in enables deterministic testing.
    """
    with (audit or AuditLog()) as audit_log:
        try:
            return _run_session(
                audit_log,
                identity=identity,
                loader=loader or ManifestLoader(),
                front_end=front_end,
                runner=runner,
            )
        except MenushError as exc:
            return _report_fatal(exc, audit_log)
        except (KeyboardInterrupt, EOFError):
            return _report_fatal(InputCancelled(), audit_log)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Unexpected error in session", exc_info=True)
            return _report_fatal(
                MenushError(
                    f"Unexpected error: {type(exc).__name__}: {exc}",
                    hint="Please report this issue.",
                ),
                audit_log,
            )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the menush CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    _build_parser().parse_args(argv)
    return run_shell()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
    except MenushError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        code = exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        code = exit_codes.GENERAL_ERROR
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        code = exit_codes.UNEXPECTED_ERROR
    sys.exit(code)
