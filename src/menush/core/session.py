"""The interactive control loop.

:class:`MenuSession` moves through ``Presenting → Selecting →
(Executing | Exiting)``.  Each :meth:`MenuSession.step` returns an
explicit :data:`~menush.core.models.Outcome`; :meth:`MenuSession.run`
keeps stepping until a :class:`~menush.core.models.Terminate` arrives
and hands its code back to the caller.

Cancellation at any prompt surfaces as
:class:`~menush.exceptions.InputCancelled` and is not handled here —
the CLI layer owns the single fatal path.

Guarantees
----------
* No direct terminal, filesystem or process access — everything goes
  through the injected collaborators.
* A non-zero command exit status is audited and the loop continues.
"""

from __future__ import annotations

import logging

from menush.core.command_line import build_argv, compose_command_line
from menush.core.models import Continue, Manifest, MenuEntry, Outcome, Terminate
from menush.core.protocols import AuditSink, CommandRunner, MenuFrontEnd
from menush.core.sanitizer import sanitize_arguments

logger = logging.getLogger(__name__)

MENU_TITLE: str = "Please choose a command:"
EXIT_LABEL: str = "Exit"
ARGUMENTS_PROMPT: str = "Command arguments: "
CONTINUE_PROMPT: str = "Press Return/Enter key to continue..."


class MenuSession:
    """Runs the menu loop for one identity over one immutable manifest.

    Parameters
    ----------
    manifest:
        Validated manifest; never modified.
    identity:
        Authenticated user name, used to tag audit records.
    front_end, runner, audit:
        Collaborators satisfying the protocols in
        :mod:`menush.core.protocols`.
    """

    def __init__(
        self,
        manifest: Manifest,
        identity: str,
        *,
        front_end: MenuFrontEnd,
        runner: CommandRunner,
        audit: AuditSink,
    ) -> None:
        self._manifest: Manifest = manifest
        self._identity: str = identity
        self._front_end: MenuFrontEnd = front_end
        self._runner: CommandRunner = runner
        self._audit: AuditSink = audit

        self.current_selection: int | None = None
        self.running: bool = False

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Loop until the user exits and return the exit code.

        Raises
        ------
        InputCancelled
            When the user interrupts any prompt.
        """
        self.running = True
        try:
            outcome: Outcome = Continue()
            while isinstance(outcome, Continue):
                outcome = self.step()
        finally:
            self.running = False
            self.current_selection = None
        return outcome.code

    def step(self) -> Outcome:
        """Present the menu once and act on the selection."""
        self._front_end.clear()
        index = self._front_end.choose(MENU_TITLE, self.menu_labels())

        if index >= len(self._manifest):
            logger.debug("Exit chosen by %s", self._identity)
            return Terminate(0)

        self.current_selection = index
        self._execute(self._manifest[index])
        self.current_selection = None
        return Continue()

    def menu_labels(self) -> list[str]:
        """Return entry prompts in manifest order plus the trailing ``Exit``."""
        return [*self._manifest.prompts, EXIT_LABEL]

    # ------------------------------------------------------------------
    # Executing
    # ------------------------------------------------------------------

    def collect_arguments(self, entry: MenuEntry) -> str:
        """Ask for extra arguments when *entry* allows them, else ``""``."""
        if not entry.allow_args:
            return ""
        return self._front_end.ask_text(ARGUMENTS_PROMPT, sanitize_arguments)

    def _execute(self, entry: MenuEntry) -> None:
        user_args = self.collect_arguments(entry)
        command_line = compose_command_line(entry, user_args)
        self._audit.command_started(self._identity, command_line)

        self._front_end.clear()
        self._front_end.notice(f"Running '{command_line}'...\n")
        status = self._runner.run(build_argv(entry, user_args))
        if status != 0:
            self._audit.command_failed(status)

        self._front_end.pause(f"\n\n{CONTINUE_PROMPT}")
