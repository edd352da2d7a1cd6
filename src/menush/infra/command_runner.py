"""Infrastructure: run a menu command as a foreground child process.

The argument vector is executed directly — no shell is involved.
While the child runs, this process ignores SIGINT so that Ctrl+C is
the command's business; the child gets the default disposition back
before ``exec``.
"""

from __future__ import annotations

import logging
import signal
import subprocess
from collections.abc import Sequence

from menush.utils.constants import COMMAND_NOT_FOUND_STATUS

logger = logging.getLogger(__name__)


def _restore_default_sigint() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)


class SubprocessCommandRunner:
    """Concrete :class:`~menush.core.protocols.CommandRunner`.

    Satisfies the protocol structurally — no explicit inheritance
    required.
    """

    def run(self, argv: Sequence[str]) -> int:
        """Run *argv* and return its exit status.

        Returns :data:`~menush.utils.constants.COMMAND_NOT_FOUND_STATUS`
        when the executable cannot be started, and a negative number
        when the child was killed by a signal.
        """
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            completed = subprocess.run(
                list(argv),
                check=False,
                preexec_fn=_restore_default_sigint,
            )
        except OSError as exc:
            logger.debug("Unable to start %s: %s", argv[0] if argv else "", exc)
            return COMMAND_NOT_FOUND_STATUS
        finally:
            signal.signal(signal.SIGINT, previous)
        return completed.returncode
