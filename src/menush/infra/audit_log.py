"""Infrastructure: syslog-backed audit trail.

One record is appended per event: manifest load, command start,
non-zero command exit and fatal abort.  Records go to the
authentication-private syslog facility, tagged ``menush[<pid>]``.

The sink is fail-open — if syslog is unreachable or a record cannot be
delivered, the session carries on.

Usage::

    with AuditLog() as audit:
        audit.manifest_loaded("alice", "/etc/menush/alice")
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from types import TracebackType

from menush.utils.constants import (
    PROGRAM_NAME,
    SYSLOG_ADDRESS,
    SYSLOG_FALLBACK_ADDRESS,
)

logger = logging.getLogger(__name__)

AUDIT_LOGGER_NAME: str = f"{PROGRAM_NAME}.audit"
RECORD_FORMAT: str = f"{PROGRAM_NAME}[%(process)d]: %(message)s"


class _FailOpenSysLogHandler(logging.handlers.SysLogHandler):
    """SysLogHandler that drops records it cannot deliver."""

    def handleError(self, record: logging.LogRecord) -> None:
        return


class _FailOpenStreamHandler(logging.StreamHandler):
    """Console handler used when syslog cannot be reached at all."""

    def handleError(self, record: logging.LogRecord) -> None:
        return


def build_syslog_handler(
    address: str | tuple[str, int] = SYSLOG_ADDRESS,
    fallback_address: str | tuple[str, int] = SYSLOG_FALLBACK_ADDRESS,
) -> logging.Handler:
    """Return a handler for the syslog daemon at *address*.

    Falls back to *fallback_address* (UDP on ``localhost:514`` by
    default) and, when neither can be created, to stderr so records
    stay visible on the console.
    """
    facility = logging.handlers.SysLogHandler.LOG_AUTHPRIV
    for candidate in (address, fallback_address):
        try:
            return _FailOpenSysLogHandler(address=candidate, facility=facility)
        except OSError as exc:
            logger.debug("syslog at %s unavailable: %s", candidate, exc)
    return _FailOpenStreamHandler(sys.stderr)


class AuditLog:
    """Process-wide audit sink with an explicit open/close lifecycle.

    Parameters
    ----------
    handler:
        Destination for records.  ``None`` (default) builds a syslog
        handler on :meth:`open`.
    address:
        Syslog socket path or ``(host, port)`` used when *handler* is
        ``None``.
    """

    def __init__(
        self,
        handler: logging.Handler | None = None,
        *,
        address: str | tuple[str, int] = SYSLOG_ADDRESS,
    ) -> None:
        self._handler: logging.Handler | None = handler
        self._address: str | tuple[str, int] = address
        self._logger: logging.Logger = logging.getLogger(AUDIT_LOGGER_NAME)
        self._opened: bool = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> AuditLog:
        if self._opened:
            return self
        if self._handler is None:
            self._handler = build_syslog_handler(self._address)
        self._handler.setFormatter(logging.Formatter(RECORD_FORMAT))
        self._logger.addHandler(self._handler)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._opened = True
        return self

    def close(self) -> None:
        """Detach and close the handler.  Safe to call more than once."""
        if not self._opened or self._handler is None:
            return
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._opened = False

    @property
    def is_open(self) -> bool:
        return self._opened

    def __enter__(self) -> AuditLog:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def manifest_loaded(self, identity: str, path: str) -> None:
        self._logger.info(
            "Loading menu shell definition for user %s from %s", identity, path,
        )

    def command_started(self, identity: str, command_line: str) -> None:
        self._logger.info("About to run command for %s: %r", identity, command_line)

    def command_failed(self, status: int) -> None:
        self._logger.info("Command exited with non-zero status (%d)", status)

    def fatal(self, message: str) -> None:
        self._logger.error("%s", message)
