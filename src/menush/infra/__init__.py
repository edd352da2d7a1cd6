"""Infrastructure layer — operating-system integration.

This layer wraps the filesystem, YAML parsing, syslog, the password
database and child processes.  Failures are raised as
:class:`~menush.exceptions.MenushError` subclasses or, for the command
runner and audit log, absorbed as documented.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from menush.infra.audit_log import AuditLog
from menush.infra.command_runner import SubprocessCommandRunner
from menush.infra.identity import current_identity
from menush.infra.manifest_loader import ManifestLoader, is_executable

__all__: list[str] = [
    "AuditLog",
    "ManifestLoader",
    "SubprocessCommandRunner",
    "current_identity",
    "is_executable",
]
