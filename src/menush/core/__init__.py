"""Core / service layer — pure models, validation and the control loop.

Rules
-----
* No ``print()`` calls.
* No filesystem, terminal or process I/O; collaborators are injected.
* No imports from ``cli`` or ``infra``.
"""

from menush.core.manifest import build_manifest
from menush.core.models import Continue, Manifest, MenuEntry, Outcome, Terminate
from menush.core.protocols import AuditSink, CommandRunner, MenuFrontEnd
from menush.core.session import MenuSession

__all__: list[str] = [
    "AuditSink",
    "CommandRunner",
    "Continue",
    "Manifest",
    "MenuEntry",
    "MenuFrontEnd",
    "MenuSession",
    "Outcome",
    "Terminate",
    "build_manifest",
]
