"""Tests for the interactive control loop.

The front end, command runner and audit sink are replaced by
scripted fakes — no terminal, process or syslog access.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock

import pytest

from fakes import CANCEL, FakeFrontEnd, FakeRunner
from menush.core.models import Continue, Manifest, MenuEntry, Terminate
from menush.core.session import EXIT_LABEL, MenuSession
from menush.exceptions import InputCancelled


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _entry(**overrides: Any) -> MenuEntry:
    fields: dict[str, Any] = {
        "prompt": "Echo",
        "path": "/bin/echo",
        "defaults": "hello",
        "allow_args": True,
    }
    fields.update(overrides)
    return MenuEntry(**fields)


def _manifest(*entries: MenuEntry) -> Manifest:
    return Manifest(entries=entries or (_entry(),))


def _session(
    manifest: Manifest,
    front_end: FakeFrontEnd,
    runner: FakeRunner | None = None,
    audit: MagicMock | None = None,
) -> MenuSession:
    return MenuSession(
        manifest,
        "alice",
        front_end=front_end,
        runner=runner or FakeRunner(),
        audit=audit or MagicMock(),
    )


# ---------------------------------------------------------------------------
# Presenting / selecting
# ---------------------------------------------------------------------------

class TestMenuPresentation:
    def test_labels_in_manifest_order_plus_exit(self) -> None:
        manifest = _manifest(_entry(prompt="One"), _entry(prompt="Two"))
        session = _session(manifest, FakeFrontEnd([2]))
        assert session.menu_labels() == ["One", "Two", EXIT_LABEL]

    def test_screen_cleared_before_every_menu(self) -> None:
        front_end = FakeFrontEnd([1])
        _session(_manifest(), front_end).run()
        assert front_end.events[0] == ("clear", None)
        assert front_end.events[1][0] == "choose"

    def test_empty_manifest_only_offers_exit(self) -> None:
        front_end = FakeFrontEnd([0])
        code = _session(Manifest(entries=()), front_end).run()
        assert code == 0
        assert front_end.events[1] == ("choose", [EXIT_LABEL])


class TestExit:
    def test_exit_choice_returns_zero_without_running(self) -> None:
        runner = FakeRunner()
        audit = MagicMock()
        manifest = _manifest(_entry(), _entry(prompt="Other"))
        code = _session(manifest, FakeFrontEnd([2]), runner, audit).run()
        assert code == 0
        assert runner.calls == []
        audit.command_started.assert_not_called()

    def test_step_returns_terminate(self) -> None:
        session = _session(_manifest(), FakeFrontEnd([1]))
        assert session.step() == Terminate(0)

    def test_cancel_at_selection_propagates(self) -> None:
        runner = FakeRunner()
        session = _session(_manifest(), FakeFrontEnd([CANCEL]), runner)
        with pytest.raises(InputCancelled, match="Exiting."):
            session.run()
        assert runner.calls == []
        assert session.running is False


# ---------------------------------------------------------------------------
# Executing
# ---------------------------------------------------------------------------

class TestExecuting:
    def test_composed_line_and_argv(self) -> None:
        runner = FakeRunner()
        audit = MagicMock()
        front_end = FakeFrontEnd([0, 1], answers=["world"])

        _session(_manifest(), front_end, runner, audit).run()

        audit.command_started.assert_called_once_with("alice", "/bin/echo hello world")
        assert runner.calls == [["/bin/echo", "hello", "world"]]
        assert ("notice", "Running '/bin/echo hello world'...\n") in front_end.events

    def test_step_returns_continue_after_command(self) -> None:
        session = _session(_manifest(), FakeFrontEnd([0], answers=["x"]))
        assert session.step() == Continue()

    def test_no_argument_prompt_when_not_allowed(self) -> None:
        runner = FakeRunner()
        audit = MagicMock()
        front_end = FakeFrontEnd([0, 0, 1], answers=["should-not-be-used"])
        manifest = _manifest(_entry(allow_args=False))

        _session(manifest, front_end, runner, audit).run()

        assert front_end.count("ask_text") == 0
        assert runner.calls == [["/bin/echo", "hello"], ["/bin/echo", "hello"]]
        audit.command_started.assert_called_with("alice", "/bin/echo hello")

    def test_invalid_arguments_reprompt(self) -> None:
        runner = FakeRunner()
        front_end = FakeFrontEnd([0, 1], answers=["a; rm -rf /", "$(id)", "safe"])

        _session(_manifest(), front_end, runner).run()

        assert front_end.rejected == ["a; rm -rf /", "$(id)"]
        assert runner.calls == [["/bin/echo", "hello", "safe"]]

    def test_empty_arguments_accepted(self) -> None:
        runner = FakeRunner()
        _session(_manifest(), FakeFrontEnd([0, 1], answers=[""]), runner).run()
        assert runner.calls == [["/bin/echo", "hello"]]

    def test_cancel_at_argument_prompt(self) -> None:
        runner = FakeRunner()
        session = _session(_manifest(), FakeFrontEnd([0], answers=[CANCEL]), runner)
        with pytest.raises(InputCancelled):
            session.run()
        assert runner.calls == []

    def test_pause_after_every_command(self) -> None:
        front_end = FakeFrontEnd([0, 0, 1], answers=["a", "b"])
        _session(_manifest(), front_end).run()
        assert front_end.count("pause") == 2
        pauses = [msg for kind, msg in front_end.events if kind == "pause"]
        assert all("Press Return/Enter key to continue..." in msg for msg in pauses)

    def test_screen_cleared_before_running(self) -> None:
        front_end = FakeFrontEnd([0, 1], answers=["x"])
        _session(_manifest(), front_end).run()
        kinds = [kind for kind, _ in front_end.events]
        notice_at = kinds.index("notice")
        assert kinds[notice_at - 1] == "clear"


class TestCommandFailure:
    def test_non_zero_status_logged_and_loop_continues(self) -> None:
        runner = FakeRunner(statuses=[3, 0])
        audit = MagicMock()
        front_end = FakeFrontEnd([0, 0, 1], answers=["a", "b"])

        code = _session(_manifest(), front_end, runner, audit).run()

        assert code == 0
        assert len(runner.calls) == 2
        audit.command_failed.assert_called_once_with(3)
        assert front_end.count("choose") == 3

    def test_zero_status_not_logged(self) -> None:
        audit = MagicMock()
        _session(_manifest(), FakeFrontEnd([0, 1], answers=["a"]), audit=audit).run()
        audit.command_failed.assert_not_called()


class TestSessionState:
    def test_initial_state(self) -> None:
        session = _session(_manifest(), FakeFrontEnd([]))
        assert session.running is False
        assert session.current_selection is None

    def test_running_during_execution(self) -> None:
        seen: list[tuple[bool, int | None]] = []

        class _Runner(FakeRunner):
            def run(self, argv: Sequence[str]) -> int:
                seen.append((session.running, session.current_selection))
                return 0

        manifest = _manifest(_entry(prompt="A"), _entry(prompt="B"))
        session = _session(manifest, FakeFrontEnd([1, 2], answers=["x"]), _Runner())
        session.run()

        assert seen == [(True, 1)]
        assert session.running is False
        assert session.current_selection is None
