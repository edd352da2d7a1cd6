"""Interactive terminal front end for the CLI layer.

This module is responsible for:

* Clearing the screen and printing notices via Rich.
* Presenting the numbered command menu via questionary.
* Reading validated free-text arguments via questionary.
* Blocking on the "press Enter" pause after each command.

Every cancelled read (Ctrl+C, Ctrl+D, Esc) raises
:class:`~menush.exceptions.InputCancelled`.  No business logic lives
here.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from menush.cli.console import get_rich_console
from menush.exceptions import EnvironmentError, InputCancelled, InvalidArgumentInput


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _build_choice_label(index: int, label: str) -> str:
    """Build the numbered label shown in the selector, e.g. ``"1. Uptime"``."""
    return f"{index + 1}. {label}"


def _build_instruction(count: int) -> str:
    """Render the selectable range, e.g. ``"[1-4]"``."""
    return f"[1-{count}]"


def _as_questionary_validator(
    validate: Callable[[str], str],
) -> Callable[[str], bool | str]:
    """Adapt a raising validator to questionary's ``True``/message contract."""

    def _validator(text: str) -> bool | str:
        try:
            validate(text)
        except InvalidArgumentInput as exc:
            return str(exc)
        return True

    return _validator


def _ask(question: Any) -> Any:
    """Run a questionary question, mapping every cancellation to ``InputCancelled``."""
    try:
        answer = question.unsafe_ask()
    except (KeyboardInterrupt, EOFError) as exc:
        raise InputCancelled() from exc
    if answer is None:
        raise InputCancelled()
    return answer


# ---------------------------------------------------------------------------
# Front end
# ---------------------------------------------------------------------------

class QuestionaryFrontEnd:
    """Concrete :class:`~menush.core.protocols.MenuFrontEnd`.

    Parameters
    ----------
    screen:
        Rich console used for clearing and notices.  ``None`` (default)
        creates one on stdout the first time it is needed.
    """

    def __init__(self, screen: Any | None = None) -> None:
        self._screen: Any | None = screen

    @property
    def screen(self) -> Any:
        if self._screen is None:
            self._screen = get_rich_console(stderr=False)
        return self._screen

    def clear(self) -> None:
        self.screen.clear(home=True)

    def choose(self, title: str, labels: Sequence[str]) -> int:
        questionary = _import_questionary()

        choices = [
            questionary.Choice(title=_build_choice_label(i, label), value=i)
            for i, label in enumerate(labels)
        ]
        return _ask(
            questionary.select(
                title,
                choices=choices,
                instruction=_build_instruction(len(labels)),
                use_arrow_keys=True,
                use_shortcuts=False,
            )
        )

    def ask_text(self, message: str, validate: Callable[[str], str]) -> str:
        questionary = _import_questionary()

        answer = _ask(
            questionary.text(
                message,
                validate=_as_questionary_validator(validate),
            )
        )
        return validate(answer)

    def notice(self, message: str) -> None:
        self.screen.print(message, markup=False, highlight=False)

    def pause(self, message: str) -> None:
        self.notice(message)
        try:
            self.screen.input()
        except (KeyboardInterrupt, EOFError) as exc:
            raise InputCancelled() from exc
