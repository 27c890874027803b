"""Interactive prompts for command actions.

Thin wrappers over questionary for the common "ask the user something"
cases an action needs: free text, passwords, yes/no, and picking one item
from a list.  questionary returns ``None`` when the user cancels (Ctrl+C /
Esc); each helper documents how it maps that case.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from kli.exceptions import InputUnavailableError, KliEnvironmentError, UnsupportedConsoleError

T = TypeVar("T")


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise KliEnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _build_choice_label(index: int, title: str) -> str:
    """Build the single-line label shown in the selector: ``"  1) title"``."""
    return f"  {index + 1}) {title}"


# ---------------------------------------------------------------------------
# Free text
# ---------------------------------------------------------------------------

def read_input_or_none(message: str, *, default: str = "") -> str | None:
    """Ask for a line of text; ``None`` when the user cancels."""
    questionary = _import_questionary()
    answer: str | None = questionary.text(message, default=default).ask()
    return answer


def read_input(message: str, *, default: str = "") -> str:
    """Ask for a line of text.

    Raises
    ------
    InputUnavailableError
        If the user cancels the prompt.
    """
    answer = read_input_or_none(message, default=default)
    if answer is None:
        raise InputUnavailableError("No input provided.")
    return answer


def read_input_or_empty(message: str, *, default: str = "") -> str:
    """Ask for a line of text; ``""`` when the user cancels."""
    return read_input_or_none(message, default=default) or ""


def read_password(message: str) -> str:
    """Ask for a secret without echoing it.

    Raises
    ------
    UnsupportedConsoleError
        When stdin is not a terminal or the prompt is cancelled; there is
        no safe fallback for password input.
    """
    if not sys.stdin.isatty():
        raise UnsupportedConsoleError(
            "Password input is not supported in this environment.",
        )
    questionary = _import_questionary()
    answer: str | None = questionary.password(message).ask()
    if answer is None:
        raise UnsupportedConsoleError("Password input was cancelled.")
    return answer


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------

def confirm(message: str, *, default: bool = False) -> bool:
    """Ask a yes/no question; cancelling counts as "no"."""
    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(message, default=default).ask()
    return bool(answer)


def select(
    message: str,
    options: Sequence[T],
    display: Callable[[T], str] = str,
) -> T:
    """Let the user pick one of *options* with the arrow keys.

    Raises
    ------
    ValueError
        If *options* is empty.
    InputUnavailableError
        If the user cancels the prompt.
    """
    if not options:
        raise ValueError("select() needs at least one option")

    questionary = _import_questionary()

    # Choice values are indices so options need not be hashable or unique.
    choices = [
        questionary.Choice(title=_build_choice_label(i, display(option)), value=i)
        for i, option in enumerate(options)
    ]

    selected: int | None = questionary.select(
        message,
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()

    if selected is None:
        raise InputUnavailableError(
            "No option selected.",
            hint="Use arrow keys to pick an option, then press Enter.",
        )
    return options[selected]
