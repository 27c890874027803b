"""Line input for the interactive loop.

:class:`ConsoleLineReader` satisfies :class:`~kli.core.protocols.LineReader`
over Rich's ``Console.input`` (plain :func:`input` without Rich).  It keeps
its own "already warned" state, so a redirected stdin is reported once per
reader rather than once per process.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from kli.cli.console import State, get_rich_console, print_state
from kli.exceptions import InputUnavailableError, KliEnvironmentError

logger = logging.getLogger(__name__)


class ConsoleLineReader:
    """Read lines from the process's standard input."""

    def __init__(self, *, prompt_style: str | None = None) -> None:
        self._prompt_style = prompt_style
        self._warned_about_console: bool = False

    def _warn_if_no_terminal(self) -> None:
        if self._warned_about_console:
            return
        self._warned_about_console = True
        if not sys.stdin.isatty():
            logger.warning("stdin is not a terminal; reading piped input")
            print_state(
                "[Warning] No terminal detected. Falling back to standard input.",
                State.WARNING,
            )

    def _rich_prompt(self, prompt: str) -> Any:
        from rich.text import Text

        return Text(prompt, style=self._prompt_style or "")

    def read_line(self, prompt: str) -> str:
        """Return the next input line.

        Raises
        ------
        InputUnavailableError
            On end of input or an unreadable console.
        """
        self._warn_if_no_terminal()
        try:
            try:
                rich_console = get_rich_console()
            except KliEnvironmentError:
                return input(prompt)
            return rich_console.input(self._rich_prompt(prompt))
        except EOFError as exc:
            raise InputUnavailableError("End of input reached.") from exc
        except OSError as exc:
            raise InputUnavailableError(f"Failed to read input: {exc}") from exc
