"""Protocols (interfaces) consumed by the dispatch core.

The dispatcher depends only on these contracts — never on a concrete
console, terminal, or subprocess implementation — so it can be driven
entirely by test doubles.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class Printer(Protocol):
    """Anything that can render text for the user."""

    def print(
        self,
        *objects: object,
        style: str | None = None,
        markup: bool = True,
    ) -> None:
        """Render *objects*; *markup* toggles Rich markup interpretation."""
        ...  # pragma: no cover


class LineReader(Protocol):
    """Source of interactive input lines."""

    def read_line(self, prompt: str) -> str:
        """Return the next line without its trailing newline.

        Raises
        ------
        InputUnavailableError
            When no further input can be read.
        """
        ...  # pragma: no cover


@dataclass(frozen=True, slots=True)
class TerminalSize:
    """Terminal dimensions in character cells."""

    columns: int
    rows: int


class TerminalProbe(Protocol):
    """Narrow view of the controlling terminal."""

    def size(self) -> TerminalSize | None:
        """Return the terminal size, or ``None`` when it cannot be determined."""
        ...  # pragma: no cover

    def clear_screen(self) -> None:
        ...  # pragma: no cover

    def read_single_key(self) -> str | None:
        """Read one key press without waiting for Enter."""
        ...  # pragma: no cover


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of an external process run."""

    returncode: int
    stdout: str
    stderr: str = ""


class ProcessRunner(Protocol):
    """Runs external programs on behalf of infrastructure adapters."""

    def run(self, args: Sequence[str], *, input_text: str | None = None) -> ProcessResult:
        """Run *args*, feeding *input_text* to stdin when given."""
        ...  # pragma: no cover
