"""Shared pytest fixtures and configuration for the kli test suite.

Guidelines
----------
* No real terminal: output goes to :class:`RecordingPrinter`, input comes
  from :class:`ScriptedReader`.
* No real fzf process — the runner is always a test double.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from kli.core.models import AppConfig, InteractiveMode
from kli.exceptions import InputUnavailableError


class RecordingPrinter:
    """:class:`~kli.core.protocols.Printer` that keeps what it was given."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def print(
        self,
        *objects: object,
        style: str | None = None,
        markup: bool = True,
    ) -> None:
        self.calls.append((" ".join(str(obj) for obj in objects), style))

    @property
    def lines(self) -> list[str]:
        return [text for text, _ in self.calls]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedReader:
    """:class:`~kli.core.protocols.LineReader` replaying canned lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise InputUnavailableError("End of input reached.")
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@pytest.fixture
def printer() -> RecordingPrinter:
    return RecordingPrinter()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        name="MyCli",
        version="0.1.6",
        description="My first CLI app!",
        interactive=InteractiveMode(enabled=False),
    )


@pytest.fixture
def interactive_config() -> AppConfig:
    return AppConfig(
        name="MyCli",
        version="0.1.6",
        description="My first CLI app!",
        interactive=InteractiveMode(enabled=True),
    )
