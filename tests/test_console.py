"""Tests for the console proxy and state printing (cli/console.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from kli.cli.console import State, _ConsoleProxy, print_state
from tests.conftest import RecordingPrinter


class TestState:
    @pytest.mark.parametrize(
        ("state", "style"),
        [
            (State.SUCCESS, "bright_green"),
            (State.ERROR, "red"),
            (State.WARNING, "bright_yellow"),
            (State.INFO, "bright_cyan"),
        ],
    )
    def test_styles(self, state: State, style: str) -> None:
        assert state.value == style

    def test_print_state_to_target(self, printer: RecordingPrinter) -> None:
        print_state("Saved", State.SUCCESS, target=printer)
        assert printer.calls == [("Saved", "bright_green")]


class TestConsoleProxy:
    def test_forwards_to_rich(self) -> None:
        rich_console = MagicMock()
        with patch("kli.cli.console.get_rich_console", return_value=rich_console) as factory:
            _ConsoleProxy(stderr=True).print("hi", style="red", markup=False)

        factory.assert_called_once_with(stderr=True)
        rich_console.print.assert_called_once_with(
            "hi", style="red", markup=False, highlight=False, soft_wrap=True,
        )

    def test_writes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        _ConsoleProxy().print("hello [world]", markup=False)
        assert "hello [world]" in capsys.readouterr().out
