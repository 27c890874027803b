"""Tests for questionary-backed prompts (cli/prompts.py).

``questionary`` is always mocked — no terminal interaction occurs.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from kli.cli.prompts import (
    _build_choice_label,
    confirm,
    read_input,
    read_input_or_empty,
    read_input_or_none,
    read_password,
    select,
)
from kli.exceptions import InputUnavailableError, UnsupportedConsoleError


def _real_choice_class() -> type:
    """Return a minimal Choice-like class for mocking questionary.Choice."""

    class FakeChoice:
        def __init__(self, title: str, value: int) -> None:
            self.title = title
            self.value = value

    return FakeChoice


def _questionary(**answers: object) -> MagicMock:
    """Build a questionary stand-in whose prompts answer with *answers*."""
    questionary_mod = MagicMock()
    questionary_mod.Choice = _real_choice_class()
    for prompt, answer in answers.items():
        getattr(questionary_mod, prompt).return_value.ask.return_value = answer
    return questionary_mod


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

class TestBuildChoiceLabel:
    def test_numbering_is_one_based(self) -> None:
        assert _build_choice_label(0, "Apple") == "  1) Apple"
        assert _build_choice_label(9, "Kiwi") == "  10) Kiwi"


# ---------------------------------------------------------------------------
# Free text
# ---------------------------------------------------------------------------

class TestReadInput:
    @patch("kli.cli.prompts._import_questionary")
    def test_returns_answer(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(text="Alice")
        assert read_input("Name") == "Alice"
        mock_q.return_value.text.assert_called_once_with("Name", default="")

    @patch("kli.cli.prompts._import_questionary")
    def test_cancel_raises(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(text=None)
        with pytest.raises(InputUnavailableError, match="No input provided"):
            read_input("Name")

    @patch("kli.cli.prompts._import_questionary")
    def test_or_none(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(text=None)
        assert read_input_or_none("Name") is None

    @patch("kli.cli.prompts._import_questionary")
    def test_or_empty(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(text=None)
        assert read_input_or_empty("Name") == ""

    @patch("kli.cli.prompts._import_questionary")
    def test_default_forwarded(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(text="Bob")
        read_input_or_none("Name", default="Bob")
        mock_q.return_value.text.assert_called_once_with("Name", default="Bob")


class TestReadPassword:
    @patch("kli.cli.prompts._import_questionary")
    def test_requires_terminal(
        self, mock_q: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("kli.cli.prompts.sys.stdin", MagicMock(isatty=lambda: False))

        with pytest.raises(UnsupportedConsoleError):
            read_password("Password")
        mock_q.assert_not_called()

    @patch("kli.cli.prompts._import_questionary")
    def test_returns_secret(
        self, mock_q: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("kli.cli.prompts.sys.stdin", MagicMock(isatty=lambda: True))
        mock_q.return_value = _questionary(password="hunter2")

        assert read_password("Password") == "hunter2"

    @patch("kli.cli.prompts._import_questionary")
    def test_cancel_raises(
        self, mock_q: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("kli.cli.prompts.sys.stdin", MagicMock(isatty=lambda: True))
        mock_q.return_value = _questionary(password=None)

        with pytest.raises(UnsupportedConsoleError, match="cancelled"):
            read_password("Password")


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------

class TestConfirm:
    @pytest.mark.parametrize(("answer", "expected"), [(True, True), (False, False), (None, False)])
    @patch("kli.cli.prompts._import_questionary")
    def test_answers(self, mock_q: MagicMock, answer: bool | None, expected: bool) -> None:
        mock_q.return_value = _questionary(confirm=answer)
        assert confirm("Sure?") is expected


class TestSelect:
    @patch("kli.cli.prompts._import_questionary")
    def test_returns_selected_option(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(select=1)
        assert select("Pick", ["apple", "banana", "cherry"]) == "banana"

    @patch("kli.cli.prompts._import_questionary")
    def test_choices_built_correctly(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(select=0)

        select("Pick", [{"id": 1}, {"id": 2}], display=lambda item: f"item {item['id']}")

        call_kwargs = mock_q.return_value.select.call_args
        choices = call_kwargs[1]["choices"]
        assert [c.title for c in choices] == ["  1) item 1", "  2) item 2"]
        assert [c.value for c in choices] == [0, 1]
        assert call_kwargs[1]["use_arrow_keys"] is True

    @patch("kli.cli.prompts._import_questionary")
    def test_duplicate_options_resolve_by_position(self, mock_q: MagicMock) -> None:
        first, second = ["same"], ["same"]
        mock_q.return_value = _questionary(select=1)
        assert select("Pick", [first, second]) is second

    @patch("kli.cli.prompts._import_questionary")
    def test_cancel_raises(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(select=None)
        with pytest.raises(InputUnavailableError, match="No option selected"):
            select("Pick", ["a"])

    def test_empty_options_rejected(self) -> None:
        with pytest.raises(ValueError):
            select("Pick", [])
