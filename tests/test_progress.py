"""Tests for the Rich progress indicator (cli/progress.py).

Rendering goes to a non-interactive console under pytest, so these
tests only check state handling, never terminal output.
"""

from __future__ import annotations

import importlib.util

import pytest

from kli.cli.progress import ProgressBar, ProgressType, SpinnerStyle, progress_bar

pytestmark = pytest.mark.skipif(
    importlib.util.find_spec("rich") is None,
    reason="rich not installed",
)


class TestLifecycle:
    def test_not_started_ignores_updates(self) -> None:
        bar = ProgressBar(total=10)
        bar.update(5)
        assert bar.current == 5

    def test_start_resets_progress(self) -> None:
        bar = ProgressBar(total=10)
        bar.update(5)
        bar.start()
        try:
            assert bar.current == 0
        finally:
            bar.stop()

    def test_stop_is_idempotent(self) -> None:
        bar = ProgressBar()
        bar.start()
        bar.stop()
        bar.stop()  # second call should not raise

    def test_start_is_idempotent(self) -> None:
        bar = ProgressBar(total=10)
        bar.start()
        try:
            bar.increment(3)
            bar.start()
            assert bar.current == 3
        finally:
            bar.stop()

    def test_restart_reuses_task(self) -> None:
        bar = ProgressBar(total=10)
        bar.start()
        bar.update(6)
        bar.stop()
        bar.start()
        try:
            assert len(bar._progress.tasks) == 1
            assert bar.current == 0
            assert bar._progress.tasks[0].completed == 0
        finally:
            bar.stop()

    def test_context_manager(self) -> None:
        with ProgressBar(total=4) as bar:
            for _ in range(4):
                bar.increment()
        assert bar.current == 4
        assert not bar._started

    def test_updates_after_stop_ignored(self) -> None:
        bar = ProgressBar(total=10)
        with bar:
            bar.update(2)
        bar.update(7)
        assert bar.current == 7


class TestClamping:
    def test_upper_bound(self) -> None:
        with ProgressBar(total=10) as bar:
            bar.update(50)
            assert bar.current == 10

    def test_lower_bound(self) -> None:
        with ProgressBar(total=10) as bar:
            bar.increment(-3)
            assert bar.current == 0

    def test_invalid_total(self) -> None:
        with pytest.raises(ValueError):
            ProgressBar(total=0)


class TestStyles:
    @pytest.mark.parametrize("kind", list(ProgressType))
    def test_every_type_runs(self, kind: ProgressType) -> None:
        with ProgressBar(total=3, type=kind, prefix="Working") as bar:
            bar.increment()
            bar.increment()
        assert bar.type is kind

    @pytest.mark.parametrize("style", list(SpinnerStyle))
    def test_every_spinner_style_is_a_rich_spinner(self, style: SpinnerStyle) -> None:
        from rich.spinner import SPINNERS

        assert style.value in SPINNERS

    def test_factory(self) -> None:
        bar = progress_bar(total=5, clear_on_finish=True)
        assert isinstance(bar, ProgressBar)
        assert bar.total == 5
