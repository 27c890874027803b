"""Rich-based progress indicator for long-running command actions.

Design
------
* :class:`ProgressBar` manages a single-task Rich
  :class:`~rich.progress.Progress` context.
* Shutdown-safe: updates before :meth:`ProgressBar.start` or after
  :meth:`ProgressBar.stop` are silently ignored.
* Rich refreshes the display from its own background thread; the caller
  only reports progress.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from kli.cli.console import get_rich_console
from kli.exceptions import KliEnvironmentError


class ProgressType(Enum):
    """How progress is drawn."""

    BAR = "bar"
    """Filling bar with a percentage."""

    SPINNER = "spinner"
    """Spinner and prefix only — no completion measure."""

    PULSE = "pulse"
    """Indeterminate pulsing bar."""


class SpinnerStyle(Enum):
    """Spinner animations, valued by their Rich spinner name."""

    DEFAULT = "line"
    DOTS = "dots"
    BOUNCING_BAR = "bouncingBar"
    ARROW = "arrow"
    PIPE = "pipe"
    GROWING_DOTS = "simpleDotsScrolling"


class ProgressBar:
    """Progress indicator for a known number of steps.

    Usage::

        with ProgressBar(prefix="Download in progress") as bar:
            for _ in range(100):
                bar.increment()

    Parameters
    ----------
    total:
        Number of steps that make up 100%.
    width:
        Bar width in cells; ``None`` lets Rich choose.
    prefix:
        Text shown before the bar.
    type:
        Rendering style, see :class:`ProgressType`.
    spinner_style:
        Spinner animation, see :class:`SpinnerStyle`.
    clear_on_finish:
        Remove the display from the terminal once stopped.
    """

    def __init__(
        self,
        total: int = 100,
        *,
        width: int | None = 30,
        prefix: str = "",
        type: ProgressType = ProgressType.BAR,
        spinner_style: SpinnerStyle = SpinnerStyle.DEFAULT,
        clear_on_finish: bool = False,
    ) -> None:
        try:
            from rich.progress import (
                BarColumn,
                Progress,
                SpinnerColumn,
                TaskProgressColumn,
                TextColumn,
            )
        except ModuleNotFoundError as exc:
            raise KliEnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        if total <= 0:
            raise ValueError("total must be positive")

        columns: list[Any] = [
            SpinnerColumn(spinner_name=spinner_style.value),
            TextColumn("[bold blue]{task.description}"),
        ]
        if type is not ProgressType.SPINNER:
            columns.append(BarColumn(bar_width=width))
        if type is ProgressType.BAR:
            columns.append(TaskProgressColumn())

        self.total: int = total
        self.type: ProgressType = type
        self._prefix = prefix
        self._current: int = 0
        self._progress: Any = Progress(
            *columns,
            console=get_rich_console(),
            transient=clear_on_finish,
        )
        self._task_id: Any = None
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> ProgressBar:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the display and reset progress to zero."""
        if self._started:
            return
        self._current = 0
        # A None total renders the bar as an indeterminate pulse.
        task_total = None if self.type is ProgressType.PULSE else self.total
        if self._task_id is None:
            self._task_id = self._progress.add_task(self._prefix, total=task_total)
        else:
            self._progress.reset(self._task_id, total=task_total)
        self._progress.start()
        self._started = True

    def stop(self) -> None:
        """Stop the display (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @property
    def current(self) -> int:
        return self._current

    def update(self, value: int) -> None:
        """Set progress to *value*, clamped to ``[0, total]``."""
        self._current = min(max(value, 0), self.total)
        if not self._started or self._task_id is None:
            return
        if self.type is ProgressType.PULSE:
            self._progress.advance(self._task_id, 0)
            return
        self._progress.update(self._task_id, completed=self._current)

    def increment(self, step: int = 1) -> None:
        self.update(self._current + step)


def progress_bar(**options: Any) -> ProgressBar:
    """Build a :class:`ProgressBar`; keyword arguments as for its constructor."""
    return ProgressBar(**options)
