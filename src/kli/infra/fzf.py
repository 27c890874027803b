"""Infrastructure: fuzzy selection through an external ``fzf`` process.

The process itself runs behind :class:`~kli.core.protocols.ProcessRunner`
so selection logic can be exercised without fzf installed.

Rules
-----
* Detection via :func:`shutil.which` only.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

from kli.core.protocols import ProcessResult, ProcessRunner
from kli.exceptions import FzfError, FzfNotInstalledError

logger = logging.getLogger(__name__)

FZF_BINARY: str = "fzf"

_NO_MATCH: int = 1
_ERROR: int = 2
_INTERRUPTED: int = 130


# ---------------------------------------------------------------------------
# Process runner
# ---------------------------------------------------------------------------

class SubprocessRunner:
    """:class:`ProcessRunner` backed by :func:`subprocess.run`.

    stderr is left attached to the terminal because fzf draws its UI there.
    """

    def run(self, args: Sequence[str], *, input_text: str | None = None) -> ProcessResult:
        completed = subprocess.run(
            list(args),
            input=input_text,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
        return ProcessResult(returncode=completed.returncode, stdout=completed.stdout or "")


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

def detect_fzf() -> Path | None:
    """Return the resolved path of the fzf binary, or ``None``."""
    result = shutil.which(FZF_BINARY)
    if result is None:
        return None
    return Path(result).resolve()


def require_fzf() -> Path:
    """Locate fzf or raise :class:`FzfNotInstalledError`."""
    path = detect_fzf()
    if path is None:
        raise FzfNotInstalledError()
    return path


# ---------------------------------------------------------------------------
# Options → command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FzfOptions:
    """Subset of fzf's command-line options."""

    prompt: str = "> "
    pointer: str = "➤"
    marker: str = "✓"
    layout: str = "default"
    height: str = "40%"
    preview: str = ""
    preview_window: str = "right:50%"
    title: str = ""
    header: str | None = None
    header_lines: int = 0
    multi_select: bool = False
    binds: tuple[str, ...] = field(default_factory=tuple)

    def build_command(self) -> list[str]:
        cmd = [
            FZF_BINARY,
            "--prompt", self.prompt,
            "--pointer", self.pointer,
            "--marker", self.marker,
            "--layout", self.layout,
            "--height", self.height,
        ]
        if self.preview:
            cmd += ["--preview", self.preview]
        cmd += ["--preview-window", self.preview_window]
        if self.title:
            cmd += ["--header", self.title]
        if self.header is not None:
            cmd += ["--header", self.header]
        if self.multi_select:
            cmd.append("--multi")
        if self.header_lines > 0:
            cmd += ["--header-lines", str(self.header_lines)]
        for entry in self.binds:
            cmd += ["--bind", entry]
        return cmd


def bind(key: str, action: str) -> str:
    """Format one ``--bind`` entry."""
    return f"{key}:{action}"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class FzfSelector:
    """Run fzf over a list of items and return the user's selection.

    Parameters
    ----------
    runner:
        Any object satisfying :class:`ProcessRunner`.  Defaults to
        :class:`SubprocessRunner`.
    options:
        fzf options; defaults to :class:`FzfOptions`.
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        options: FzfOptions | None = None,
    ) -> None:
        self._runner: ProcessRunner = runner or SubprocessRunner()
        self.options: FzfOptions = options or FzfOptions()

    def select(self, items: Iterable[str]) -> list[str]:
        """Return the selected items (empty on no match or Ctrl+C).

        Raises
        ------
        FzfNotInstalledError
            When fzf is not on PATH.
        FzfError
            When fzf exits with an error.
        """
        require_fzf()
        payload = "".join(f"{item}\n" for item in items)
        result = self._runner.run(self.options.build_command(), input_text=payload)
        logger.debug("fzf exited with %d", result.returncode)

        if result.returncode == 0:
            return [line for line in result.stdout.splitlines() if line]
        if result.returncode in (_NO_MATCH, _INTERRUPTED):
            return []
        if result.returncode == _ERROR:
            raise FzfError("fzf error occurred")
        raise FzfError(f"Unknown fzf error (code {result.returncode})")

    def select_one(self, items: Iterable[str]) -> str | None:
        """Single-selection variant; ``None`` when nothing was picked."""
        selector = FzfSelector(self._runner, _without_multi(self.options))
        selected = selector.select(items)
        return selected[0] if selected else None


def _without_multi(options: FzfOptions) -> FzfOptions:
    return replace(options, multi_select=False)
