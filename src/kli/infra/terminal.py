"""Infrastructure: terminal probing and raw terminal control.

:class:`SystemTerminalProbe` satisfies
:class:`~kli.core.protocols.TerminalProbe` for the process's own
terminal.

Rules
-----
* Size detection via :func:`os.get_terminal_size` only — no subprocess.
* Every probe degrades to ``None`` / ``False`` instead of raising.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

from kli.core.protocols import TerminalSize

CLEAR_SCREEN: str = "\x1b[H\x1b[2J"


def is_windows() -> bool:
    return os.name == "nt"


class SystemTerminalProbe:
    """Probe and control the terminal attached to *stream*."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    # ------------------------------------------------------------------
    # Probing
    # ------------------------------------------------------------------

    def size(self) -> TerminalSize | None:
        """Return the terminal size, or ``None`` when not attached to one."""
        try:
            columns, rows = os.get_terminal_size(self.stream.fileno())
        except (OSError, ValueError, AttributeError):
            return None
        return TerminalSize(columns=columns, rows=rows)

    def supports_ansi(self) -> bool:
        """Best-effort check for ANSI escape support."""
        if not is_windows():
            return True
        term = os.environ.get("TERM", "")
        return "xterm" in term or "WT_SESSION" in os.environ

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def clear_screen(self) -> None:
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    def move_cursor(self, x: int, y: int) -> None:
        """Move the cursor to column *x*, row *y* (top-left is ``(1, 1)``)."""
        self.stream.write(f"\x1b[{y};{x}H")
        self.stream.flush()

    def read_single_key(self) -> str | None:
        """Read one key press without waiting for Enter.

        Returns ``None`` when stdin is not a terminal or reading fails.
        """
        if is_windows():
            return _read_key_windows()
        return _read_key_posix()


# ---------------------------------------------------------------------------
# Platform-specific key reading
# ---------------------------------------------------------------------------

def _read_key_windows() -> str | None:
    import msvcrt

    try:
        ch = msvcrt.getwch()
    except OSError:
        return None
    return ch


def _read_key_posix() -> str | None:
    import termios
    import tty

    if not sys.stdin.isatty():
        return None
    fd = sys.stdin.fileno()
    try:
        old = termios.tcgetattr(fd)
    except termios.error:
        return None
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    except OSError:
        return None
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
