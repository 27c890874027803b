"""Exit-code constants returned by :meth:`kli.cli.app.Kli.run`.

The toolkit never terminates the process itself; embedding code passes
these values to :func:`sys.exit`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Dispatch cycle completed without error."""

GENERAL_ERROR: int = 1
"""A KliError reached the crash boundary, or no command matched."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the crash boundary."""
