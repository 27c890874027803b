"""Custom exception hierarchy for kli.

Every error the toolkit raises on purpose inherits from :class:`KliError`
so that the dispatcher's crash boundary can render a clean message (and
an optional hint) without leaking a stack trace to the user.

Hierarchy
---------
KliError
├── DuplicateCommandError
├── CommandNotFoundError
├── InputUnavailableError
├── UnsupportedConsoleError
├── KliEnvironmentError
└── FzfError
    └── FzfNotInstalledError
"""

from __future__ import annotations


class KliError(Exception):
    """Base exception for all kli errors.

    Carries an optional *hint* that the crash boundary prints below the
    error message.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registry ---------------------------------------------------------------

class DuplicateCommandError(KliError):
    """Raised when a command name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Command '{name}' is already registered.",
            hint="Every command needs a unique name.",
        )
        self.name: str = name


# --- Dispatch ---------------------------------------------------------------

class CommandNotFoundError(KliError):
    """Describes a first positional that matches no registered command.

    The dispatcher builds this error for its message and prints it; it is
    never raised up the stack.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Command not found: '{name}'")
        self.name: str = name


# --- Console / input --------------------------------------------------------

class InputUnavailableError(KliError):
    """Raised when no further input can be read (end of input, closed console)."""


class UnsupportedConsoleError(KliError):
    """Raised when an operation needs a real terminal and none is attached."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "This CLI tool must be run in a terminal environment.",
        )


# --- Environment / tooling --------------------------------------------------

class KliEnvironmentError(KliError):
    """Raised when an optional runtime dependency is not available."""


class FzfError(KliError):
    """Raised when the fzf process fails."""


class FzfNotInstalledError(FzfError):
    """Raised when the fzf binary cannot be located on PATH."""

    def __init__(self) -> None:
        super().__init__(
            "fzf is not installed or not on PATH.",
            hint="See: https://github.com/junegunn/fzf#installation",
        )
