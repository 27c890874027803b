"""Domain models for kli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies on
external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Tokenization result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """Immutable snapshot of one tokenization pass.

    An option name lives in at most one of :attr:`options` and
    :attr:`flags`.
    """

    options: Mapping[str, str]
    """Option name (without leading dashes) → value."""

    flags: frozenset[str]
    """Option names that appeared with no attached value."""

    positionals: tuple[str, ...]
    """Bare tokens in input order.  The first one names the command."""

    def __hash__(self) -> int:
        # Read-only mapping proxies are not hashable; hash their items.
        return hash((frozenset(self.options.items()), self.flags, self.positionals))

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of option *name*, or *default*."""
        return self.options.get(name, default)

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def __getitem__(self, name: str) -> str:
        return self.options[name]

    def __contains__(self, name: object) -> bool:
        return name in self.options or name in self.flags

    @property
    def command(self) -> str | None:
        """First positional, or ``None`` when there are no positionals."""
        return self.positionals[0] if self.positionals else None

    @property
    def arguments(self) -> tuple[str, ...]:
        """Positionals following the command name."""
        return self.positionals[1:]

    def param(self, index: int, default: str | None = None) -> str | None:
        """Return the *index*-th argument after the command name."""
        args = self.arguments
        if 0 <= index < len(args):
            return args[index]
        return default


# ---------------------------------------------------------------------------
# Declared command metadata (documentation only)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """A positional argument a command documents."""

    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class FlagSpec:
    """A flag a command documents."""

    name: str
    description: str = ""

    @property
    def label(self) -> str:
        """``-x`` for single-character names, ``--name`` otherwise."""
        prefix = "-" if len(self.name) == 1 else "--"
        return f"{prefix}{self.name}"


# ---------------------------------------------------------------------------
# Application configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ApplicationColors:
    """Rich style strings used for each kind of output."""

    primary: str = "bright_cyan"
    secondary: str = "bright_green"
    error: str = "bright_red"
    warning: str = "bright_yellow"
    success: str = "bright_green"
    info: str = "bright_blue"
    input_prompt: str = "white"
    user_input: str = "bright_white"
    debug: str = "magenta"


@dataclass(frozen=True, slots=True)
class Greeting:
    """Message shown when entering interactive mode."""

    message: str
    show: bool = True
    style: str = "bright_green"


@dataclass(frozen=True, slots=True)
class Farewell:
    """Message shown when leaving interactive mode."""

    message: str = "Goodbye!"
    show: bool = True
    style: str = "bright_green"


@dataclass(frozen=True, slots=True)
class InteractiveMode:
    """Interactive-mode switches.

    ``greeting=None`` means "use the default greeting for the app name".
    """

    enabled: bool = True
    greeting: Greeting | None = None
    farewell: Farewell | None = field(default_factory=Farewell)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Read-only configuration consulted by the dispatcher."""

    name: str = "kli"
    version: str = "0.0.0"
    description: str = ""
    interactive: InteractiveMode = field(default_factory=InteractiveMode)
    show_usage_on_error: bool = True
    show_prompt: bool = True
    colors: ApplicationColors = field(default_factory=ApplicationColors)
    log_level: str | None = None

    @property
    def greeting(self) -> Greeting:
        """Configured greeting, or the default one for :attr:`name`."""
        if self.interactive.greeting is not None:
            return self.interactive.greeting
        return Greeting(message=f"Welcome to {self.name} interactive mode!")

    @property
    def prompt(self) -> str:
        return f"{self.name}> " if self.show_prompt else ""
