"""Core layer — tokenizing, command metadata, registry, and help text.

Rules
-----
* No ``print()`` calls.
* No terminal, filesystem, or process I/O.
* No imports from ``cli`` or ``infra``.
"""

from kli.core.command import Action, CommandBuilder, CommandSpec, legacy_action
from kli.core.models import (
    AppConfig,
    ApplicationColors,
    ArgumentSpec,
    Farewell,
    FlagSpec,
    Greeting,
    InteractiveMode,
    ParseResult,
)
from kli.core.parser import parse
from kli.core.registry import CommandRegistry

__all__: list[str] = [
    "Action",
    "AppConfig",
    "ApplicationColors",
    "ArgumentSpec",
    "CommandBuilder",
    "CommandRegistry",
    "CommandSpec",
    "Farewell",
    "FlagSpec",
    "Greeting",
    "InteractiveMode",
    "ParseResult",
    "legacy_action",
    "parse",
]
