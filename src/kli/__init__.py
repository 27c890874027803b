"""kli — command-line application toolkit.

Turns a raw argument vector into resolved commands, dispatches them to
registered actions, and falls back to an interactive read-eval loop when
started without arguments.
"""

import logging

from kli.cli.app import Kli, kli
from kli.core.command import CommandBuilder, CommandSpec, legacy_action
from kli.core.models import AppConfig, ParseResult
from kli.core.parser import parse
from kli.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "AppConfig",
    "CommandBuilder",
    "CommandSpec",
    "Kli",
    "ParseResult",
    "__version__",
    "kli",
    "legacy_action",
    "parse",
]
