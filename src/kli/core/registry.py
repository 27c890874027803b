"""Insertion-ordered command registry.

Names are unique across the registry.  The duplicate check runs before
the configurator sees a builder, so a rejected registration has no side
effects beyond the raised :class:`~kli.exceptions.DuplicateCommandError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from kli.core.command import CommandBuilder, CommandSpec
from kli.exceptions import DuplicateCommandError

logger = logging.getLogger(__name__)

Configurator = Callable[[CommandBuilder], None]


class CommandRegistry:
    """Process-scoped list of :class:`CommandSpec` keyed by name."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        description: str = "",
        configurator: Configurator | None = None,
    ) -> CommandSpec:
        """Build a command with *configurator* and add it to the registry.

        Raises
        ------
        DuplicateCommandError
            When *name* is already registered.  The registry is unchanged.
        """
        if name in self._commands:
            raise DuplicateCommandError(name)

        builder = CommandBuilder(name, description)
        if configurator is not None:
            configurator(builder)
        spec = builder.build()

        self._commands[name] = spec
        logger.debug("Registered command %r", name)
        return spec

    def add(self, spec: CommandSpec) -> None:
        """Insert an already-built *spec*."""
        if spec.name in self._commands:
            raise DuplicateCommandError(spec.name)
        self._commands[spec.name] = spec

    def find(self, name: str | None) -> CommandSpec | None:
        """Exact-name lookup; ``None`` for unknown names or ``None`` input."""
        if name is None:
            return None
        return self._commands.get(name)

    @property
    def commands(self) -> tuple[CommandSpec, ...]:
        return tuple(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self.commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands
