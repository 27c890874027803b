"""Command entity and its configuration-phase builder.

A :class:`CommandBuilder` is what a command's configurator receives; it
collects metadata and the action, then :meth:`CommandBuilder.build`
freezes everything into a :class:`CommandSpec` that the registry stores.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kli.core.models import ArgumentSpec, FlagSpec, ParseResult

Action = Callable[[ParseResult], None]
"""The single action contract: receive the parse result, produce side effects."""


def _noop(_result: ParseResult) -> None:
    return None


def legacy_action(callback: Callable[[], None]) -> Action:
    """Adapt a zero-argument callback to the :data:`Action` contract."""

    def _adapter(_result: ParseResult) -> None:
        callback()

    return _adapter


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A registered, invocable unit of behaviour."""

    name: str
    description: str = ""
    arguments: tuple[ArgumentSpec, ...] = ()
    flags: tuple[FlagSpec, ...] = ()
    action: Action = _noop

    def execute(self, result: ParseResult) -> None:
        """Run the action with *result*.  Errors propagate to the caller."""
        self.action(result)

    def is_declared(self, name: str) -> bool:
        """Return ``True`` when *name* is a declared argument or flag."""
        return any(arg.name == name for arg in self.arguments) or any(
            flag.name == name for flag in self.flags
        )


class CommandBuilder:
    """Collects a command's metadata during registration.

    Usage::

        def configure(cmd: CommandBuilder) -> None:
            cmd.argument("name", "The name to greet")
            cmd.flag("shout", "Shout the greeting")

            @cmd.action
            def run(args: ParseResult) -> None:
                ...
    """

    def __init__(self, name: str, description: str = "") -> None:
        self.name: str = name
        self.description: str = description
        self._arguments: list[ArgumentSpec] = []
        self._flags: list[FlagSpec] = []
        self._action: Action = _noop

    def argument(self, name: str, description: str = "") -> CommandBuilder:
        """Document a positional argument."""
        self._arguments.append(ArgumentSpec(name, description))
        return self

    def flag(self, name: str, description: str = "") -> CommandBuilder:
        """Document a flag."""
        self._flags.append(FlagSpec(name, description))
        return self

    def action(self, callback: Action) -> Action:
        """Attach *callback* as the command's action.

        Returns the callback unchanged so it can be used as a decorator.
        """
        self._action = callback
        return callback

    def build(self) -> CommandSpec:
        return CommandSpec(
            name=self.name,
            description=self.description,
            arguments=tuple(self._arguments),
            flags=tuple(self._flags),
            action=self._action,
        )
