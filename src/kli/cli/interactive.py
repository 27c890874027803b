"""Interactive read-eval loop.

Each non-sentinel line is split on whitespace and fed back through
:meth:`Dispatcher.process_arguments`, so one-shot and interactive
invocations share the same semantics.  A failing command is reported
through the dispatcher's crash boundary and the loop keeps going; only
the ``exit`` sentinel or an input-source error ends it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kli.cli import exit_codes
from kli.core.help import render_command_listing

if TYPE_CHECKING:
    from kli.cli.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

EXIT_SENTINEL: str = "exit"
HELP_SENTINEL: str = "help"


class InteractiveSession:
    """One run of the interactive loop on behalf of *dispatcher*."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
        self._config = dispatcher.config
        self._printer = dispatcher.printer

    def run(self) -> int:
        """Greet, loop until ``exit``, then say goodbye.

        Input-source errors (end of input) propagate to the caller.
        """
        self._greet()
        while True:
            line = self._dispatcher.reader.read_line(self._config.prompt).strip()
            if not line:
                continue
            lowered = line.lower()
            if lowered == EXIT_SENTINEL:
                break
            if lowered == HELP_SENTINEL:
                self._printer.print(
                    render_command_listing(self._dispatcher.registry.commands),
                    markup=False,
                )
                continue
            self._process(line)
        self._farewell()
        return exit_codes.SUCCESS

    def _process(self, line: str) -> None:
        tokens = line.split()
        logger.debug("Interactive input: %r", tokens)
        try:
            self._dispatcher.process_arguments(tokens)
        except Exception as exc:  # noqa: BLE001
            self._dispatcher.handle_crash(exc)

    def _greet(self) -> None:
        greeting = self._config.greeting
        if greeting.show:
            self._printer.print(greeting.message, style=greeting.style, markup=False)
        self._printer.print(
            f"Type '{HELP_SENTINEL}' for available commands, '{EXIT_SENTINEL}' to quit",
            style=self._config.colors.primary,
            markup=False,
        )

    def _farewell(self) -> None:
        farewell = self._config.interactive.farewell
        if farewell is not None and farewell.show:
            self._printer.print(farewell.message, style=farewell.style, markup=False)
