"""Command dispatcher and crash boundary.

The dispatcher has two steady states, **one-shot** and **interactive**,
sharing one command-resolution routine (:meth:`Dispatcher.process_arguments`).

Every error raised while dispatching is handed to a single crash handler
— the user's ``on_crash`` callback when configured, a printed diagnostic
otherwise.  Nothing escapes :meth:`Dispatcher.execute` except
``KeyboardInterrupt``, which the application facade maps to an exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from kli.cli import exit_codes
from kli.cli.console import console
from kli.cli.input import ConsoleLineReader
from kli.cli.interactive import InteractiveSession
from kli.core.help import render_command_help, render_global_help, render_version
from kli.core.models import AppConfig, ParseResult
from kli.core.parser import parse
from kli.core.protocols import LineReader, Printer
from kli.core.registry import CommandRegistry
from kli.exceptions import CommandNotFoundError, KliError

logger = logging.getLogger(__name__)

CrashHandler = Callable[[Exception], None]

# Positionals never start with "-"; "--help" and "-h" arrive as flags.
_HELP_WORD: str = "help"
_HELP_FLAGS: tuple[str, ...] = ("help", "h")


def _wants_help(result: ParseResult) -> bool:
    return any(result.has_flag(name) for name in _HELP_FLAGS)


class Dispatcher:
    """Resolve parsed input to commands and run them.

    Parameters
    ----------
    registry:
        Commands available for resolution.
    config:
        Read-only application configuration.
    printer:
        Output sink.  Defaults to the Rich-backed stdout console.
    reader:
        Line source for interactive mode.  Defaults to
        :class:`~kli.cli.input.ConsoleLineReader`.
    on_crash:
        Optional callback receiving every error that reaches the crash
        boundary.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        config: AppConfig,
        *,
        printer: Printer | None = None,
        reader: LineReader | None = None,
        on_crash: CrashHandler | None = None,
    ) -> None:
        self.registry = registry
        self.config = config
        self.printer: Printer = printer or console
        self.reader: LineReader = reader or ConsoleLineReader(
            prompt_style=config.colors.input_prompt,
        )
        self.on_crash = on_crash

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def execute(self, tokens: Sequence[str]) -> int:
        """Run one dispatch cycle and return an exit code.

        Empty *tokens* with interactive mode enabled start the read loop;
        anything else is processed once.
        """
        try:
            if not tokens and self.config.interactive.enabled:
                logger.debug("No arguments; entering interactive mode")
                return self.run_interactive()
            return self.process_arguments(tokens)
        except Exception as exc:  # noqa: BLE001
            return self.handle_crash(exc)

    def run_interactive(self) -> int:
        return InteractiveSession(self).run()

    def process_arguments(self, tokens: Sequence[str]) -> int:
        """Parse *tokens*, resolve the command, and dispatch it.

        Errors raised by the command's action propagate to the caller.
        """
        result = parse(tokens)
        first = result.command

        if first is not None and first.lower() == _HELP_WORD:
            self.show_help()
            return exit_codes.SUCCESS

        command = self.registry.find(first)

        if result.has_flag("version"):
            self.show_version()
        elif command is not None:
            if _wants_help(result):
                self.printer.print(render_command_help(command), markup=False)
            else:
                logger.debug("Dispatching command %r", command.name)
                command.execute(result)
        elif not result.positionals or _wants_help(result):
            self.show_help()
        else:
            self.report_not_found(first or "")
            return exit_codes.GENERAL_ERROR
        return exit_codes.SUCCESS

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def show_help(self) -> None:
        self.printer.print(
            render_global_help(self.config, self.registry.commands),
            markup=False,
        )

    def show_version(self) -> None:
        self.printer.print(
            render_version(self.config),
            style=self.config.colors.primary,
            markup=False,
        )

    def report_not_found(self, name: str) -> None:
        logger.debug("No command named %r", name)
        self.printer.print(
            str(CommandNotFoundError(name)),
            style=self.config.colors.error,
            markup=False,
        )
        if self.config.show_usage_on_error:
            self.show_help()

    # ------------------------------------------------------------------
    # Crash boundary
    # ------------------------------------------------------------------

    def handle_crash(self, exc: Exception) -> int:
        """Funnel *exc* into the crash handler and return its exit code."""
        logger.debug("Crash boundary caught %s", type(exc).__name__, exc_info=exc)
        if self.on_crash is None:
            self._report(exc)
        else:
            try:
                self.on_crash(exc)
            except Exception as handler_exc:  # noqa: BLE001
                logger.debug("on_crash handler failed", exc_info=handler_exc)
                self._report(exc)
                self._report(handler_exc)
        if isinstance(exc, KliError):
            return exit_codes.GENERAL_ERROR
        return exit_codes.UNEXPECTED_ERROR

    def _report(self, exc: Exception) -> None:
        colors = self.config.colors
        self.printer.print(f"Error: {exc}", style=colors.error, markup=False)
        if isinstance(exc, KliError):
            if exc.hint:
                self.printer.print(f"Hint: {exc.hint}", style=colors.warning, markup=False)
            return
        self.printer.print(
            f"  {type(exc).__name__}: {exc}",
            style=colors.debug,
            markup=False,
        )
