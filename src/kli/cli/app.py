"""Application facade and process-level error boundary.

Building an application happens in distinct phases, each with its own
type:

* :class:`ConfigBuilder` — mutable settings, frozen into an
  :class:`~kli.core.models.AppConfig`.
* :class:`~kli.core.command.CommandBuilder` — one per registered command,
  frozen into a :class:`~kli.core.command.CommandSpec`.
* :class:`~kli.core.models.ParseResult` — what an action receives.

:meth:`Kli.run` is the only place that translates the outcome of a
dispatch cycle into an OS exit code; it never calls :func:`sys.exit`.

Usage::

    app = Kli()
    app.configure(name="MyCli", version="0.1.6")

    @app.command("greet", "Greets the user")
    def greet(cmd: CommandBuilder) -> None:
        cmd.argument("name", "The name to greet")

        @cmd.action
        def run(args: ParseResult) -> None:
            print(f"Hello, {args.param(0, 'stranger')}")

    sys.exit(app.run())
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import fields, replace
from typing import Any

from kli.cli import exit_codes
from kli.cli.console import console
from kli.cli.dispatcher import CrashHandler, Dispatcher
from kli.cli.logging_setup import configure_logging
from kli.core.models import AppConfig, ApplicationColors, InteractiveMode
from kli.core.protocols import LineReader, Printer
from kli.core.registry import CommandRegistry, Configurator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Configuration phase
# ---------------------------------------------------------------------------

class ConfigBuilder:
    """Mutable view of :class:`AppConfig` used while configuring an app."""

    def __init__(self, base: AppConfig | None = None) -> None:
        base = base or AppConfig()
        self.name: str = base.name
        self.version: str = base.version
        self.description: str = base.description
        self.interactive: InteractiveMode = base.interactive
        self.show_usage_on_error: bool = base.show_usage_on_error
        self.show_prompt: bool = base.show_prompt
        self.colors: ApplicationColors = base.colors
        self.log_level: str | None = base.log_level

    def build(self) -> AppConfig:
        return AppConfig(
            name=self.name,
            version=self.version,
            description=self.description,
            interactive=self.interactive,
            show_usage_on_error=self.show_usage_on_error,
            show_prompt=self.show_prompt,
            colors=self.colors,
            log_level=self.log_level,
        )


_CONFIG_FIELDS: frozenset[str] = frozenset(f.name for f in fields(AppConfig))


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

class Kli:
    """A command-line application: configuration plus a command registry.

    Parameters
    ----------
    config:
        Initial configuration.  Adjust later with :meth:`configure`.
    on_crash:
        Optional callback receiving every error that reaches the crash
        boundary.
    printer, reader:
        Output sink and interactive line source; default to the console.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        on_crash: CrashHandler | None = None,
        printer: Printer | None = None,
        reader: LineReader | None = None,
    ) -> None:
        self._config: AppConfig = config or AppConfig()
        self.registry = CommandRegistry()
        self.on_crash = on_crash
        self._printer = printer
        self._reader = reader

    @property
    def config(self) -> AppConfig:
        return self._config

    def configure(
        self,
        block: Callable[[ConfigBuilder], None] | None = None,
        **overrides: Any,
    ) -> AppConfig:
        """Update the configuration through a builder block and/or keywords.

        Raises
        ------
        TypeError
            When a keyword does not name an :class:`AppConfig` field.
        """
        unknown = set(overrides) - _CONFIG_FIELDS
        if unknown:
            raise TypeError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")

        config = replace(self._config, **overrides)
        if block is not None:
            builder = ConfigBuilder(config)
            block(builder)
            config = builder.build()
        self._config = config
        return config

    def command(
        self,
        name: str,
        description: str = "",
        configurator: Configurator | None = None,
    ) -> Any:
        """Register a command.

        Called with a *configurator*, registers immediately and returns the
        :class:`~kli.core.command.CommandSpec`.  Called without one, returns
        a decorator that registers the decorated configurator.

        Raises
        ------
        DuplicateCommandError
            When *name* is already registered.
        """
        if configurator is not None:
            return self.registry.register(name, description, configurator)

        def _decorator(func: Configurator) -> Configurator:
            self.registry.register(name, description, func)
            return func

        return _decorator

    def dispatcher(self) -> Dispatcher:
        """Build a dispatcher over the current configuration."""
        return Dispatcher(
            self.registry,
            self._config,
            printer=self._printer,
            reader=self._reader,
            on_crash=self.on_crash,
        )

    def execute(self, tokens: Sequence[str]) -> int:
        """Run one dispatch cycle over *tokens*."""
        return self.dispatcher().execute(tokens)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the application and return an OS exit code.

        Parameters
        ----------
        argv:
            Explicit argument list.  When ``None`` (default),
            ``sys.argv[1:]`` is used.
        """
        configure_logging(self._config.log_level)
        tokens = list(sys.argv[1:] if argv is None else argv)
        try:
            return self.execute(tokens)
        except KeyboardInterrupt:
            (self._printer or console).print("\nAborted by user.", style="yellow", markup=False)
            return exit_codes.KEYBOARD_INTERRUPT


# ---------------------------------------------------------------------------
# One-call entry point
# ---------------------------------------------------------------------------

def kli(
    argv: Sequence[str] | None = None,
    setup: Callable[[Kli], None] | None = None,
    *,
    on_crash: CrashHandler | None = None,
    printer: Printer | None = None,
    reader: LineReader | None = None,
) -> int:
    """Build an application with *setup*, run it on *argv*, return the exit code.

    Errors raised by *setup* (for example a duplicate command name) go
    through the same crash boundary as errors raised while dispatching.
    """
    app = Kli(on_crash=on_crash, printer=printer, reader=reader)
    if setup is not None:
        try:
            setup(app)
        except Exception as exc:  # noqa: BLE001
            return app.dispatcher().handle_crash(exc)
    return app.run(argv)
