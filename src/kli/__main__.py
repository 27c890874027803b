"""Allow ``python -m kli`` invocation.

Runs a small demo application with a single ``greet`` command.  Without
arguments it starts interactive mode.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from kli.cli.app import Kli
from kli.cli.console import State, console, print_state
from kli.core.command import CommandBuilder
from kli.core.models import AppConfig, InteractiveMode, ParseResult
from kli.version import __version__

GREETING_STYLE: str = "bold italic #FF8BF5"


def _configure_greet(cmd: CommandBuilder) -> None:
    cmd.argument("name", "The name to greet")
    cmd.flag("shout", "Shout the greeting")
    cmd.flag("progress", "Show a short progress bar afterwards")

    @cmd.action
    def run(args: ParseResult) -> None:
        name = args.get("name") or args.param(0)
        if name is None:
            from kli.cli.prompts import read_input_or_none

            name = read_input_or_none("Enter your name") or "stranger"

        greeting = f"Hello, {name}"
        if args.has_flag("shout"):
            greeting = greeting.upper()
        console.print(greeting, style=GREETING_STYLE, markup=False)

        if args.has_flag("progress"):
            from kli.cli.progress import ProgressBar, SpinnerStyle

            with ProgressBar(
                prefix="Download in progress",
                spinner_style=SpinnerStyle.GROWING_DOTS,
                clear_on_finish=True,
            ) as bar:
                for _ in range(bar.total):
                    bar.increment()


def build_app() -> Kli:
    app = Kli(
        AppConfig(
            name="kli",
            version=__version__,
            description="Demo application for the kli toolkit",
            interactive=InteractiveMode(enabled=True),
        ),
        on_crash=lambda exc: print_state(str(exc), State.ERROR),
    )
    app.command("greet", "Greets the user", _configure_greet)
    return app


def main(argv: Sequence[str] | None = None) -> int:
    return build_app().run(argv)


if __name__ == "__main__":
    sys.exit(main())
