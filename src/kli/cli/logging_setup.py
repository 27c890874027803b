"""Logging configuration for applications built on kli.

The library itself only ever logs through module loggers under the
``kli`` namespace (with a ``NullHandler`` on the package logger).  This
module attaches a visible handler when an application asks for one, via
``AppConfig.log_level`` or the ``KLI_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "KLI_LOG_LEVEL"

_HANDLER_NAME: str = "kli-console"


def resolve_level(configured: str | None) -> int | None:
    """Return the numeric level to use, or ``None`` to leave logging alone.

    The environment variable overrides the configured value.  Unknown
    level names resolve to ``None``.
    """
    name = os.environ.get(LOG_LEVEL_ENV) or configured
    if not name:
        return None
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        return handler

    from kli.cli.console import get_rich_console

    handler = RichHandler(console=get_rich_console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the ``kli`` logger (idempotent)."""
    logger = logging.getLogger("kli")
    resolved = resolve_level(level)
    if resolved is None:
        return logger

    logger.setLevel(resolved)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = _build_handler()
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    return logger
