from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tomlpath"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class _TomlPathRichConsoleHandler(RichHandler):
    """Rich handler installed by :func:`configure_logging`."""


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(
    level: int | str = logging.INFO, *, console: Console | None = None
) -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Calling this more than once updates the level, and the console when one
    is given; a second handler is never added.
    """

    logger = get_logger()
    existing = [
        handler
        for handler in logger.handlers
        if isinstance(handler, _TomlPathRichConsoleHandler)
    ]
    if existing:
        if console is not None:
            for installed in existing:
                installed.console = console
    else:
        handler = _TomlPathRichConsoleHandler(
            console=console,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
