"""Centralized logging configuration.

Log records go through ``click.echo(err=True)`` so they share the CLI's
stderr stream (and whatever stream click's test runner substitutes).

Usage:
    from recordkit.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (the CLI root group does this)
"""

from __future__ import annotations

import logging

import click

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_LEVEL_COLORS = {
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ClickEchoHandler(logging.Handler):
    """Writes formatted records to stderr via click, colored by level."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            color = _LEVEL_COLORS.get(record.levelno)
            click.echo(click.style(message, fg=color) if color else message, err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Send recordkit log records to stderr at *level*.

    Safe to call more than once: the handler is only attached the first
    time, later calls just adjust the level.
    """
    if isinstance(level, str):
        level = _parse_level(level)

    logger = logging.getLogger("recordkit")
    logger.setLevel(level)

    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)


def _parse_level(name: str) -> int:
    """Convert a level name such as "debug" to its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level
