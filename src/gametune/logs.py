"""Logging setup for the gametune CLI and TUI."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "gametune"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the gametune namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def configure_logging(
    path: str | None = None, console: bool = False, level: int = logging.INFO
) -> logging.Logger:
    """Attach an append-mode file handler and optionally a stderr handler.

    Calling again replaces the handlers added by a previous call.
    """
    logger = get_logger()
    logger.setLevel(level)
    for handler in [h for h in logger.handlers if getattr(h, "_gametune", False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = []
    if path:
        handlers.append(logging.FileHandler(path, mode="a", encoding="utf-8"))
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._gametune = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


def log_error(logger: logging.Logger, message: str) -> None:
    logger.error("ERROR: %s", message)
