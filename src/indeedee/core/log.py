"""Logging helpers for the indeedee package."""

from __future__ import annotations

import logging

ROOT_LOGGER = "indeedee"
_LOG_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Attach a single console handler to the package logger (once)."""
    global _LOG_CONFIGURED
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level.upper())
    if _LOG_CONFIGURED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _LOG_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger scoped under ``indeedee``.

    Args:
        name: Logger name suffix, usually the module's dotted path below the package.
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
