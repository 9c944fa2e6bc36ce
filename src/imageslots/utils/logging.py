"""Logging setup utilities for imageslots."""

from __future__ import annotations

import logging
import os
import sys

from imageslots.config.settings import LoggingConfig

LOGGER_NAME = "imageslots"


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the ``imageslots`` logger from ``config``.

    Attaches a stderr handler and, if ``config.file`` is set, a file
    handler. Safe to call more than once: handlers that are already
    attached get the new format instead of being added again.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).

    Returns:
        The configured ``imageslots`` logger.
    """
    if config is None:
        config = LoggingConfig()

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    formatter = logging.Formatter(config.format)

    console_handler = next(
        (h for h in app_logger.handlers if _is_stderr_handler(h)), None
    )
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stderr)
        app_logger.addHandler(console_handler)
    console_handler.setFormatter(formatter)

    if config.file:
        path = os.path.abspath(config.file)
        file_handler = next(
            (
                h for h in app_logger.handlers
                if isinstance(h, logging.FileHandler) and h.baseFilename == path
            ),
            None,
        )
        if file_handler is None:
            file_handler = logging.FileHandler(path)
            app_logger.addHandler(file_handler)
        file_handler.setFormatter(formatter)

    app_logger.info("Logging initialized at %s level", config.level)
    return app_logger


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler and handler.stream is sys.stderr
