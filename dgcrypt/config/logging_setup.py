"""
Console logging for scripts and applications embedding Dgcrypt.

Library modules only create named loggers ("Dgcrypt.*"); handlers are
attached here, on demand.
"""

import logging

from .settings import Settings


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the ``Dgcrypt`` logger and return it."""
    if level is None:
        level = Settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger(Settings.APP_NAME)
    root_logger.setLevel(level)

    # don't stack handlers on repeated calls
    for handler in root_logger.handlers:
        if getattr(handler, "_dgcrypt_console", False):
            handler.setLevel(level)
            return root_logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT,
        datefmt=Settings.LOG_DATEFMT,
    ))
    console_handler._dgcrypt_console = True
    root_logger.addHandler(console_handler)
    return root_logger
