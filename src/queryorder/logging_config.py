"""
Logging setup for the queryorder package logger.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER_NAME = "queryorder-console"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the ``queryorder`` logger.

    Calling this more than once only updates the level; a second handler is
    never added.

    Parameters
    ----------
    level : str | int, optional
        Log level name or number (default: logging.INFO).

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    package_logger = logging.getLogger("queryorder")
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(level)
            return package_logger

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )
    package_logger.addHandler(console_handler)

    return package_logger
