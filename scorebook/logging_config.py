"""Logging configuration for scripts built on scorebook.

The library only creates loggers under the ``scorebook`` namespace; it never
installs handlers itself. Applications call :func:`setup_logging` once at
startup to see its messages on stdout and, optionally, in a file.

"""

import logging
import sys
from typing import Optional

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Send scorebook's log messages to stdout and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call,
    closing any log file it opened.

    Parameters
    ----------
    level : int
        The lowest level to emit, e.g. ``logging.DEBUG``. Default: INFO.
    log_file : Optional[str]
        A file to write messages to as well. It is overwritten.

    """
    logger = logging.getLogger("scorebook")
    _remove_handlers(logger)
    logger.setLevel(level)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        "Logging to %d handler(s) at level %s.",
        len(handlers),
        logging.getLevelName(level),
    )
