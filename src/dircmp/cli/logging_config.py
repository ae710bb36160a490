"""Logging setup for the dircmp command-line interface.

The library modules only create loggers under the ``dircmp`` namespace; handlers are
installed here, by the CLI, and nowhere else.
"""

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """Map the number of -v flags to a logging level.

    Example:
        >>> level_for_verbosity(0) == logging.WARNING
        True
        >>> level_for_verbosity(2) == logging.DEBUG
        True
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Attach a single stream handler to the ``dircmp`` logger.

    Calling this again replaces the handler installed by a previous call.

    Args:
        verbosity: Number of -v flags given on the command line.
        stream: Destination for log records. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("dircmp")
    for handler in list(logger.handlers):
        if getattr(handler, "_dircmp_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._dircmp_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level_for_verbosity(verbosity))
    return logger
