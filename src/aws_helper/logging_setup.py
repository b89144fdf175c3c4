"""Leveled single-line logging to standard output."""

import logging
import sys
from typing import Union

LOG_FORMAT = "[%(levelname)s], [%(name)s], [%(funcName)s] : %(message)s"
LOGGER_PREFIX = "aws_helper"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def resolve_level(level: Union[str, int]) -> int:
    """Translate a level name or number into a logging level.

    Args:
        level: One of debug, info, warning, error, critical (any case) or a positive int

    Returns:
        The numeric logging level.

    Raises:
        ValueError: If the level is neither a known name nor an integer
    """
    if isinstance(level, str) and level.lower() in _LEVELS:
        return _LEVELS[level.lower()]
    if isinstance(level, int) and not isinstance(level, bool) and level > 0:
        return level
    raise ValueError(
        'log_level can be either of ("debug", "info", "warning", "error", "critical") '
        "or a positive integer value."
    )


def get_logger(module: str, level: Union[str, int] = "debug") -> logging.Logger:
    """Return a stdout logger for one module of the helper.

    Loggers are process-wide, keyed by name: the most recent call sets the
    level for every holder of the same logger, so helpers built with different
    log levels share whichever level was configured last.

    Args:
        module: Short module name used in the log line
        level: Verbosity, see resolve_level

    Returns:
        A configured logger named aws_helper.<module>.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(f"{LOGGER_PREFIX}.{module}")
    logger.setLevel(numeric_level)
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
