"""Logging setup for ClasspathTreeLib.

The library logs through module loggers under the 'classpathtreelib'
namespace and installs only a NullHandler by default. Applications that
want the output call configure_logging().
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

LOGGER_NAME = "classpathtreelib"

_HANDLER_ATTR = "_classpathtreelib_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """Settings for the library's stream handler.

    Attributes:
        level: Minimum severity captured, by name
        fmt: Record format
        datefmt: Timestamp format
    """
    level: str = "WARNING"
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def configure_logging(config: Optional[LoggingConfig] = None,
                      stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stream handler to the library logger.

    Calling this again replaces the handler installed by the previous
    call instead of adding a second one.

    Args:
        config: Logging settings (defaults to LoggingConfig())
        stream: Destination stream (defaults to stderr)

    Returns:
        The configured library logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(config.fmt, datefmt=config.datefmt))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")
    logger.setLevel(level)
    return logger
