"""
Application logging setup (single entry point).

The module wraps the configuration of the standard logging package so the
rest of the code does not repeat format, level and handler settings.

setup_logger() configures the root logging system, picks the level from a
string and returns a named logger ready to use in any module. Records are
written to stderr: stdout belongs to the tables and charts the commands
print.
"""

import logging
import sys
from typing import Final
from logging import Logger, StreamHandler


LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(message)s"

LOG_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(level: str) -> int:
    """Map a level name to its logging constant, falling back to INFO."""
    return LOG_LEVELS.get(level.upper(), logging.INFO)


def setup_logger(name: str = "monke", level: str = "WARNING") -> Logger:
    """
    Create and configure the application logger.

    Sets the message format, attaches a stderr handler and applies the
    global level through logging.basicConfig(). The level is given as a
    string (for example "DEBUG" or "ERROR"); lower case is accepted and an
    unknown value falls back to "INFO".

    Parameters
    ----------
    name : str, optional
        Logger name, usually the package name or __name__ of the caller.
    level : str, optional
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL".

    Returns
    -------
    Logger
        Configured logger instance.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stderr)],
        force=True,  # Replaces any earlier logging configuration
    )

    return logging.getLogger(name)
