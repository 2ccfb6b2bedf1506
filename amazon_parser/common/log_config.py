"""
Logging Configuration

Sets up the amazon_parser logger for command-line runs. Output goes to
stderr so the parse report printed on stdout stays clean.

requests logs every Amazon and Ollama connection through urllib3; that
chatter is held at WARNING unless verbose output is asked for.
"""

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "amazon_parser"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
TRANSPORT_LOGGERS = ("urllib3",)


def setup_logging(verbose: bool = False, quiet: bool = False, stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: DEBUG for the package and its HTTP transport
        quiet: Only warnings and errors
        stream: Where to write (defaults to stderr)

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    # One handler per process, however often the CLI entry point runs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger
