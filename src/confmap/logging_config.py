"""Loguru setup shared by the CLI and the MCP server."""

import sys

from loguru import logger

_FORMAT = "{level.icon} {message}"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route confmap's log records to stderr.

    ``verbose`` wins over ``quiet``. Records from other packages that log
    through loguru are dropped.
    """
    logger.remove()
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    logger.add(sys.stderr, level=level, format=_FORMAT, filter="confmap")
