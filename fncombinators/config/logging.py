"""Logging configuration and utilities using Loguru.

The package disables its own log records on import, following the Loguru
convention for libraries. Applications opt in either by calling
``setup_loguru_logger()`` or by setting ``FNCOMBINATORS_LOGGING__ENABLED=true``.

Public API:
----------
setup_loguru_logger(verbose: bool = False) -> None
    Configure a console sink and enable the package's log records

get_logger(name: str) -> Logger
    Get a context-aware logger for your module
    Usage: logger = get_logger(__name__)
"""

import sys
from typing import Any

from loguru import logger

from .settings import settings

PACKAGE_NAME = "fncombinators"


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


def setup_loguru_logger(verbose: bool = False) -> None:
    """Configure Loguru for console output and enable library records.

    Args:
        verbose: Log at debug level with detailed tracebacks

    Note:
        Removes previously added handlers, so call it once from application
        start-up code rather than from library code.
    """
    logger.remove()

    console_level = "DEBUG" if verbose else settings.logging.console_level
    logger.add(
        sink=sys.stderr,
        level=console_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
            "<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )
    logger.enable(PACKAGE_NAME)


def configure_library_logging() -> None:
    """Apply the ``logging.enabled`` setting to the package's records."""
    if settings.logging.enabled:
        logger.enable(PACKAGE_NAME)
    else:
        logger.disable(PACKAGE_NAME)


# =============================================================================
# LOGGER FACTORY
# =============================================================================


def get_logger(name: str) -> Any:  # Use Any for Loguru logger type
    """Get a logger bound with module context.

    Args:
        name: Module name (typically __name__)

    Returns:
        Loguru logger instance with ``module`` and ``service`` extras
    """
    return logger.bind(
        module=name,
        service=PACKAGE_NAME,
    )
