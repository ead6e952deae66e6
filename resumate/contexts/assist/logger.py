"""
Assist context logger.

Provides logging interface for assist context with automatic [assist] prefix.
All assist modules should import from this module, not from loguru directly.
Sinks are configured by whichever entry point runs (see utils/logger.py).
"""

from loguru import logger

CONTEXT_PREFIX = "[assist]"


# Wrapper functions with automatic [assist] prefix


def _log_info(message: str) -> None:
    """Log info message with [assist] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [assist] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [assist] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
