"""Utility modules for the ghkeep application."""

from ghkeep.utils.logging import get_logger, LogContext, setup_logging
from ghkeep.utils.secrets import mask_secret

__all__ = [
    # Logging
    "get_logger",
    "LogContext",
    "setup_logging",
    # Secrets
    "mask_secret",
]
