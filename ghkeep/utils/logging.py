"""Logging setup for the ghkeep service and its auth client."""

import logging
import sys

from ghkeep.config import LogLevel, get_settings

# Libraries that log request/statement detail we never want next to credentials
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "sqlalchemy.engine", "aiosqlite")


def setup_logging(level: LogLevel | None = None) -> None:
    """Configure the root logger once per process.

    Args:
        level: Explicit level; falls back to INFO in production, DEBUG otherwise
    """
    if level is None:
        level = "INFO" if get_settings().is_production else "DEBUG"

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogContext:
    """Prefixes every message with `[key=value]` pairs for one auth operation.

    Usage:
        log = LogContext(logger, op="login", email=mask_email(email))
        log.info("Invalid credentials")
        # -> "[op=login] [email=***@x.com] Invalid credentials"
    """

    def __init__(self, logger: logging.Logger, **context: str) -> None:
        self.logger = logger
        self.prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def debug(self, msg: str) -> None:
        self.logger.debug(f"{self.prefix} {msg}")

    def info(self, msg: str) -> None:
        self.logger.info(f"{self.prefix} {msg}")
