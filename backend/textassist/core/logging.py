"""
Logging configuration for the application.

One "textassist" logger writes to a rotating file and stdout. Provider
credentials can appear in outbound URLs (Gemini passes its key as a query
parameter), so handler output is redacted and the HTTP client libraries are
held at WARNING, where they do not log request lines.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from textassist.core.config import LoggingConfig, get_config, get_log_path

LOGGER_NAME = "textassist"

# Libraries that log full request URLs at INFO
QUIET_LOGGERS = ("httpx", "httpcore")

_SECRET_PATTERNS = (
    re.compile(r"([?&]key=)[^&\s\"']+"),
    re.compile(r"(Bearer\s+)[^\s\"']+"),
)

# Global logger instance
_logger: Optional[logging.Logger] = None


def redact(message: str) -> str:
    """Mask API keys in query strings and bearer tokens."""
    for pattern in _SECRET_PATTERNS:
        message = pattern.sub(r"\1***", message)
    return message


class RedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _build_handlers(log_config: LoggingConfig, level: int) -> List[logging.Handler]:
    formatter = logging.Formatter(log_config.format)
    file_handler = RotatingFileHandler(
        get_log_path(),
        maxBytes=log_config.max_size * 1024 * 1024,  # MB
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )
    handlers: List[logging.Handler] = [file_handler, logging.StreamHandler(sys.stdout)]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(RedactingFilter())
    return handlers


def setup_logging() -> logging.Logger:
    """
    Set up the service logger with file and console handlers.

    Idempotent: later calls return the logger configured by the first one.
    An unrecognised LOG_LEVEL falls back to INFO.
    """
    global _logger

    if _logger is not None:
        return _logger

    log_config = get_config().logging
    level = getattr(logging, log_config.level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    for handler in _build_handlers(log_config, level):
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        quiet = logging.getLogger(name)
        quiet.setLevel(max(quiet.level, logging.WARNING))

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the service logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger
