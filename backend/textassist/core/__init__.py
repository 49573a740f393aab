"""
Core module initialization.
"""

from textassist.core.config import (
    ProviderConfig,
    get_config,
    get_provider_config,
    load_config,
    load_provider_config,
)
from textassist.core.errors import AdapterError, ErrorCode, register_exception_handlers
from textassist.core.logging import get_logger, setup_logging

__all__ = [
    "ProviderConfig",
    "get_config",
    "get_provider_config",
    "load_config",
    "load_provider_config",
    "AdapterError",
    "ErrorCode",
    "register_exception_handlers",
    "get_logger",
    "setup_logging",
]
