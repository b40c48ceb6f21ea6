"""Core infrastructure: structured logging and boundary exceptions."""

from ssic.core.exceptions import DatasetLoadError
from ssic.core.logging import (
    LogContext,
    get_logger,
    log_exception,
    setup_logging,
)

__all__ = [
    # Exceptions
    "DatasetLoadError",
    # Logging
    "LogContext",
    "get_logger",
    "log_exception",
    "setup_logging",
]
