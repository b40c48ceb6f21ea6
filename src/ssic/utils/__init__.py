"""Utility modules for the SSIC records engine."""

from ssic.utils.exceptions import (
    ConfigurationError,
    SsicError,
)

__all__ = [
    "SsicError",
    "ConfigurationError",
]
