"""Custom exceptions for the SSIC records engine."""


class SsicError(Exception):
    """Base exception for all SSIC records errors."""

    pass


class ConfigurationError(SsicError):
    """Error in configuration or settings."""

    pass
