"""Configuration module for the SSIC records engine."""

from ssic.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
