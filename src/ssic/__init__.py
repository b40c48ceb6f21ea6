"""SSIC records retention classification and disposal scheduling engine."""

__version__ = "0.1.0"
