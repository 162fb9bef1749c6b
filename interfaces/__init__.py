"""Interfaces package for ConfigScout - abstract protocols for provider implementations."""

from .config_loader import ConfigLoader

__all__ = [
    "ConfigLoader",
]
