"""ConfigScout Core Exceptions Package - Core exception classes for error handling.

This package contains the exception hierarchy for the ConfigScout system:
- FilesystemError aborts walks, listings and presence probes
- LoadError is raised by loaders and recovered by the candidate resolver
- ValidationError reports malformed arguments immediately
"""

from .core import (
    ConfigScoutError,
    FilesystemError,
    LoadError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ConfigScoutError",

    # Domain-specific exceptions
    "FilesystemError",
    "LoadError",
    "ValidationError",
]
