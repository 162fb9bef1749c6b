"""ConfigScout Core Package - Domain models, types, and exceptions.

This package contains the value types shared by the walker, the resolvers
and the service layer. It has no dependency on the filesystem beyond path
manipulation.

Modules:
    models: DirectoryEntry, LoadResult, CosmicResult and RootPair
    types: Walk enums, extension classes and config name tables
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    ConfigScoutError,
    FilesystemError,
    LoadError,
    ValidationError,
)
from .models import CosmicResult, DirectoryEntry, LoadResult, RootPair
from .types import EntryKind, ExtensionClass, WalkMode

__all__ = [
    # Domain Models
    "DirectoryEntry",
    "LoadResult",
    "CosmicResult",
    "RootPair",

    # Types
    "EntryKind",
    "ExtensionClass",
    "WalkMode",

    # Exceptions
    "ConfigScoutError",
    "FilesystemError",
    "LoadError",
    "ValidationError",
]

__version__ = "0.3.0"
