"""ConfigScout Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Walk enums (entry kinds and walk modes)
- Extension classification
- Fixed config file name tables
"""

from .common import (
    BABEL_CONFIG_NAMES,
    SCRIPT_EXTENSIONS,
    TSC_CONFIG_NAMES,
    TYPED_SCRIPT_EXTENSIONS,
    DirName,
    EntryKind,
    Extension,
    ExtensionClass,
    FilePath,
    WalkMode,
)

__all__ = [
    # Enums
    "EntryKind",
    "ExtensionClass",
    "WalkMode",

    # String types
    "DirName",
    "Extension",
    "FilePath",

    # Tables
    "SCRIPT_EXTENSIONS",
    "TYPED_SCRIPT_EXTENSIONS",
    "BABEL_CONFIG_NAMES",
    "TSC_CONFIG_NAMES",
]
