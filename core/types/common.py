"""ConfigScout Core Types - Common type definitions and lookup tables.

This module contains the enums and fixed name tables shared by the walker,
the classifier and the presence probes.
"""

from enum import Enum
from typing import FrozenSet, NewType


# String-based type aliases for better semantic clarity
FilePath = NewType("FilePath", str)         # Path as produced by the walker
Extension = NewType("Extension", str)       # e.g., ".js", including the dot
DirName = NewType("DirName", str)           # A single directory name, not a path

SCRIPT_EXTENSIONS: FrozenSet[str] = frozenset({'.js', '.jsx', '.es6', '.es', '.mjs'})
TYPED_SCRIPT_EXTENSIONS: FrozenSet[str] = frozenset({'.ts', '.tsx'})

BABEL_CONFIG_NAMES: FrozenSet[str] = frozenset({
    '.babelrc',
    '.babelrc.cjs',
    '.babelrc.js',
    '.babelrc.mjs',
    '.babelrc.json',
    'babel.config.cjs',
    'babel.config.js',
    'babel.config.json',
    'babel.config.mjs',
})

TSC_CONFIG_NAMES: FrozenSet[str] = frozenset({'tsconfig.json', 'jsconfig.json'})


class EntryKind(Enum):
    """Kind of filesystem entry produced by a walk."""

    DIRECTORY = "directory"
    FILE = "file"


class WalkMode(Enum):
    """Which entries a walk yields."""

    DIRECTORIES = "directories"
    FILES = "files"

    @property
    def entry_kind(self) -> EntryKind:
        """Entry kind yielded in this mode."""
        return EntryKind.DIRECTORY if self is WalkMode.DIRECTORIES else EntryKind.FILE


class ExtensionClass(Enum):
    """Recognized source-code kinds, derived from a file extension."""

    SCRIPT = "script"
    TYPED_SCRIPT = "typed_script"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_extension(cls, extension: str) -> "ExtensionClass":
        """Classify an extension by exact, case-sensitive table membership."""
        if extension in SCRIPT_EXTENSIONS:
            return cls.SCRIPT
        if extension in TYPED_SCRIPT_EXTENSIONS:
            return cls.TYPED_SCRIPT
        return cls.UNRECOGNIZED

    @classmethod
    def from_string(cls, value: str) -> "ExtensionClass":
        """Convert string to ExtensionClass, defaulting to UNRECOGNIZED for invalid values."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def is_recognized(self) -> bool:
        """Return True for the script and typed-script kinds."""
        return self is not ExtensionClass.UNRECOGNIZED
