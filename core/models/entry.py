"""ConfigScout Entry Domain Model - A path produced by a directory walk."""

import os
from dataclasses import dataclass

from ..types import EntryKind, FilePath
from ..exceptions import ValidationError


@dataclass(frozen=True)
class DirectoryEntry:
    """A walked path tagged with its kind.

    Attributes:
        path: Path joined from the walk root and the entry names
        kind: Whether the entry is a directory or a file
    """

    path: FilePath
    kind: EntryKind

    def __post_init__(self):
        if not self.path:
            raise ValidationError("path", self.path, "Path cannot be empty")

    @property
    def name(self) -> str:
        """Get the base name of the entry."""
        return os.path.basename(self.path)

    def __str__(self) -> str:
        return self.path
