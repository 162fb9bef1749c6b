"""ConfigScout Root Pair Model - The dual working directory value.

A tool may run from a directory different from the one the user invoked it
in. The working root is where the tool runs; the original root is where the
user started. Resolution prefers the working root and falls back to the
original root.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..exceptions import ValidationError


@dataclass(frozen=True)
class RootPair:
    """Working and original root directories.

    Attributes:
        working_root: Directory tried first when it differs from original_root
        original_root: Directory always tried last; also the display root
    """

    working_root: str
    original_root: str

    def __post_init__(self):
        if not self.working_root:
            raise ValidationError("working_root", self.working_root, "Root cannot be empty")
        if not self.original_root:
            raise ValidationError("original_root", self.original_root, "Root cannot be empty")

    @classmethod
    def create(
        cls,
        working_root: Optional[Union[str, Path]] = None,
        original_root: Optional[Union[str, Path]] = None
    ) -> "RootPair":
        """Create a root pair, defaulting missing roots.

        The original root defaults to the process working directory and the
        working root defaults to the original root. Both are made absolute.

        Args:
            working_root: Relocated working directory, if any
            original_root: Directory the user invoked the tool from

        Returns:
            RootPair with absolute paths
        """
        original = os.path.abspath(str(original_root)) if original_root else os.getcwd()
        working = os.path.abspath(str(working_root)) if working_root else original
        return cls(working_root=working, original_root=original)

    @classmethod
    def from_cwd(cls) -> "RootPair":
        """Create a pair where both roots are the process working directory."""
        cwd = os.getcwd()
        return cls(working_root=cwd, original_root=cwd)

    @property
    def is_relocated(self) -> bool:
        """True when the working root differs from the original root."""
        return self.working_root != self.original_root

    def __str__(self) -> str:
        if self.is_relocated:
            return f"RootPair(working={self.working_root}, original={self.original_root})"
        return f"RootPair({self.original_root})"
