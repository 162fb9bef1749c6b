"""ConfigLoader protocol for ConfigScout - abstract interface for file loading strategies."""

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigLoader(Protocol):
    """Abstract protocol for configuration loading strategies.

    The candidate resolver tries an ordered list of loaders against a file
    that exists until one returns a value. A loader signals failure by
    raising; LoadError is preferred but any exception is accepted.
    """

    @property
    def name(self) -> str:
        """Short loader name used in diagnostics (e.g., 'eager')."""
        ...

    async def load(self, path: Path) -> Any:
        """Load the file at path.

        Args:
            path: Absolute path of an existing file

        Returns:
            Deserialized data or the module's default export

        Raises:
            LoadError: If the file cannot be loaded by this strategy
        """
        ...
