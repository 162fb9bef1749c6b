"""ConfigScout Load Result Models - Results of configuration resolution.

This module contains the value objects returned when a configuration file is
found and loaded, either by the candidate resolver (LoadResult) or by the
upward rc-file search (CosmicResult). Both are produced once per resolution
and never cached.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..types import Extension


@dataclass(frozen=True)
class LoadResult:
    """A configuration file that was found and loaded.

    Attributes:
        abs_file_path: Absolute path of the loaded file
        base_file_name: File name without extension (the stem that was probed)
        extension: Extension that matched, including the dot
        file_name: base_file_name + extension
        relative_path: Display path relative to the display root
        data: Deserialized data, or the module's default export
    """

    abs_file_path: str
    base_file_name: str
    extension: Extension
    file_name: str
    relative_path: str
    data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary.

        Returns:
            Dictionary representation of the result
        """
        return {
            "abs_file_path": self.abs_file_path,
            "base_file_name": self.base_file_name,
            "extension": self.extension,
            "file_name": self.file_name,
            "relative_path": self.relative_path,
            "data": self.data,
        }

    def __str__(self) -> str:
        return f"LoadResult(path={self.relative_path}, extension={self.extension})"


@dataclass(frozen=True)
class CosmicResult:
    """Result of an upward rc-file search.

    Attributes:
        config: Loaded configuration, None when the file was empty
        filepath: Absolute path of the file the configuration came from
        is_empty: True when the file existed but held no configuration
    """

    config: Optional[Any]
    filepath: str
    is_empty: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"config": self.config, "filepath": self.filepath}
        if self.is_empty:
            result["is_empty"] = True
        return result
