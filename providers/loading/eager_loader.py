"""Eager loader for ConfigScout - synchronous parsing of structured data files.

The eager strategy reads and deserializes a file in one step, the way a
module system loads JSON or a plain data file at reference time. Files whose
format it does not know are rejected so that the next strategy can try them.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml
from loguru import logger

from core.exceptions import LoadError

try:
    import tomllib
except ImportError:
    import tomli as tomllib


def _load_json(path: Path) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _load_yaml(path: Path) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def _load_toml(path: Path) -> Any:
    with open(path, 'rb') as f:
        return tomllib.load(f)


def _load_rc(path: Path) -> Any:
    """Parse an extension-less rc file (".babelrc", ".toolrc") as JSON, then YAML.

    YAML rejects tab indentation, which is common in hand-written JSON rc files.
    """
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)


_DEFAULT_PARSERS: Dict[str, Callable[[Path], Any]] = {
    '.json': _load_json,
    '.yaml': _load_yaml,
    '.yml': _load_yaml,
    '.toml': _load_toml,
    '': _load_rc,
}


class EagerLoader:
    """Loads structured data files synchronously by extension."""

    def __init__(self, parsers: Optional[Dict[str, Callable[[Path], Any]]] = None):
        """Initialize the loader.

        Args:
            parsers: Extension to parser mapping; replaces the defaults when given
        """
        self._parsers = dict(parsers) if parsers is not None else dict(_DEFAULT_PARSERS)

    @property
    def name(self) -> str:
        return "eager"

    def get_parser(self, path: Path) -> Optional[Callable[[Path], Any]]:
        """Get the parser for a path, or None when the extension is unsupported."""
        # Path(".babelrc").suffix is "" so rc files map to the extension-less parser
        return self._parsers.get(path.suffix)

    def load_sync(self, path: Path) -> Any:
        """Parse the file at path.

        Raises:
            LoadError: If the extension is unsupported or parsing fails
        """
        parser = self.get_parser(path)
        if parser is None:
            raise LoadError(str(path), self.name, f"unsupported extension '{path.suffix}'")

        try:
            data = parser(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # json.JSONDecodeError and tomllib.TOMLDecodeError are ValueErrors
            raise LoadError(str(path), self.name, str(e), cause=e) from e

        logger.debug(f"Eager load succeeded: {path}")
        return data

    async def load(self, path: Path) -> Any:
        """Load the file at path without suspending."""
        return self.load_sync(path)

    def __repr__(self) -> str:
        return f"EagerLoader(extensions={sorted(self._parsers)})"
