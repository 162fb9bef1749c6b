"""Deferred loader for ConfigScout - dynamic import of Python config modules.

The deferred strategy imports a configuration file as a Python module in a
worker thread and exposes the module's ``default`` attribute as the loaded
value. A config module therefore looks like::

    default = {"presets": ["env"]}
"""

import asyncio
import hashlib
import importlib.util
import sys
from pathlib import Path
from typing import Any, Iterable

from loguru import logger

from core.exceptions import LoadError

DEFAULT_EXPORT = "default"


class DeferredLoader:
    """Imports a Python source file and returns its default export."""

    def __init__(self, suffixes: Iterable[str] = ('.py',), export_name: str = DEFAULT_EXPORT):
        """Initialize the loader.

        Args:
            suffixes: File suffixes accepted as Python source
            export_name: Module attribute holding the configuration
        """
        self._suffixes = frozenset(suffixes)
        self._export_name = export_name

    @property
    def name(self) -> str:
        return "deferred"

    @property
    def export_name(self) -> str:
        return self._export_name

    def _module_name(self, path: Path) -> str:
        digest = hashlib.sha1(str(path).encode('utf-8')).hexdigest()[:12]
        return f"_configscout_{path.stem.replace('.', '_')}_{digest}"

    def _import(self, path: Path) -> Any:
        if path.suffix not in self._suffixes:
            raise LoadError(str(path), self.name, f"not an importable module '{path.name}'")

        module_name = self._module_name(path)
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise LoadError(str(path), self.name, "no module loader available")

        module = importlib.util.module_from_spec(spec)
        # Registered only while executing so the module can refer to itself
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise LoadError(str(path), self.name, f"{type(e).__name__}: {e}", cause=e) from e
        finally:
            sys.modules.pop(module_name, None)

        if not hasattr(module, self._export_name):
            raise LoadError(
                str(path), self.name, f"module has no '{self._export_name}' attribute"
            )

        return getattr(module, self._export_name)

    async def load(self, path: Path) -> Any:
        """Import the module at path in a worker thread."""
        data = await asyncio.to_thread(self._import, path)
        logger.debug(f"Deferred load succeeded: {path}")
        return data

    def __repr__(self) -> str:
        return f"DeferredLoader(suffixes={sorted(self._suffixes)}, export={self._export_name!r})"
