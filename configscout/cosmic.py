"""Upward rc-file search for a named module.

Searches each directory from the working root up to, and including, the
original root for the module's search places (``pyproject.toml``,
``.<module>rc``, ``.<module>rc.json``, ...). The first place that yields
configuration wins.

Other components may contribute extra search places and extension loaders
through CosmicSupport values.
"""

import asyncio
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from loguru import logger

from core.exceptions import LoadError, ValidationError
from core.models import CosmicResult, RootPair
from interfaces.config_loader import ConfigLoader
from providers.loading import DeferredLoader, EagerLoader

PYPROJECT = 'pyproject.toml'


def default_search_places(module_name: str) -> List[str]:
    """Get the default search places for module_name, in search order."""
    return [
        PYPROJECT,
        f'.{module_name}rc',
        f'.{module_name}rc.json',
        f'.{module_name}rc.yaml',
        f'.{module_name}rc.yml',
        f'.{module_name}rc.toml',
        f'.{module_name}rc.py',
        f'{module_name}.config.py',
        f'{module_name}.config.json',
    ]


def default_cosmic_loaders() -> Dict[str, ConfigLoader]:
    eager = EagerLoader()
    return {
        '': eager,
        '.json': eager,
        '.yaml': eager,
        '.yml': eager,
        '.toml': eager,
        '.py': DeferredLoader(),
    }


@dataclass(frozen=True)
class CosmicSupport:
    """Search places and loaders contributed to a module's search."""

    search_places: Sequence[str] = ()
    loaders: Mapping = field(default_factory=dict)


SupportInput = Union[None, CosmicSupport, Sequence[Any]]


def _flatten_support(support: SupportInput) -> List[CosmicSupport]:
    if support is None:
        return []
    if isinstance(support, CosmicSupport):
        return [support]

    flat: List[CosmicSupport] = []
    for item in support:
        flat.extend(_flatten_support(item))
    return flat


def _validate_options(options: Any) -> Dict[str, Any]:
    if not isinstance(options, Mapping):
        raise ValidationError("options", options, "'options' is not a mapping")

    module_name = options.get("module_name")
    if not isinstance(module_name, str):
        raise ValidationError("options.module_name", module_name, "'options.module_name' is not a 'str'")

    search_places = options.get("search_places")
    if search_places is not None:
        if not isinstance(search_places, (list, tuple)) or not all(isinstance(p, str) for p in search_places):
            raise ValidationError(
                "options.search_places", search_places, "'options.search_places' is not a list of 'str'"
            )

    return dict(options)


def _search_dirs(start: str, stop: str) -> Iterator[str]:
    """Yield start and its ancestors up to stop, or to the filesystem root."""
    current = os.path.abspath(start)
    stop = os.path.abspath(stop)

    while True:
        yield current
        parent = os.path.dirname(current)
        if current == stop or parent == current:
            return
        current = parent


def _is_blank(path: str) -> bool:
    """True when the file holds nothing but whitespace."""
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return not f.read().strip()
    except OSError as e:
        raise LoadError(path, "cosmic", e.strerror or str(e), cause=e) from e


async def _load_place(
    path: str,
    module_name: str,
    loaders: Mapping
) -> Any:
    if os.path.basename(path) == PYPROJECT:
        data = await loaders['.toml'].load(Path(path))
        return (data or {}).get('tool', {}).get(module_name)

    if await asyncio.to_thread(_is_blank, path):
        return None

    extension = Path(path).suffix
    loader = loaders.get(extension)
    if loader is None:
        raise LoadError(path, "cosmic", f"no loader specified for extension '{extension}'")
    return await loader.load(Path(path))


async def open_local_cosmic(
    options: Any,
    roots: RootPair,
    support: SupportInput = None,
    loaders: Optional[Mapping[str, ConfigLoader]] = None
) -> Optional[CosmicResult]:
    """Search for a module's configuration from the working root upward.

    Empty or whitespace-only files count as empty search places.

    Args:
        options: Mapping with "module_name" (str) and optional
            "search_places" (list of str) and "ignore_empty_search_places"
            (bool, default True)
        roots: Search starts at the working root and stops at the original root
        support: CosmicSupport contributions, possibly nested in lists
        loaders: Extension to loader mapping merged over the defaults,
            before support contributions

    Returns:
        CosmicResult for the first place holding configuration, or None

    Raises:
        ValidationError: If options are malformed
        LoadError: If a found file cannot be loaded
    """
    options = _validate_options(options)
    module_name = options["module_name"]
    ignore_empty = options.get("ignore_empty_search_places", True)

    search_places = list(options.get("search_places") or default_search_places(module_name))
    merged_loaders: Dict[str, Any] = default_cosmic_loaders()
    merged_loaders.update(loaders or {})

    for contribution in _flatten_support(support):
        search_places.extend(contribution.search_places)
        merged_loaders.update(contribution.loaders)

    logger.debug(f"Cosmic search for '{module_name}' from {roots.working_root}: {search_places}")

    for directory in _search_dirs(roots.working_root, roots.original_root):
        for place in search_places:
            path = os.path.join(directory, place)
            if not os.path.isfile(path):
                continue

            try:
                config = await _load_place(path, module_name, merged_loaders)
            except LoadError as e:
                raise e.add_context("module_name", module_name)

            if config is None:
                if os.path.basename(path) == PYPROJECT or ignore_empty:
                    continue
                return CosmicResult(config=None, filepath=path, is_empty=True)

            logger.debug(f"Cosmic config for '{module_name}' found at {path}")
            return CosmicResult(config=config, filepath=path)

    return None
