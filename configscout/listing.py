"""Directory listings and config presence probes built on the tree walker.

Listings drain a walk completely. If the walk fails part way the
FilesystemError propagates and no partial list is returned.

Presence probes stop the walk at the first file whose base name is in the
probed name table.
"""

import os
from contextlib import aclosing
from typing import AbstractSet, Iterable, List

from loguru import logger

from core.types import BABEL_CONFIG_NAMES, TSC_CONFIG_NAMES, DirName, WalkMode

from .paths import PathLike
from .walker import walk, walk_dirs, walk_files


async def list_dirs(root_dir: PathLike = '.', skip_dirs: Iterable[DirName] = ()) -> List[str]:
    """Get the absolute paths of all directories found walking root_dir.

    Args:
        root_dir: Directory to walk
        skip_dirs: Directory names to skip at the top level

    Returns:
        List of absolute directory paths in walk order
    """
    return [os.path.abspath(path) async for path in walk_dirs(root_dir, skip_dirs)]


async def list_files(root_dir: PathLike = '.', skip_dirs: Iterable[DirName] = ()) -> List[str]:
    """Get the absolute paths of all files found walking root_dir.

    Args:
        root_dir: Directory to walk
        skip_dirs: Directory names to skip at the top level

    Returns:
        List of absolute file paths in walk order
    """
    return [os.path.abspath(path) async for path in walk_files(root_dir, skip_dirs)]


async def has_config_file(
    root_dir: PathLike,
    skip_dirs: Iterable[DirName],
    names: AbstractSet[str]
) -> bool:
    """Check whether any file under root_dir has a base name in names.

    Returns True as soon as a match is found; the rest of the tree is not read.
    """
    async with aclosing(walk(root_dir, skip_dirs, WalkMode.FILES)) as entries:
        async for entry in entries:
            if entry.name in names:
                logger.debug(f"Found config file: {entry.path}")
                return True
    return False


async def has_babel_config(root_dir: PathLike = '.', skip_dirs: Iterable[DirName] = ()) -> bool:
    """Check for a Babel configuration file (".babelrc", "babel.config.js", ...)."""
    return await has_config_file(root_dir, skip_dirs, BABEL_CONFIG_NAMES)


async def has_tsc_config(root_dir: PathLike = '.', skip_dirs: Iterable[DirName] = ()) -> bool:
    """Check for a TypeScript configuration file ("tsconfig.json", "jsconfig.json")."""
    return await has_config_file(root_dir, skip_dirs, TSC_CONFIG_NAMES)
