"""Asynchronous directory tree walker.

Walks are depth-first and lazy: one entry is read from the filesystem for
each value produced. Directories whose name starts with "." are always
pruned. The caller's skip list prunes directories only at the level the walk
was started from; nested levels are pruned by the hidden-dot rule alone.

The walk keeps an explicit stack of open directory iterators instead of
recursing, so tree depth does not consume Python stack frames. Every open
directory is closed when its entries run out, when the consumer stops early
and when an error aborts the walk.
"""

import asyncio
import os
from contextlib import aclosing
from pathlib import Path
from typing import AsyncIterator, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from loguru import logger

from core.exceptions import FilesystemError
from core.models import DirectoryEntry
from core.types import DirName, EntryKind, FilePath, WalkMode

PathLike = Union[str, Path]

_NO_SKIP: FrozenSet[DirName] = frozenset()


def _is_pruned(name: str, skip_dirs: FrozenSet[DirName]) -> bool:
    return name in skip_dirs or name.startswith('.')


async def _open_dir(path: str) -> Iterator[os.DirEntry]:
    try:
        return await asyncio.to_thread(os.scandir, path)
    except OSError as e:
        raise FilesystemError(path, "open", e.strerror or str(e), cause=e) from e


async def _read_entry(iterator: Iterator[os.DirEntry], path: str) -> Optional[os.DirEntry]:
    try:
        return await asyncio.to_thread(next, iterator, None)
    except OSError as e:
        raise FilesystemError(path, "read", e.strerror or str(e), cause=e) from e


def _entry_kind(entry: os.DirEntry, path: str) -> Optional[EntryKind]:
    """Kind of a directory entry without following symlinks; None for other entries."""
    try:
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError as e:
        raise FilesystemError(path, "stat", e.strerror or str(e), cause=e) from e
    return None


async def walk(
    root_dir: PathLike,
    skip_dirs: Iterable[DirName] = (),
    mode: WalkMode = WalkMode.FILES
) -> AsyncIterator[DirectoryEntry]:
    """Walk the tree under root_dir.

    Args:
        root_dir: Directory to start walking
        skip_dirs: Directory names pruned at the top level only
        mode: Yield directories or files

    Yields:
        DirectoryEntry for each directory (DIRECTORIES mode) or regular
        file (FILES mode), in filesystem order

    Raises:
        FilesystemError: If any directory cannot be opened or read
    """
    root = os.fspath(root_dir)
    top_skip = frozenset(skip_dirs)
    logger.debug(f"Walking {root} ({mode.value}, skip={sorted(top_skip)})")

    stack: List[Tuple[Iterator[os.DirEntry], str, FrozenSet[DirName]]] = []

    try:
        stack.append((await _open_dir(root), root, top_skip))

        while stack:
            iterator, parent, skip = stack[-1]
            entry = await _read_entry(iterator, parent)

            if entry is None:
                stack.pop()
                iterator.close()
                continue

            path = os.path.join(parent, entry.name)
            kind = _entry_kind(entry, path)

            if kind is None:
                continue
            if kind is EntryKind.DIRECTORY and _is_pruned(entry.name, skip):
                continue

            if kind is mode.entry_kind:
                yield DirectoryEntry(FilePath(path), kind)

            if kind is EntryKind.DIRECTORY:
                # The skip list is not carried into nested levels
                stack.append((await _open_dir(path), path, _NO_SKIP))
    finally:
        while stack:
            iterator, _, _ = stack.pop()
            iterator.close()


async def walk_dirs(root_dir: PathLike, skip_dirs: Iterable[DirName] = ()) -> AsyncIterator[str]:
    """Yield every non-pruned directory under root_dir, parents before children."""
    async with aclosing(walk(root_dir, skip_dirs, WalkMode.DIRECTORIES)) as entries:
        async for entry in entries:
            yield entry.path


async def walk_files(root_dir: PathLike, skip_dirs: Iterable[DirName] = ()) -> AsyncIterator[str]:
    """Yield every regular file under root_dir outside pruned directories."""
    async with aclosing(walk(root_dir, skip_dirs, WalkMode.FILES)) as entries:
        async for entry in entries:
            yield entry.path
