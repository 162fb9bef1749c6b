"""Candidate and dual-root configuration resolution.

A candidate resolution probes ``base_path/stem + extension`` for each
extension in order. The first file that exists ends the search: it is handed
to each loader strategy in turn, and if every strategy fails a warning is
emitted and None is returned without trying later extensions.

The dual-root resolution runs a candidate resolution against the working
root first, when it differs from the original root, and then against the
original root.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from loguru import logger

from core.exceptions import LoadError
from core.models import LoadResult, RootPair
from interfaces.config_loader import ConfigLoader
from providers.loading import default_loaders

from .paths import PathLike, get_relative_path

WarningSink = Callable[[str], None]


def _describe_failure(error: Exception) -> str:
    if isinstance(error, LoadError):
        return error.reason
    return f"{type(error).__name__}: {error}"


def _format_warning(error_message: str, failures: Sequence[str], relative_path: str) -> str:
    lines = [error_message, *failures, f"file path: {relative_path}"]
    return "\n".join(lines)


async def open_files(
    base_path: PathLike,
    base_file_name: str,
    extensions: Iterable[str] = (),
    error_message: str = '',
    *,
    display_root: Optional[PathLike] = None,
    loaders: Optional[Sequence[ConfigLoader]] = None,
    warn: Optional[WarningSink] = None
) -> Optional[LoadResult]:
    """Open the first existing ``base_path/base_file_name[extension]``.

    Args:
        base_path: Directory holding the candidates
        base_file_name: File name without extension
        extensions: Extensions tried in order
        error_message: Prefix for the warning emitted when loading fails
        display_root: Root for LoadResult.relative_path (defaults to base_path)
        loaders: Loader strategies tried in order (defaults to eager, deferred)
        warn: Warning sink (defaults to logger.warning)

    Returns:
        LoadResult for the first existing candidate that loads, or None when
        no candidate exists or the first existing one fails to load
    """
    strategies: List[ConfigLoader] = list(loaders) if loaders is not None else default_loaders()
    warn = warn or logger.warning
    base = os.path.abspath(os.fspath(base_path))
    display = os.path.abspath(os.fspath(display_root)) if display_root is not None else base

    for extension in extensions:
        file_name = f"{base_file_name}{extension}"
        abs_file_path = os.path.join(base, file_name)

        if not os.path.exists(abs_file_path):
            continue

        relative_path = get_relative_path(display, abs_file_path)
        failures: List[str] = []

        for loader in strategies:
            try:
                data = await loader.load(Path(abs_file_path))
            except Exception as e:
                failures.append(f"{loader.name} error: {_describe_failure(e)}")
                logger.debug(f"{loader.name} loader failed for {abs_file_path}: {e}")
                continue

            logger.debug(f"Loaded {relative_path} with {loader.name} loader")
            return LoadResult(
                abs_file_path=abs_file_path,
                base_file_name=base_file_name,
                extension=extension,
                file_name=file_name,
                relative_path=relative_path,
                data=data,
            )

        warn(_format_warning(error_message, failures, relative_path))

        # An existing candidate ends the search whether or not it loaded
        break

    return None


async def open_local_configs(
    roots: RootPair,
    base_file_name: str,
    extensions: Iterable[str] = (),
    error_message: str = '',
    *,
    loaders: Optional[Sequence[ConfigLoader]] = None,
    warn: Optional[WarningSink] = None
) -> Optional[LoadResult]:
    """Open a local config from the working root, falling back to the original root.

    Args:
        roots: Working and original roots
        base_file_name: File name without extension
        extensions: Extensions tried in order
        error_message: Prefix for warnings emitted when loading fails
        loaders: Loader strategies tried in order
        warn: Warning sink

    Returns:
        LoadResult or None
    """
    extensions = tuple(extensions)

    if roots.is_relocated:
        result = await open_files(
            roots.working_root, base_file_name, extensions, error_message,
            display_root=roots.original_root, loaders=loaders, warn=warn,
        )
        if result is not None:
            return result
        logger.debug(f"No '{base_file_name}' config in {roots.working_root}, trying {roots.original_root}")

    return await open_files(
        roots.original_root, base_file_name, extensions, error_message,
        display_root=roots.original_root, loaders=loaders, warn=warn,
    )
