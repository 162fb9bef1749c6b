"""Display path helpers."""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def get_relative_path(base_path: PathLike, file_path: PathLike) -> str:
    """Get a display path for file_path.

    When file_path starts with base_path (a plain string prefix test, not a
    path-segment one) the path relative to base_path is returned, prefixed
    with "./" unless it already starts with ".". Otherwise file_path is
    returned unchanged.

    Args:
        base_path: Directory the display path is relative to
        file_path: Path to display

    Returns:
        Relative path such as "./conf/app.json", or file_path unchanged
    """
    base_path = os.fspath(base_path)
    file_path = os.fspath(file_path)

    if not file_path.startswith(base_path):
        return file_path

    relative = os.path.relpath(file_path, base_path or os.curdir)
    return relative if relative.startswith('.') else f".{os.sep}{relative}"
