"""Validation utilities for ConfigScout CLI arguments."""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger


def validate_path(path: Path, must_exist: bool = True, must_be_dir: bool = True) -> bool:
    """Validate a file system path.

    Args:
        path: Path to validate
        must_exist: Whether the path must exist
        must_be_dir: Whether the path must be a directory

    Returns:
        True if valid, False otherwise
    """
    if must_exist and not path.exists():
        logger.error(f"Path does not exist: {path}")
        return False

    if must_exist and must_be_dir and not path.is_dir():
        logger.error(f"Path is not a directory: {path}")
        return False

    return True


def validate_extensions(extensions: Optional[List[str]]) -> bool:
    """Validate candidate extensions.

    Args:
        extensions: Extensions given on the command line

    Returns:
        True if every extension is empty or starts with a dot
    """
    for extension in extensions or []:
        if extension and not extension.startswith('.'):
            logger.error(f"Extension must start with '.': {extension}")
            return False
    return True


def validate_skip_dirs(skip_dirs: Optional[List[str]]) -> bool:
    """Skip entries are directory names, not paths."""
    for name in skip_dirs or []:
        if not name or '/' in name or '\\' in name:
            logger.error(f"Skip entry must be a directory name, not a path: {name!r}")
            return False
    return True


def exit_on_validation_error(message: str) -> None:
    """Print error message and exit with error code.

    Args:
        message: Error message to display
    """
    logger.error(message)
    sys.exit(1)
