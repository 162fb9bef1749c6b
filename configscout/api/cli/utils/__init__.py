"""Shared utilities for ConfigScout CLI commands."""

from .output import OutputFormatter
from .validation import exit_on_validation_error, validate_extensions, validate_path, validate_skip_dirs

__all__ = [
    "OutputFormatter",
    "validate_path",
    "validate_extensions",
    "validate_skip_dirs",
    "exit_on_validation_error",
]
