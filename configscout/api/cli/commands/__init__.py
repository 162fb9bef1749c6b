"""ConfigScout CLI commands package - modular command implementations."""

from .resolve import cosmic_command, open_command, relative_command
from .walk import classify_command, has_command, list_command

__all__ = [
    "list_command",
    "has_command",
    "classify_command",
    "open_command",
    "cosmic_command",
    "relative_command",
]
