"""Argument parser utilities for ConfigScout CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .resolve_parser import add_cosmic_subparser, add_open_subparser, add_relative_subparser
from .walk_parser import add_classify_subparser, add_has_subparser, add_list_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_list_subparser",
    "add_has_subparser",
    "add_classify_subparser",
    "add_open_subparser",
    "add_cosmic_subparser",
    "add_relative_subparser",
]
