"""Resolve command argument parsers (open, cosmic, relative) for ConfigScout CLI."""

import argparse
from pathlib import Path

from .main_parser import add_common_arguments, add_root_arguments


def add_open_subparser(subparsers) -> argparse.ArgumentParser:
    """Add open command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured open subparser
    """
    open_parser = subparsers.add_parser(
        "open",
        help="Load the first existing STEM+EXT from the working root, then the original root",
        description="Resolve a local configuration file and print it as JSON",
    )

    open_parser.add_argument(
        "stem",
        help="File name without extension",
    )
    open_parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        metavar="EXT",
        help="Candidate extension, tried in the order given (repeatable, defaults to settings)",
    )
    open_parser.add_argument(
        "--message",
        dest="error_message",
        help="Prefix for the warning printed when the file fails to load",
    )

    add_root_arguments(open_parser)
    add_common_arguments(open_parser)

    return open_parser


def add_cosmic_subparser(subparsers) -> argparse.ArgumentParser:
    cosmic_parser = subparsers.add_parser(
        "cosmic",
        help="Search for MODULE rc files from the working root up to the original root",
    )

    cosmic_parser.add_argument(
        "module_name",
        help="Module name used to build the search places (.MODULErc, ...)",
    )
    cosmic_parser.add_argument(
        "--search-place",
        action="append",
        dest="search_places",
        metavar="NAME",
        help="Replace the default search places (repeatable)",
    )

    add_root_arguments(cosmic_parser)
    add_common_arguments(cosmic_parser)

    return cosmic_parser


def add_relative_subparser(subparsers) -> argparse.ArgumentParser:
    relative_parser = subparsers.add_parser(
        "relative",
        help="Print PATH relative to BASE when it lies under BASE",
    )

    relative_parser.add_argument("base", type=Path, help="Base directory")
    relative_parser.add_argument("path", type=Path, help="Path to display")

    add_common_arguments(relative_parser)

    return relative_parser
