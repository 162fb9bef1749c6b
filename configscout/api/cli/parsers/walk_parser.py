"""Walk command argument parsers (list, has, classify) for ConfigScout CLI."""

import argparse
from pathlib import Path

from .main_parser import add_common_arguments, add_skip_argument


def add_list_subparser(subparsers) -> argparse.ArgumentParser:
    """Add list command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured list subparser
    """
    list_parser = subparsers.add_parser(
        "list",
        help="List directories or files under a path",
        description="Walk a directory tree, skipping hidden and excluded directories",
    )

    list_parser.add_argument(
        "kind",
        choices=["dirs", "files"],
        help="What to list",
    )
    list_parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Directory to walk (default: current directory)",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Output a JSON array",
    )

    add_skip_argument(list_parser)
    add_common_arguments(list_parser)

    return list_parser


def add_has_subparser(subparsers) -> argparse.ArgumentParser:
    has_parser = subparsers.add_parser(
        "has",
        help="Check whether a Babel or TypeScript config exists under a path",
        description="Exit with status 0 when a matching config file is found, 1 otherwise",
    )

    has_parser.add_argument(
        "tool",
        choices=["babel", "tsc"],
        help="Config family to look for",
    )
    has_parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Directory to walk (default: current directory)",
    )

    add_skip_argument(has_parser)
    add_common_arguments(has_parser)

    return has_parser


def add_classify_subparser(subparsers) -> argparse.ArgumentParser:
    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify a file extension as script, typed_script or unrecognized",
    )

    classify_parser.add_argument(
        "extension",
        help="Extension including the dot, e.g. .tsx",
    )

    add_common_arguments(classify_parser)

    return classify_parser
