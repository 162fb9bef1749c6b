"""Main argument parser for ConfigScout CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from configscout import __version__

    parser = argparse.ArgumentParser(
        prog="configscout",
        description="Locate and load configuration files across working and original roots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  configscout list files . --skip node_modules
  configscout has tsc /path/to/project
  configscout open babel.config --ext .json --ext .py --working-root ./build
  configscout cosmic mytool
  configscout relative /home/me/project /home/me/project/src/app.js
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"configscout {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Project directory holding .configscout.json",
    )


def add_skip_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--skip",
        action="append",
        dest="skip_dirs",
        metavar="NAME",
        help="Directory name to skip at the top level (repeatable, defaults to settings)",
    )


def add_root_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the working/original root arguments.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--working-root",
        type=Path,
        help="Directory searched first (defaults to settings or the original root)",
    )

    parser.add_argument(
        "--original-root",
        type=Path,
        help="Directory searched last (defaults to settings or the current directory)",
    )
