"""Modular CLI entry point for ConfigScout."""

import argparse
import asyncio
import sys
from typing import List, Optional

from loguru import logger

from configscout.core.config import ConfigScoutSettings
from core.exceptions import ConfigScoutError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import (
        add_classify_subparser,
        add_cosmic_subparser,
        add_has_subparser,
        add_list_subparser,
        add_open_subparser,
        add_relative_subparser,
        create_main_parser,
        setup_subparsers,
    )

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_list_subparser(subparsers)
    add_has_subparser(subparsers)
    add_classify_subparser(subparsers)
    add_open_subparser(subparsers)
    add_cosmic_subparser(subparsers)
    add_relative_subparser(subparsers)

    return parser


async def async_main(argv: Optional[List[str]] = None) -> None:
    """Async main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    settings = ConfigScoutSettings.load_hierarchical(project_dir=getattr(args, "config", None))
    setup_logging(getattr(args, "verbose", False) or settings.debug)

    from . import commands

    handlers = {
        "list": commands.list_command,
        "has": commands.has_command,
        "classify": commands.classify_command,
        "open": commands.open_command,
        "cosmic": commands.cosmic_command,
        "relative": commands.relative_command,
    }

    try:
        await handlers[args.command](args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except ConfigScoutError as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        asyncio.run(async_main())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
