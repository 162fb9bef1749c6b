"""Resolve command module - handles open, cosmic and relative commands."""

import argparse
import sys

from configscout.core.config import ConfigScoutSettings
from configscout.paths import get_relative_path
from services.file_util_service import FileUtilService

from ..utils.output import OutputFormatter
from ..utils.validation import exit_on_validation_error, validate_extensions


def _create_service(args: argparse.Namespace) -> tuple[FileUtilService, ConfigScoutSettings]:
    settings = ConfigScoutSettings.load_hierarchical(
        project_dir=getattr(args, "config", None),
        working_root=str(args.working_root) if args.working_root else None,
        original_root=str(args.original_root) if args.original_root else None,
    )
    return FileUtilService(settings.get_root_pair()), settings


async def open_command(args: argparse.Namespace) -> None:
    """Execute the open command.

    Prints the load result as JSON, or exits with status 1 when no usable
    configuration is found.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)

    if not validate_extensions(args.extensions):
        exit_on_validation_error("Invalid --ext value")

    service, settings = _create_service(args)
    extensions = args.extensions or settings.resolve.extensions
    error_message = args.error_message or settings.resolve.error_message

    formatter.verbose_info(f"Resolving '{args.stem}' {extensions} in {service.roots}")

    result = await service.open_local_configs(args.stem, extensions, error_message)
    if result is None:
        formatter.error(f"No usable '{args.stem}' configuration found")
        sys.exit(1)

    formatter.json_output(result.to_dict())


async def cosmic_command(args: argparse.Namespace) -> None:
    """Execute the cosmic command."""
    formatter = OutputFormatter(verbose=args.verbose)
    service, _ = _create_service(args)

    options = {"module_name": args.module_name}
    if args.search_places:
        options["search_places"] = args.search_places

    result = await service.open_local_cosmic(options)
    if result is None:
        formatter.error(f"No '{args.module_name}' configuration found")
        sys.exit(1)

    formatter.json_output(result.to_dict())


async def relative_command(args: argparse.Namespace) -> None:
    print(get_relative_path(args.base, args.path))
