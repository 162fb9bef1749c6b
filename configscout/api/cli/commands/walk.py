"""Walk command module - handles list, has and classify commands."""

import argparse
import sys

from loguru import logger

from configscout.classifier import classify_extension
from configscout.core.config import ConfigScoutSettings
from services.file_util_service import FileUtilService

from ..utils.output import OutputFormatter
from ..utils.validation import exit_on_validation_error, validate_path, validate_skip_dirs


def _load_settings(args: argparse.Namespace) -> ConfigScoutSettings:
    return ConfigScoutSettings.load_hierarchical(project_dir=getattr(args, "config", None))


def _skip_dirs(args: argparse.Namespace, settings: ConfigScoutSettings) -> list[str]:
    skip_dirs = args.skip_dirs if args.skip_dirs is not None else settings.walk.skip_dirs
    if not validate_skip_dirs(skip_dirs):
        exit_on_validation_error("Invalid --skip value")
    return skip_dirs


async def list_command(args: argparse.Namespace) -> None:
    """Execute the list command.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)

    if not validate_path(args.path, must_exist=True, must_be_dir=True):
        exit_on_validation_error(f"Invalid path: {args.path}")

    settings = _load_settings(args)
    skip_dirs = _skip_dirs(args, settings)
    service = FileUtilService(settings.get_root_pair())

    if args.kind == "dirs":
        paths = await service.get_dir_list(args.path, skip_dirs)
    else:
        paths = await service.get_file_list(args.path, skip_dirs)

    formatter.verbose_info(f"Found {len(paths)} {args.kind} under {args.path}")

    if args.json:
        formatter.json_output(paths)
    else:
        formatter.lines(paths)


async def has_command(args: argparse.Namespace) -> None:
    """Execute the has command; exits with status 1 when nothing is found."""
    formatter = OutputFormatter(verbose=args.verbose)

    if not validate_path(args.path, must_exist=True, must_be_dir=True):
        exit_on_validation_error(f"Invalid path: {args.path}")

    settings = _load_settings(args)
    skip_dirs = _skip_dirs(args, settings)
    service = FileUtilService(settings.get_root_pair())

    if args.tool == "babel":
        found = await service.has_babel_config(args.path, skip_dirs)
    else:
        found = await service.has_tsc_config(args.path, skip_dirs)

    if found:
        formatter.success(f"{args.tool} config found under {args.path}")
        return

    logger.debug(f"No {args.tool} config under {args.path} (skip={skip_dirs})")
    formatter.info(f"No {args.tool} config found under {args.path}")
    sys.exit(1)


async def classify_command(args: argparse.Namespace) -> None:
    print(classify_extension(args.extension).value)
