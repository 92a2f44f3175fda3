"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagtidy.config.config import Config
from tagtidy.config.settings import (
    effective_extensions,
    effective_pattern,
    effective_preview_limit,
)
from tagtidy.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from tagtidy.shared.errors import ConfigError
from tagtidy.ui.cli.args.options import MaintainArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagtidy",
            description=(
                "tagtidy - rename audio files from their tags and weed out files "
                "that no longer decode."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "--dir",
            dest="directory",
            type=str,
            required=True,
            help="Root directory to scan",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--recursive",
            action="store_true",
            help="Include subdirectories",
        )
        _ = parser.add_argument(
            "--pattern",
            type=str,
            help='Naming template, e.g. "{artist} - {title}" '
            "(placeholders: {title} {artist} {album} {track})",
            metavar="TEMPLATE",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report the plan without deleting or renaming anything",
        )
        _ = parser.add_argument(
            "--delete-bad",
            action="store_true",
            help="Delete files that fail the playability check",
        )
        _ = parser.add_argument(
            "--ext",
            dest="extensions",
            action="append",
            help="Audio extension to scan for (repeatable, default .mp3)",
            metavar="EXT",
        )
        _ = parser.add_argument(
            "--no-ffprobe",
            action="store_true",
            help="Never consult ffprobe, even when it is installed",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Configuration file to use",
            metavar="CONFIG_FILE",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> MaintainArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            MaintainArgs: Processed command line arguments.

        Raises:
            SystemExit: If the directory or configuration is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        _ = setup_logger(console_level=log_level)

        try:
            configuration = Config.load(parsed_args.config)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)

        log_file = configuration.log_file
        if log_file is None and configuration.log_to_file:
            log_file = DEFAULT_LOG_FILE
        if log_file is not None:
            _ = setup_logger(log_file=log_file, console_level=log_level)

        directory = Path(parsed_args.directory).expanduser()
        if not directory.exists() or not directory.is_dir():
            logger.error("Directory does not exist or is not a directory: %s", directory)
            sys.exit(1)

        return MaintainArgs(
            directory=directory.resolve(),
            recursive=parsed_args.recursive,
            pattern=effective_pattern(configuration, parsed_args.pattern),
            dry_run=parsed_args.dry_run,
            delete_bad=parsed_args.delete_bad,
            extensions=effective_extensions(configuration, parsed_args.extensions),
            use_ffprobe=configuration.use_ffprobe and not parsed_args.no_ffprobe,
            ffprobe_path=configuration.ffprobe_path,
            preview_limit=effective_preview_limit(configuration),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
