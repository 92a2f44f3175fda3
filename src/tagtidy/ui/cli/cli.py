"""Command line interface for tagtidy."""

import sys
from typing import final

from tagtidy.platform.logging import logger
from tagtidy.shared.errors import TagTidyError
from tagtidy.ui.cli.args import ArgumentParser
from tagtidy.ui.cli.commands import MaintainCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = MaintainCommand(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except TagTidyError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error: %s", e, exc_info=True)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit via
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
