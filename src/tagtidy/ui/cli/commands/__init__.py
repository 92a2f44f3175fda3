"""Command execution package for CLI."""

from tagtidy.ui.cli.commands.maintain import MaintainCommand

__all__ = ["MaintainCommand"]
