"""Command line interface package."""

from tagtidy.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
