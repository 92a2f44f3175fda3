"""Command line argument handling package."""

from tagtidy.ui.cli.args.options import MaintainArgs
from tagtidy.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "MaintainArgs"]
