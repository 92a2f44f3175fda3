# Where: tagtidy.shared.errors
# What: Exception hierarchy for failures that abort a run.
# Why: Per-file problems degrade in place; only these reach the CLI.


class TagTidyError(Exception):
    """Base error for the project."""


class InvalidRootError(TagTidyError):
    """The directory to scan does not exist or is not a directory."""


class ConfigError(TagTidyError):
    """The configuration file could not be read or parsed."""


__all__ = ["ConfigError", "InvalidRootError", "TagTidyError"]
