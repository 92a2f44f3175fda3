"""Shared value objects and errors used across features."""

from tagtidy.shared.errors import ConfigError, InvalidRootError, TagTidyError
from tagtidy.shared.track_tags import TrackTags

__all__ = ["ConfigError", "InvalidRootError", "TagTidyError", "TrackTags"]
