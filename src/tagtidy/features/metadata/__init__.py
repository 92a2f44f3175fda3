"""
Summary: Public surface for tag extraction.
Why: Provide a stable import path for the inspector and tests.
"""

from ._tag_utils import normalize_values, parse_slash_separated, safe_get_first
from .tag_reader import read_tags, tags_from_mapping

__all__ = [
    "normalize_values",
    "parse_slash_separated",
    "read_tags",
    "safe_get_first",
    "tags_from_mapping",
]
