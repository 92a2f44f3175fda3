"""
Summary: Build canonical base file names from a template and normalised tags.
Why: Keep templating pure so naming rules are testable without audio files.
"""

from __future__ import annotations

import re
from typing import Final

from tagtidy.config.settings import FALLBACK_NAME
from tagtidy.shared.track_tags import TrackTags

from .sanitizer import Sanitizer

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")
_DASH_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"\s*-\s*")


def format_track_number(track_number: int | None) -> str:
    """Zero-pad a track number to two digits; absent or zero renders empty."""

    if isinstance(track_number, int) and track_number > 0:
        return str(track_number).zfill(2)
    return ""


def placeholder_values(tags: TrackTags) -> dict[str, str]:
    """Map each recognised placeholder to its rendered value."""

    return {
        "{title}": (tags.title or "").strip(),
        "{artist}": tags.artist.strip(),
        "{album}": (tags.album or "").strip(),
        "{track}": format_track_number(tags.track_number),
    }


def build_name(tags: TrackTags, pattern: str) -> str:
    """Render ``pattern`` with ``tags`` into a sanitized base name.

    Args:
        tags: Normalised tag values.
        pattern: Template using ``{title}``, ``{artist}``, ``{album}``, ``{track}``.

    Returns:
        str: Non-empty, filesystem-legal name without extension.
    """
    out = pattern
    for placeholder, value in placeholder_values(tags).items():
        out = out.replace(placeholder, value)

    out = _WHITESPACE.sub(" ", out)
    out = _DASH_SEPARATOR.sub(" - ", out)
    # Separators left dangling by empty placeholders carry no information.
    out = Sanitizer.sanitize_filename(out.strip(" -"))
    if not out.strip(" -"):
        return FALLBACK_NAME
    return out


__all__ = ["build_name", "format_track_number", "placeholder_values"]
