"""Audio tag extraction.

Where: src/tagtidy/features/metadata/tag_reader.py
What: Read title/artist/album/track tags through mutagen's easy interface.
Why: Tag failures must never abort a run; they degrade to empty tags here.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import mutagen
from mutagen import MutagenError

from tagtidy.platform.logging import logger
from tagtidy.shared.track_tags import TrackTags

from ._tag_utils import normalize_values, parse_slash_separated, safe_get_first

__all__ = ["read_tags", "tags_from_mapping"]


def tags_from_mapping(raw: Mapping[str, object]) -> TrackTags:
    """Normalise an easy-tag mapping into ``TrackTags``."""

    artists = normalize_values(raw.get("artist")) or normalize_values(raw.get("artists"))
    track_number, _ = parse_slash_separated(safe_get_first(normalize_values(raw.get("tracknumber"))))
    return TrackTags(
        title=safe_get_first(normalize_values(raw.get("title"))),
        artists=artists,
        album=safe_get_first(normalize_values(raw.get("album"))),
        track_number=track_number if track_number else None,
    )


def read_tags(file_path: Path) -> TrackTags:
    """Extract naming tags from an audio file.

    Args:
        file_path: Path to the audio file.

    Returns:
        TrackTags: Normalised tags; empty when the file has no readable tags.
    """
    try:
        audio = mutagen.File(file_path, easy=True)
    except MutagenError as exc:
        logger.debug("Failed to read tags from %s: %s", file_path, exc)
        return TrackTags()
    except Exception as exc:  # corrupt files surface assorted struct/index errors
        logger.debug("Failed to read tags from %s: %s", file_path, exc)
        return TrackTags()

    if audio is None or audio.tags is None:
        logger.debug("No tags found in %s", file_path)
        return TrackTags()

    try:
        tags = tags_from_mapping({key: audio.tags.get(key) for key in audio.tags.keys()})
    except Exception as exc:  # pragma: no cover
        logger.debug("Failed to normalise tags from %s: %s", file_path, exc)
        return TrackTags()

    logger.debug("Extracted tags from %s: %s", file_path, tags)
    return tags
