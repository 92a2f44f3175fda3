"""
Summary: Decide playability from the stream duration mutagen can derive.
Why: A partial read is cheap; the full parse only runs when the prefix is inconclusive.
"""

from __future__ import annotations

import io
import math
from pathlib import Path
from typing import Any, ClassVar, final

import mutagen
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from tagtidy.config.settings import PROBE_PREFIX_BYTES
from tagtidy.platform.logging import logger


def _positive_duration(audio: Any) -> float | None:
    info = getattr(audio, "info", None)
    length = getattr(info, "length", None)
    if isinstance(length, (int, float)) and math.isfinite(length) and length > 0:
        return float(length)
    return None


@final
class MetadataDurationProbe:
    """Playability probe backed by mutagen stream info."""

    # Declared container per extension for the prefix read.
    PREFIX_TYPES: ClassVar[dict[str, type]] = {
        ".mp3": MP3,
        ".flac": FLAC,
        ".m4a": MP4,
        ".mp4": MP4,
        ".ogg": OggVorbis,
        ".opus": OggOpus,
    }

    def __init__(self, prefix_bytes: int = PROBE_PREFIX_BYTES) -> None:
        self.prefix_bytes = prefix_bytes

    def prefix_duration(self, file_path: Path) -> float | None:
        """Duration reported from the first ``prefix_bytes`` of the file."""

        file_type = self.PREFIX_TYPES.get(file_path.suffix.lower())
        if file_type is None:
            return None
        with open(file_path, "rb") as handle:
            prefix = handle.read(self.prefix_bytes)
        return _positive_duration(file_type(io.BytesIO(prefix)))

    def full_duration(self, file_path: Path) -> float | None:
        """Duration reported by a full-file parse."""

        return _positive_duration(mutagen.File(file_path))

    def check(self, file_path: Path) -> bool:
        """Return True when a positive duration is obtained from either read."""

        try:
            duration = self.prefix_duration(file_path)
        except Exception as exc:  # decoders raise assorted errors on damaged input
            logger.debug("Partial metadata probe failed for %s: %s", file_path, exc)
            duration = None

        if duration is not None:
            logger.debug("Partial metadata probe: %s -> %.2fs", file_path, duration)
            return True

        try:
            duration = self.full_duration(file_path)
        except Exception as exc:
            logger.debug("Full metadata probe failed for %s: %s", file_path, exc)
            return False

        logger.debug("Full metadata probe: %s -> %s", file_path, duration)
        return duration is not None


__all__ = ["MetadataDurationProbe"]
