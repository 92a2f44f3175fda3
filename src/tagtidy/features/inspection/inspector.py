"""
Summary: Turn each discovered path into a FileRecord.
Why: Tags, naming and both playability signals meet here, one file at a time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import final

from tagtidy.features.metadata import read_tags
from tagtidy.features.naming import NameReservations, build_name
from tagtidy.features.playability import (
    DecoderProbePort,
    MetadataDurationProbe,
    PlayabilityProbePort,
    combine_verdicts,
)
from tagtidy.platform.logging import logger
from tagtidy.shared.track_tags import TrackTags

from .models import FileRecord

TagReader = Callable[[Path], TrackTags]


@final
class FileInspector:
    """Inspect files sequentially, reserving target names as it goes."""

    def __init__(
        self,
        pattern: str,
        *,
        tag_reader: TagReader = read_tags,
        metadata_probe: PlayabilityProbePort | None = None,
        decoder_probe: DecoderProbePort | None = None,
        reservations: NameReservations | None = None,
    ) -> None:
        self.pattern = pattern
        self.tag_reader = tag_reader
        self.metadata_probe = metadata_probe or MetadataDurationProbe()
        self.decoder_probe = decoder_probe
        self.reservations = reservations or NameReservations()

    @staticmethod
    def _is_zero_byte(file_path: Path) -> bool:
        try:
            return file_path.stat().st_size == 0
        except OSError as exc:
            logger.debug("Could not stat %s: %s", file_path, exc)
            return False

    def plan_name(self, file_path: Path) -> str:
        """Compute and reserve the target file name for ``file_path``."""

        try:
            tags = self.tag_reader(file_path)
        except Exception as exc:
            logger.warning("Failed to read tags from %s: %s", file_path, exc)
            tags = TrackTags()
        base = build_name(tags, self.pattern)
        return self.reservations.claim(
            file_path.parent,
            base,
            file_path.suffix.lower(),
            existing_path=file_path,
        )

    def check_playable(self, file_path: Path) -> bool:
        """Combine the metadata and decoder signals for ``file_path``."""

        try:
            metadata_verdict = self.metadata_probe.check(file_path)
        except Exception as exc:
            logger.debug("Metadata probe raised for %s: %s", file_path, exc)
            metadata_verdict = False

        decoder_verdict: bool | None = None
        if self.decoder_probe is not None:
            try:
                decoder_verdict = self.decoder_probe.check(file_path)
            except Exception as exc:
                logger.debug("Decoder probe raised for %s: %s", file_path, exc)
                decoder_verdict = False

        return combine_verdicts(metadata_verdict, decoder_verdict, file_path=file_path)

    def inspect(self, file_path: Path) -> FileRecord:
        """Build the record for one file."""

        old_name = file_path.name
        if self._is_zero_byte(file_path):
            logger.debug("Zero-byte file: %s", file_path)
            return FileRecord(
                path=file_path,
                old_name=old_name,
                new_name=old_name,
                playable=False,
                zero_byte=True,
            )

        new_name = self.plan_name(file_path)
        playable = self.check_playable(file_path)
        logger.debug(
            "Inspected %s [playable=%s, new_name=%s]", file_path, playable, new_name
        )
        return FileRecord(
            path=file_path,
            old_name=old_name,
            new_name=new_name,
            playable=playable,
        )

    def inspect_all(self, paths: Iterable[Path]) -> list[FileRecord]:
        """Inspect ``paths`` in order; each record is final before the next starts."""

        return [self.inspect(path) for path in paths]


__all__ = ["FileInspector", "TagReader"]
