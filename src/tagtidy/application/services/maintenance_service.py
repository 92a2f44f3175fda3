"""src/tagtidy/application/services/maintenance_service.py
What: Run the discover → inspect → plan → mutate pipeline for one directory.
Why: Keep orchestration out of the CLI so runs can be driven and tested directly.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import final

from tagtidy.features.discovery import discover_audio_files
from tagtidy.features.inspection import (
    FileInspector,
    FileRecord,
    RunOptions,
    RunReport,
    TagReader,
)
from tagtidy.features.maintenance import apply_renames, delete_unplayable
from tagtidy.features.metadata import read_tags
from tagtidy.features.playability import DecoderProbePort, PlayabilityProbePort
from tagtidy.platform.logging import logger

Discoverer = Callable[..., list[Path]]
DiscoveredHook = Callable[[RunOptions, Sequence[Path]], None]
PlannedHook = Callable[[RunOptions, Sequence[FileRecord]], None]


@final
class MaintenanceService:
    """Application service for tag-based renaming and broken-file cleanup."""

    def __init__(
        self,
        *,
        decoder_probe: DecoderProbePort | None = None,
        metadata_probe: PlayabilityProbePort | None = None,
        tag_reader: TagReader = read_tags,
        discoverer: Discoverer = discover_audio_files,
    ) -> None:
        self.decoder_probe = decoder_probe
        self.metadata_probe = metadata_probe
        self.tag_reader = tag_reader
        self.discoverer = discoverer

    def discover(self, options: RunOptions) -> list[Path]:
        """Enumerate candidate files; raises ``InvalidRootError`` for a bad root."""
        return self.discoverer(
            options.root,
            recursive=options.recursive,
            extensions=options.extensions,
        )

    def inspect(self, options: RunOptions, paths: Iterable[Path]) -> list[FileRecord]:
        """Inspect ``paths`` with a fresh inspector, so reservations span one run."""
        inspector = FileInspector(
            options.pattern,
            tag_reader=self.tag_reader,
            metadata_probe=self.metadata_probe,
            decoder_probe=self.decoder_probe,
        )
        return inspector.inspect_all(paths)

    def mutate(self, report: RunReport) -> None:
        """Run the deletion phase, then the rename phase."""
        options = report.options
        base_path = Path(options.root).resolve()

        if options.delete_bad and report.broken_count > 0:
            logger.info("Deleting broken/unplayable files...")
            report.deleted = delete_unplayable(
                report.records,
                dry_run=options.dry_run,
                base_path=base_path,
            )

        if options.dry_run:
            report.renamed = report.planned_renames
            return

        report.renamed = apply_renames(report.records, base_path=base_path)

    def run(
        self,
        options: RunOptions,
        *,
        on_discovered: DiscoveredHook | None = None,
        on_planned: PlannedHook | None = None,
    ) -> RunReport:
        """Execute one full run.

        Args:
            options: Run configuration.
            on_discovered: Called with the discovered paths before inspection.
            on_planned: Called with all records before any mutation.

        Returns:
            RunReport: Records plus the counts of performed deletions and renames.
        """
        paths = self.discover(options)
        if on_discovered is not None:
            on_discovered(options, paths)

        report = RunReport(options=options)
        if not paths:
            logger.debug("No candidate files under %s", options.root)
            return report

        report.records = self.inspect(options, paths)
        if on_planned is not None:
            on_planned(options, report.records)

        self.mutate(report)
        logger.debug(
            "Run complete [playable=%d, broken=%d, renamed=%d, deleted=%d, dry_run=%s]",
            report.playable_count,
            report.broken_count,
            report.renamed,
            report.deleted,
            options.dry_run,
        )
        return report


__all__ = ["MaintenanceService"]
