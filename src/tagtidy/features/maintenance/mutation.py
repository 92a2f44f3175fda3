"""
Summary: Delete unplayable files and apply planned renames.
Why: Per-file failures are logged and skipped so one bad file never stops a run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from tagtidy.features.inspection.models import FileRecord
from tagtidy.platform.logging import logger


def _log_event(
    level: int,
    event: str,
    message: str,
    *args: object,
    source_path: Path,
    target_path: Path | None = None,
    base_path: Path | None = None,
    error_message: str | None = None,
) -> None:
    logger.log(
        level,
        message,
        *args,
        extra={
            "maintenance_event": event,
            "source_path": source_path,
            "target_path": target_path,
            "base_path": base_path,
            "error_message": error_message,
        },
    )


def _occupied(target: Path, source: Path) -> bool:
    if not (target.exists() or target.is_symlink()):
        return False
    try:
        # case-only renames on case-insensitive filesystems
        return not target.samefile(source)
    except OSError:
        return True


def delete_unplayable(
    records: Sequence[FileRecord],
    *,
    dry_run: bool,
    base_path: Path | None = None,
) -> int:
    """Delete every unplayable file, or log the intent in preview mode.

    Args:
        records: Inspection records in file order.
        dry_run: When True nothing is removed.
        base_path: Root used to shorten paths in console output.

    Returns:
        int: Number of files actually deleted.
    """
    deleted = 0
    for record in records:
        if record.playable:
            continue
        if dry_run:
            _log_event(
                logging.INFO,
                "maintenance.delete.preview",
                "[DRY-RUN] Would delete: %s",
                record.path,
                source_path=record.path,
                base_path=base_path,
            )
            continue
        try:
            record.path.unlink()
        except OSError as exc:
            _log_event(
                logging.ERROR,
                "maintenance.delete.error",
                "Failed to delete %s: %s",
                record.path,
                exc.strerror or exc,
                source_path=record.path,
                base_path=base_path,
                error_message=str(exc.strerror or exc),
            )
            continue
        deleted += 1
        _log_event(
            logging.INFO,
            "maintenance.delete",
            "Deleted: %s",
            record.path,
            source_path=record.path,
            base_path=base_path,
        )
    return deleted


def apply_renames(
    records: Sequence[FileRecord],
    *,
    base_path: Path | None = None,
) -> int:
    """Rename playable files whose planned name differs from the current one.

    Returns:
        int: Number of files actually renamed.
    """
    renamed = 0
    for record in records:
        if not record.should_rename:
            continue
        target = record.target_path
        try:
            # The plan was computed earlier; never clobber something that appeared since.
            if _occupied(target, record.path):
                raise FileExistsError(17, "Target already exists", str(target))
            record.path.rename(target)
        except OSError as exc:
            _log_event(
                logging.ERROR,
                "maintenance.rename.error",
                'Rename failed: "%s" -> "%s": %s',
                record.old_name,
                record.new_name,
                exc.strerror or exc,
                source_path=record.path,
                target_path=target,
                base_path=base_path,
                error_message=str(exc.strerror or exc),
            )
            continue
        renamed += 1
        _log_event(
            logging.DEBUG,
            "maintenance.rename",
            'Renamed "%s" -> "%s"',
            record.old_name,
            record.new_name,
            source_path=record.path,
            target_path=target,
            base_path=base_path,
        )
    return renamed


__all__ = ["apply_renames", "delete_unplayable"]
