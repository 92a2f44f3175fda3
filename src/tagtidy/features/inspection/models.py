"""src/tagtidy/features/inspection/models.py
What: Value objects describing one run and one inspected file.
Why: Reporting and mutation read the same records inspection produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tagtidy.config.settings import DEFAULT_EXTENSIONS, DEFAULT_PATTERN


@dataclass(slots=True, frozen=True)
class RunOptions:
    """Immutable configuration for one invocation."""

    root: Path
    recursive: bool = False
    pattern: str = DEFAULT_PATTERN
    dry_run: bool = False
    delete_bad: bool = False
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Inspection outcome for a single discovered file."""

    path: Path
    old_name: str
    new_name: str
    playable: bool
    zero_byte: bool = False

    @property
    def will_rename(self) -> bool:
        return self.new_name != self.old_name

    @property
    def should_rename(self) -> bool:
        """Broken files are never renamed."""
        return self.will_rename and self.playable

    @property
    def target_path(self) -> Path:
        return self.path.with_name(self.new_name)


@dataclass(slots=True)
class RunReport:
    """Everything a finished run produced, for the summary."""

    options: RunOptions
    records: list[FileRecord] = field(default_factory=list)
    deleted: int = 0
    renamed: int = 0

    @property
    def playable_count(self) -> int:
        return sum(1 for record in self.records if record.playable)

    @property
    def broken_count(self) -> int:
        return sum(1 for record in self.records if not record.playable)

    @property
    def planned_renames(self) -> int:
        return sum(1 for record in self.records if record.should_rename)


__all__ = ["FileRecord", "RunOptions", "RunReport"]
