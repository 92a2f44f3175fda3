"""
Summary: Resolve target name collisions with numbered suffixes.
Why: No two files may land on the same name, on disk or within one run.
"""

from __future__ import annotations

from collections.abc import Container
from pathlib import Path
from typing import final


def _is_same_file(candidate: Path, existing_path: Path | None) -> bool:
    if existing_path is None:
        return False
    try:
        return candidate.samefile(existing_path)
    except OSError:
        return False


def find_available_name(
    directory: Path,
    base: str,
    extension: str,
    *,
    existing_path: Path | None = None,
    reserved: Container[str] = (),
) -> str:
    """Find a free file name by appending a number if needed.

    Tries ``base.ext``, then ``base (1).ext``, ``base (2).ext`` and so on. A
    candidate that is ``existing_path`` itself counts as free, so a file
    already carrying its canonical name keeps it.

    Args:
        directory: Directory the name must be free in.
        base: Base name without extension.
        extension: Extension including the leading dot (may be empty).
        existing_path: The file being renamed, if any.
        reserved: Names already claimed in ``directory`` during this run.

    Returns:
        str: The first free file name.
    """
    candidate = f"{base}{extension}"
    counter = 1
    while True:
        if candidate not in reserved:
            target = directory / candidate
            if not target.exists() or _is_same_file(target, existing_path):
                return candidate
        candidate = f"{base} ({counter}){extension}"
        counter += 1


@final
class NameReservations:
    """Track names claimed per directory for the duration of one run."""

    def __init__(self) -> None:
        self._claimed: dict[Path, set[str]] = {}

    def claimed_in(self, directory: Path) -> set[str]:
        """Return the names already claimed in ``directory``."""
        return self._claimed.setdefault(directory, set())

    def claim(
        self,
        directory: Path,
        base: str,
        extension: str,
        *,
        existing_path: Path | None = None,
    ) -> str:
        """Resolve a free name in ``directory`` and reserve it."""
        claimed = self.claimed_in(directory)
        name = find_available_name(
            directory,
            base,
            extension,
            existing_path=existing_path,
            reserved=claimed,
        )
        claimed.add(name)
        return name


__all__ = ["NameReservations", "find_available_name"]
