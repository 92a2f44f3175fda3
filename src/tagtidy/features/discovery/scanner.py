"""
Summary: Enumerate candidate audio files beneath a root directory.
Why: Give inspection a deterministic, filtered list without hidden files or symlinks.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from tagtidy.platform.logging import logger
from tagtidy.shared.errors import InvalidRootError


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _matches(name: str, extensions: frozenset[str]) -> bool:
    if _is_hidden(name):
        return False
    return os.path.splitext(name)[1].lower() in extensions


def _iter_flat(root: Path, extensions: frozenset[str]) -> Iterator[Path]:
    for entry in root.iterdir():
        if entry.is_symlink() or not entry.is_file():
            continue
        if _matches(entry.name, extensions):
            yield entry


def _iter_recursive(root: Path, extensions: frozenset[str]) -> Iterator[Path]:
    def _on_error(error: OSError) -> None:
        # An unreadable root is fatal; unreadable subdirectories are skipped.
        if error.filename is not None and os.fspath(error.filename) == os.fspath(root):
            raise error
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror or error)

    # os.walk never descends into symlinked directories with followlinks=False.
    for current, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=False):
        dirnames[:] = [name for name in dirnames if not _is_hidden(name)]
        current_path = Path(current)
        for name in filenames:
            candidate = current_path / name
            if candidate.is_symlink() or not _matches(name, extensions):
                continue
            yield candidate


def discover_audio_files(
    root: Path,
    *,
    recursive: bool,
    extensions: Iterable[str],
) -> list[Path]:
    """Return absolute paths of audio files under ``root`` in lexical order.

    Args:
        root: Directory to scan.
        recursive: Whether to descend into subdirectories.
        extensions: Lower-case extensions including the leading dot.

    Returns:
        Sorted absolute paths; dotfiles, files in dot-directories and
        symbolic links are excluded.

    Raises:
        InvalidRootError: If ``root`` does not exist, is not a directory or cannot be read.
    """
    root = Path(root).expanduser()
    if not root.exists():
        raise InvalidRootError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise InvalidRootError(f"Not a directory: {root}")

    root = root.resolve()
    wanted = frozenset(ext.lower() for ext in extensions)
    walker = _iter_recursive if recursive else _iter_flat
    try:
        found = sorted(walker(root, wanted), key=str)
    except OSError as exc:
        raise InvalidRootError(f"Directory is not readable: {root} ({exc})") from exc

    logger.debug(
        "Discovered %d file(s) under %s [recursive=%s, extensions=%s]",
        len(found),
        root,
        recursive,
        ", ".join(sorted(wanted)),
    )
    return found


__all__ = ["discover_audio_files"]
