"""Shared pytest fixtures: synthetic MP3 files and directory snapshots."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.easyid3 import EasyID3
from mutagen.mp3 import MP3

# MPEG-1 Layer III, 128 kbps, 44.1 kHz, joint stereo, no padding -> 417-byte frames.
MPEG_FRAME_HEADER: bytes = b"\xff\xfb\x90\x64"
MPEG_FRAME_SIZE: int = 417

Mp3Factory = Callable[..., Path]


def mpeg_audio(frames: int = 40) -> bytes:
    """Return a run of silent, well-formed MPEG audio frames."""

    frame = MPEG_FRAME_HEADER + bytes(MPEG_FRAME_SIZE - len(MPEG_FRAME_HEADER))
    return frame * frames


def write_mp3(path: Path, tags: dict[str, str | list[str]] | None = None, frames: int = 40) -> Path:
    """Write a decodable MP3 at ``path`` carrying the given easy tags."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(mpeg_audio(frames))
    if tags:
        audio = MP3(path, ID3=EasyID3)
        if audio.tags is None:
            audio.add_tags()
        for key, value in tags.items():
            audio[key] = value
        audio.save()
    return path


@pytest.fixture
def make_mp3() -> Mp3Factory:
    """Factory fixture creating tagged MP3 files."""

    def _make(path: Path, frames: int = 40, **tags: str | list[str]) -> Path:
        return write_mp3(path, dict(tags), frames=frames)

    return _make


@pytest.fixture
def broken_file() -> Callable[[Path], Path]:
    """Factory fixture creating non-empty files that hold no audio at all."""

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"this is not audio data " * 64)
        return path

    return _make


@pytest.fixture
def dir_snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Map every file beneath a directory to its contents."""

    def _snapshot(directory: Path) -> dict[str, bytes]:
        return {
            str(path.relative_to(directory)): path.read_bytes()
            for path in sorted(directory.rglob("*"))
            if path.is_file()
        }

    return _snapshot
