"""
Summary: External decoder probe running ffprobe as a subprocess.
Why: ffprobe exercises the real decode path, so its verdict outranks tag parsing.
"""

from __future__ import annotations

import math
import shutil
import subprocess
from pathlib import Path
from typing import final

from tagtidy.platform.logging import logger


@final
class FfprobeDecoderProbe:
    """Ask ffprobe for the stream duration of a file."""

    def __init__(self, binary: str) -> None:
        self.binary = binary

    def command(self, file_path: Path) -> list[str]:
        """Build the ffprobe invocation for ``file_path``."""
        return [
            self.binary,
            "-v",
            "error",
            "-show_entries",
            "format=duration",
            "-of",
            "default=nw=1:nk=1",
            str(file_path),
        ]

    @staticmethod
    def parse_duration(output: str) -> float | None:
        """Parse ffprobe's single-value output; None unless positive and finite."""
        try:
            duration = float(output.strip())
        except ValueError:
            return None
        if not math.isfinite(duration) or duration <= 0:
            return None
        return duration

    def check(self, file_path: Path) -> bool | None:
        """Return the ffprobe verdict, or None when the binary cannot be run."""

        try:
            completed = subprocess.run(
                self.command(file_path),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("ffprobe binary %s is unavailable", self.binary)
            return None
        except Exception as exc:
            logger.debug("ffprobe failed to run for %s: %s", file_path, exc)
            return False

        if completed.returncode != 0:
            logger.debug(
                "ffprobe exited with %d for %s: %s",
                completed.returncode,
                file_path,
                (completed.stderr or "").strip(),
            )
            return False

        duration = self.parse_duration(completed.stdout or "")
        logger.debug("ffprobe duration for %s: %s", file_path, duration)
        return duration is not None


def resolve_decoder_probe(
    ffprobe_path: str | None = None,
    *,
    enabled: bool = True,
) -> FfprobeDecoderProbe | None:
    """Return an ffprobe-backed probe if the binary is available on this host."""

    if not enabled:
        logger.debug("External decoder probe disabled")
        return None

    binary = shutil.which(ffprobe_path) if ffprobe_path else shutil.which("ffprobe")
    if binary is None:
        if ffprobe_path:
            logger.warning("Configured ffprobe not found: %s", ffprobe_path)
        else:
            logger.debug("ffprobe not found on PATH; using metadata probe only")
        return None

    logger.debug("Using ffprobe at %s", binary)
    return FfprobeDecoderProbe(binary)


__all__ = ["FfprobeDecoderProbe", "resolve_decoder_probe"]
