"""
Summary: Ports for playability probes.
Why: Let the inspector take probes as injected collaborators so tests can swap them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PlayabilityProbePort(Protocol):
    """Probe that always returns a verdict."""

    def check(self, file_path: Path) -> bool:
        """Return True when a positive stream duration can be derived."""
        ...


@runtime_checkable
class DecoderProbePort(Protocol):
    """External decoder probe that may abstain."""

    def check(self, file_path: Path) -> bool | None:
        """Return a verdict, or None when the decoder is unavailable."""
        ...


__all__ = ["DecoderProbePort", "PlayabilityProbePort"]
