"""
Summary: Public surface for audio file discovery.
Why: Give the service and tests one import path for enumeration.
"""

from .scanner import discover_audio_files

__all__ = ["discover_audio_files"]
