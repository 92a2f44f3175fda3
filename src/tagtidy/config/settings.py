"""Where: src/tagtidy/config/settings.py
What: Runtime constants plus helpers deriving effective values from a Config.
Why: Expose validated values to feature layers without file I/O.
"""

from __future__ import annotations

from typing import Final

from tagtidy.config.config import Config

DEFAULT_PATTERN: Final[str] = "{artist} - {title}"

# Placeholders recognised in naming templates.
PLACEHOLDERS: Final[tuple[str, ...]] = ("{title}", "{artist}", "{album}", "{track}")

DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".mp3",)

DISCOVERY_PREVIEW_LIMIT: Final[int] = 30

# Bytes handed to the partial metadata probe.
PROBE_PREFIX_BYTES: Final[int] = 64 * 1024

FALLBACK_NAME: Final[str] = "unknown"

# Base names are capped below the common 255-byte limit, leaving room for
# the extension and a " (N)" collision suffix.
MAX_NAME_BYTES: Final[int] = 200


def normalize_extension(value: str) -> str:
    """Return ``value`` as a lower-case extension with a leading dot."""

    ext = value.strip().lower()
    if not ext:
        return ""
    return ext if ext.startswith(".") else f".{ext}"


def effective_extensions(config: Config, override: list[str] | None = None) -> tuple[str, ...]:
    """Resolve target extensions from CLI override, config, then defaults."""

    raw = override or config.extensions or list(DEFAULT_EXTENSIONS)
    if isinstance(raw, str):
        raw = [raw]
    resolved: list[str] = []
    for value in raw:
        ext = normalize_extension(str(value))
        if ext and ext not in resolved:
            resolved.append(ext)
    return tuple(resolved) or DEFAULT_EXTENSIONS


def effective_pattern(config: Config, override: str | None = None) -> str:
    """Resolve the naming template from CLI override, config, then defaults."""

    return override or config.pattern or DEFAULT_PATTERN


def effective_preview_limit(config: Config) -> int:
    """Resolve the discovery preview limit; negative values disable the list."""

    limit = config.preview_limit
    if isinstance(limit, int) and not isinstance(limit, bool):
        return limit if limit >= 0 else 0
    return DISCOVERY_PREVIEW_LIMIT


__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_PATTERN",
    "DISCOVERY_PREVIEW_LIMIT",
    "FALLBACK_NAME",
    "MAX_NAME_BYTES",
    "PLACEHOLDERS",
    "PROBE_PREFIX_BYTES",
    "effective_extensions",
    "effective_pattern",
    "effective_preview_limit",
    "normalize_extension",
]
