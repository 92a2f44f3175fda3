"""Tag utility helpers.

Where: src/tagtidy/features/metadata/_tag_utils.py
What: Pure helpers for normalising raw mutagen tag values.
Why: Keep type juggling at the extraction boundary, out of templating code.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "normalize_values",
    "parse_slash_separated",
    "safe_get_first",
]


def normalize_values(value: object) -> list[str]:
    """Flatten a raw tag value into a list of non-empty, stripped strings.

    Mutagen hands back a string, a list of strings, or nothing depending on
    the container; this collapses all of them to one shape.
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        items: Iterable[object] = [value]
    elif isinstance(value, Iterable):
        items = value
    else:
        items = [value]

    result: list[str] = []
    for item in items:
        if isinstance(item, bytes):
            item = item.decode("utf-8", errors="replace")
        text = str(item).strip()
        if text:
            result.append(text)
    return result


def safe_get_first(data: list[str] | None, default: str | None = None) -> str | None:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def parse_slash_separated(value: str | None) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = [part.strip() for part in value.split("/")] if value else []
    num: int | None = int(parts[0]) if parts and parts[0].isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return num, total
