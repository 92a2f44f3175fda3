"""Rich console handler with styling for maintenance events.

Where: platform/logging/handlers.py
What: Render delete/rename events with icons and compact, coloured paths.
Why: Keep the console readable when a run touches hundreds of files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that styles paths and maintenance events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "maintenance.delete": ("🗑️", "red", "Deleted: "),
        "maintenance.delete.preview": ("👀", "yellow", "[DRY-RUN] Would delete: "),
        "maintenance.delete.error": ("⛔", "red", "Failed to delete "),
        "maintenance.rename": ("✏️", "green", "Renamed "),
        "maintenance.rename.error": ("⛔", "red", "Rename failed: "),
    }
    _LEVEL_ICONS: ClassVar[dict[int, tuple[str, str]]] = {
        logging.ERROR: ("❌", "red"),
        logging.WARNING: ("⚠️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False  # level is rendered as an icon
        kwargs["rich_tracebacks"] = True
        # File names routinely contain square brackets.
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with coloured separators.

        Paths outside ``base`` keep only their last few segments behind an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        display: PurePath = pure_path
        if base:
            try:
                relative = pure_path.relative_to(self._to_pure_path(base))
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display = relative

        separator = "\\" if isinstance(display, PureWindowsPath) else "/"
        parts = [part for part in display.parts if part and part != display.anchor]
        truncated = display.is_absolute() and len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = ["…", *parts[-self._PATH_SEGMENT_LIMIT:]]
        elif display.anchor:
            parts = [display.anchor.rstrip("\\/"), *parts]

        text = Text()
        for index, part in enumerate(parts):
            if index:
                _ = text.append(separator, style=Style(color="magenta"))
            style = Style(color="magenta") if part == "…" else Style(color="bright_white")
            _ = text.append(part, style=style)
        return text

    def _render_event(self, record: logging.LogRecord) -> Text | None:
        """Render a maintenance event record, if the record carries one."""

        event = getattr(record, "maintenance_event", None)
        if not isinstance(event, str) or event not in self._EVENT_STYLES:
            return None

        icon, color, label = self._EVENT_STYLES[event]
        base = getattr(record, "base_path", None)
        base_str = str(base) if base else None

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(label, style=Style(color=color))

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        # Rename events quote both names, as the plain log line does.
        quote = "\"" if target_path else ""
        if source_path:
            _ = text.append(quote)
            _ = text.append_text(self.format_path(str(source_path), base=base_str))
            _ = text.append(quote)

        if target_path:
            _ = text.append(" -> ", style=Style(color=color))
            _ = text.append(quote)
            _ = text.append_text(self.format_path(str(target_path), base=base_str))
            _ = text.append(quote)

        reason = getattr(record, "error_message", None)
        if reason:
            _ = text.append(f": {reason}", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for maintenance events and levels."""

        event_text = self._render_event(record)
        if event_text is not None:
            return event_text

        for level, (icon, color) in self._LEVEL_ICONS.items():
            if record.levelno >= level:
                text = Text()
                _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
                _ = text.append(message, style=Style(color=color))
                return text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
