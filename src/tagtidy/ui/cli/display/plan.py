"""src/tagtidy/ui/cli/display/plan.py
Where: CLI adapter layer for plan rendering.
What: Print discovered files, the per-file rename/check plan and the run summary.
Why: Give users the full plan in file order before and after anything is touched.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.text import Text

from tagtidy.config.settings import DISCOVERY_PREVIEW_LIMIT
from tagtidy.features.inspection import FileRecord, RunOptions, RunReport


def extension_label(extensions: Sequence[str]) -> str:
    """Render target extensions as a short label such as ``MP3`` or ``MP3/FLAC``."""

    labels = [ext.lstrip(".").upper() for ext in extensions if ext.strip(".")]
    return "/".join(labels) or "audio"


@final
class PlanDisplay:
    """Handles plan and summary display in CLI."""

    console: Console

    def __init__(
        self,
        console: Console | None = None,
        preview_limit: int = DISCOVERY_PREVIEW_LIMIT,
    ) -> None:
        """Initialize plan display.

        Args:
            console: Console to print to; a default stdout console when omitted.
            preview_limit: Number of discovered files listed before eliding.
        """
        self.console = console or Console(highlight=False)
        self.preview_limit = preview_limit

    def show_discovered(self, options: RunOptions, paths: Sequence[Path]) -> None:
        """List the first discovered files, with a count of elided entries."""

        label = extension_label(options.extensions)
        if not paths:
            self.console.print(Text(f"No {label} files found."))
            return

        self.console.print(Text(f"Found {len(paths)} {label} file(s) under: {options.root}\n"))
        shown = paths[: self.preview_limit]
        width = max(2, len(str(len(shown))))
        for index, path in enumerate(shown, start=1):
            self.console.print(Text(f"{index:>{width}}. {path}"))

        remaining = len(paths) - len(shown)
        if remaining > 0:
            self.console.print(Text(f"... ({remaining} more not shown)\n"))

    @staticmethod
    def format_record(record: FileRecord) -> Text:
        """Render one plan line: verdict, current name and rename action."""

        text = Text()
        if record.playable:
            _ = text.append("[OK] playable", style="green")
        else:
            _ = text.append("[ERROR] broken", style="red")
        _ = text.append(f" {record.old_name} ")
        if record.will_rename:
            _ = text.append(f'-> "{record.new_name}"', style="cyan")
        else:
            _ = text.append("(no change)", style="dim")
        if record.zero_byte:
            _ = text.append(" (empty file)", style="yellow")
        return text

    def show_plan(self, records: Sequence[FileRecord]) -> None:
        """Print the per-file plan in file order."""

        self.console.print(Text("\nRename & Check plan:\n", style="bold"))
        for record in records:
            self.console.print(self.format_record(record))

    @staticmethod
    def format_summary(report: RunReport) -> str:
        """Build the one-line run summary."""

        options = report.options
        summary = (
            f"Summary: {report.playable_count} playable, {report.broken_count} broken. "
            f"{report.renamed} renamed"
        )
        if options.delete_bad:
            summary += f", {report.deleted} deleted"
        summary += "."
        if options.dry_run:
            summary += " (preview only)"
        return summary

    def show_summary(self, report: RunReport) -> None:
        """Print the dry-run notice (when applicable) and the summary line."""

        if report.options.dry_run:
            self.console.print(
                Text("\n(DRY RUN) No renames or deletions will be performed.", style="yellow")
            )
        self.console.print(Text(f"\n{self.format_summary(report)}", style="bold"))


__all__ = ["PlanDisplay", "extension_label"]
