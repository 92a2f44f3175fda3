"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from tagtidy.features.inspection.models import RunOptions


@final
@dataclass(slots=True)
class MaintainArgs:
    """Validated command line arguments for a run."""

    directory: Path
    recursive: bool
    pattern: str
    dry_run: bool
    delete_bad: bool
    extensions: tuple[str, ...]
    use_ffprobe: bool
    ffprobe_path: str | None
    preview_limit: int
    verbose: bool
    quiet: bool

    def to_run_options(self) -> RunOptions:
        """Project the arguments onto the service's run configuration."""
        return RunOptions(
            root=self.directory,
            recursive=self.recursive,
            pattern=self.pattern,
            dry_run=self.dry_run,
            delete_bad=self.delete_bad,
            extensions=self.extensions,
        )


__all__ = ["MaintainArgs"]
