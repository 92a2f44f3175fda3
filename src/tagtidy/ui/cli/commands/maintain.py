"""src/tagtidy/ui/cli/commands/maintain.py
What: Execute a scan/check/rename run for a directory via the CLI.
Why: Bridge parsed arguments with the application service and plan display.
"""

from __future__ import annotations

from typing import final

from tagtidy.application.services import MaintenanceService
from tagtidy.features.inspection import RunReport
from tagtidy.features.playability import resolve_decoder_probe
from tagtidy.ui.cli.args.options import MaintainArgs
from tagtidy.ui.cli.display import PlanDisplay


@final
class MaintainCommand:
    """Command that runs the pipeline and renders its plan."""

    def __init__(
        self,
        args: MaintainArgs,
        *,
        service: MaintenanceService | None = None,
        display: PlanDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or MaintenanceService(
            decoder_probe=resolve_decoder_probe(
                args.ffprobe_path,
                enabled=args.use_ffprobe,
            ),
        )
        self.display = display or PlanDisplay(preview_limit=args.preview_limit)

    def execute(self) -> RunReport:
        """Execute the run.

        Returns:
            RunReport: Outcome of the run.
        """
        report = self.service.run(
            self.args.to_run_options(),
            on_discovered=self.display.show_discovered,
            on_planned=lambda _options, records: self.display.show_plan(records),
        )
        if report.records:
            self.display.show_summary(report)
        return report
