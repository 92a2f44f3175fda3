"""Tests for the maintain command wiring."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from tagtidy.features.inspection import FileRecord, RunOptions, RunReport
from tagtidy.features.playability import FfprobeDecoderProbe
from tagtidy.ui.cli.args.options import MaintainArgs
from tagtidy.ui.cli.commands import MaintainCommand


@pytest.fixture
def args(tmp_path: Path) -> MaintainArgs:
    return MaintainArgs(
        directory=tmp_path,
        recursive=True,
        pattern="{title}",
        dry_run=True,
        delete_bad=False,
        extensions=(".mp3",),
        use_ffprobe=True,
        ffprobe_path=None,
        preview_limit=10,
        verbose=False,
        quiet=False,
    )


def test_default_service_uses_resolved_decoder(args: MaintainArgs, mocker: MockerFixture) -> None:
    probe = FfprobeDecoderProbe("/usr/bin/ffprobe")
    resolve = mocker.patch(
        "tagtidy.ui.cli.commands.maintain.resolve_decoder_probe", return_value=probe
    )

    command = MaintainCommand(args)

    resolve.assert_called_once_with(None, enabled=True)
    assert command.service.decoder_probe is probe
    assert command.display.preview_limit == 10


def test_execute_runs_service_and_shows_summary(args: MaintainArgs) -> None:
    options = args.to_run_options()
    report = RunReport(
        options=options,
        records=[FileRecord(path=args.directory / "a.mp3", old_name="a.mp3", new_name="T.mp3", playable=True)],
    )
    service = MagicMock()
    service.run.return_value = report
    display = MagicMock()

    result = MaintainCommand(args, service=service, display=display).execute()

    assert result is report
    run_options = service.run.call_args.args[0]
    assert run_options == RunOptions(
        root=args.directory,
        recursive=True,
        pattern="{title}",
        dry_run=True,
        delete_bad=False,
        extensions=(".mp3",),
    )
    on_planned = service.run.call_args.kwargs["on_planned"]
    on_planned(options, report.records)
    display.show_plan.assert_called_once_with(report.records)
    display.show_summary.assert_called_once_with(report)


def test_execute_without_records_skips_summary(args: MaintainArgs) -> None:
    service = MagicMock()
    service.run.return_value = RunReport(options=args.to_run_options())
    display = MagicMock()

    _ = MaintainCommand(args, service=service, display=display).execute()

    display.show_summary.assert_not_called()
