"""Tests for the ffprobe decoder probe and its discovery."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagtidy.features.playability import (
    DecoderProbePort,
    FfprobeDecoderProbe,
    resolve_decoder_probe,
)

RUN_TARGET = "tagtidy.features.playability.ffprobe.subprocess.run"
WHICH_TARGET = "tagtidy.features.playability.ffprobe.shutil.which"


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["ffprobe"], returncode=returncode, stdout=stdout, stderr=stderr)


class TestFfprobeDecoderProbe:
    """Verdicts derived from ffprobe's exit status and output."""

    def test_satisfies_port(self) -> None:
        assert isinstance(FfprobeDecoderProbe("ffprobe"), DecoderProbePort)

    def test_command_shape(self, tmp_path: Path) -> None:
        command = FfprobeDecoderProbe("/usr/bin/ffprobe").command(tmp_path / "a.mp3")

        assert command[0] == "/usr/bin/ffprobe"
        assert command[1:7] == ["-v", "error", "-show_entries", "format=duration", "-of", "default=nw=1:nk=1"]
        assert command[-1] == str(tmp_path / "a.mp3")

    @pytest.mark.parametrize(
        ("output", "expected"),
        [
            ("183.04\n", 183.04),
            ("0.000000\n", None),
            ("-1\n", None),
            ("N/A\n", None),
            ("nan\n", None),
            ("inf\n", None),
            ("", None),
        ],
    )
    def test_parse_duration(self, output: str, expected: float | None) -> None:
        assert FfprobeDecoderProbe.parse_duration(output) == expected

    def test_positive_duration_is_playable(self, tmp_path: Path, mocker: MockerFixture) -> None:
        run = mocker.patch(RUN_TARGET, return_value=_completed(stdout="12.5\n"))

        assert FfprobeDecoderProbe("ffprobe").check(tmp_path / "a.mp3") is True
        assert run.call_args.kwargs["check"] is False
        assert run.call_args.kwargs["stdin"] is subprocess.DEVNULL

    def test_nonzero_exit_is_broken(self, tmp_path: Path, mocker: MockerFixture) -> None:
        _ = mocker.patch(RUN_TARGET, return_value=_completed(returncode=1, stderr="Invalid data"))

        assert FfprobeDecoderProbe("ffprobe").check(tmp_path / "a.mp3") is False

    def test_unparseable_output_is_broken(self, tmp_path: Path, mocker: MockerFixture) -> None:
        _ = mocker.patch(RUN_TARGET, return_value=_completed(stdout="N/A\n"))

        assert FfprobeDecoderProbe("ffprobe").check(tmp_path / "a.mp3") is False

    def test_missing_binary_abstains(self, tmp_path: Path, mocker: MockerFixture) -> None:
        _ = mocker.patch(RUN_TARGET, side_effect=FileNotFoundError("ffprobe"))

        assert FfprobeDecoderProbe("ffprobe").check(tmp_path / "a.mp3") is None

    def test_launch_error_is_broken(self, tmp_path: Path, mocker: MockerFixture) -> None:
        _ = mocker.patch(RUN_TARGET, side_effect=PermissionError("denied"))

        assert FfprobeDecoderProbe("ffprobe").check(tmp_path / "a.mp3") is False


class TestResolveDecoderProbe:
    """Probe discovery honours configuration and PATH."""

    def test_disabled(self, mocker: MockerFixture) -> None:
        which = mocker.patch(WHICH_TARGET)

        assert resolve_decoder_probe(enabled=False) is None
        which.assert_not_called()

    def test_found_on_path(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(WHICH_TARGET, return_value="/usr/bin/ffprobe")

        probe = resolve_decoder_probe()

        assert isinstance(probe, FfprobeDecoderProbe)
        assert probe.binary == "/usr/bin/ffprobe"

    def test_absent_from_path(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(WHICH_TARGET, return_value=None)

        assert resolve_decoder_probe() is None

    def test_configured_path_missing_warns(
        self, mocker: MockerFixture, caplog: pytest.LogCaptureFixture
    ) -> None:
        _ = mocker.patch(WHICH_TARGET, return_value=None)
        caplog.set_level(logging.WARNING, logger="tagtidy")

        assert resolve_decoder_probe("/opt/ff/ffprobe") is None
        assert any("Configured ffprobe not found" in message for message in caplog.messages)

    def test_configured_path_is_used(self, mocker: MockerFixture) -> None:
        which = mocker.patch(WHICH_TARGET, return_value="/opt/ff/ffprobe")

        probe = resolve_decoder_probe("/opt/ff/ffprobe")

        which.assert_called_once_with("/opt/ff/ffprobe")
        assert probe is not None and probe.binary == "/opt/ff/ffprobe"
