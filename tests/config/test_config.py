"""
Summary: Validate TOML configuration loading and effective value resolution.
Why: A missing file must mean defaults, and a malformed one must fail loudly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tagtidy.config.config import Config
from tagtidy.config.paths import ENV_CONFIG_PATH, default_config_path
from tagtidy.config.settings import (
    DEFAULT_EXTENSIONS,
    DEFAULT_PATTERN,
    DISCOVERY_PREVIEW_LIMIT,
    effective_extensions,
    effective_pattern,
    effective_preview_limit,
    normalize_extension,
)
from tagtidy.shared.errors import ConfigError


def _write(path: Path, content: str) -> Path:
    _ = path.write_text(content, encoding="utf-8")
    return path


class TestConfigLoad:
    """Config.load behaviour."""

    def test_missing_file_yields_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "absent.toml"

        config = Config.load(config_file)

        assert config == Config()
        assert not config_file.exists()

    def test_values_are_loaded(self, tmp_path: Path) -> None:
        config_file = _write(
            tmp_path / "config.toml",
            'pattern = "{track} {title}"\n'
            'extensions = ["mp3", ".FLAC"]\n'
            "preview_limit = 5\n"
            "use_ffprobe = false\n"
            'log_file = "~/logs/tagtidy.log"\n',
        )

        config = Config.load(config_file)

        assert config.pattern == "{track} {title}"
        assert config.extensions == ["mp3", ".FLAC"]
        assert config.preview_limit == 5
        assert config.use_ffprobe is False
        assert config.log_file == Path("~/logs/tagtidy.log").expanduser()

    def test_blank_log_file_means_none(self, tmp_path: Path) -> None:
        config = Config.load(_write(tmp_path / "c.toml", 'log_file = "  "\n'))

        assert config.log_file is None

    def test_malformed_toml_raises(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "bad.toml", "pattern = \n")

        with pytest.raises(ConfigError, match="Invalid configuration file"):
            _ = Config.load(config_file)

    def test_unknown_keys_warn(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        config_file = _write(tmp_path / "c.toml", 'colour = "blue"\npattern = "{title}"\n')
        caplog.set_level(logging.WARNING, logger="tagtidy")

        config = Config.load(config_file)

        assert config.pattern == "{title}"
        assert any("colour" in message for message in caplog.messages)

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = _write(tmp_path / "env.toml", 'pattern = "{album}"\n')
        monkeypatch.setenv(ENV_CONFIG_PATH, str(config_file))

        assert default_config_path() == config_file.resolve()
        assert Config.load().pattern == "{album}"


def test_config_path_precedence(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"
    from_env = tmp_path / "env.toml"
    env = {ENV_CONFIG_PATH: str(from_env)}

    assert default_config_path(explicit, env=env) == explicit.resolve()
    assert default_config_path(None, env=env) == from_env.resolve()
    assert default_config_path(None, env={ENV_CONFIG_PATH: "   "}).parts[-2:] == ("config", "config.toml")
    assert default_config_path(None, env={}).parts[-2:] == ("config", "config.toml")



class TestEffectiveValues:
    """CLI values override config, which overrides defaults."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("mp3", ".mp3"), (".FLAC", ".flac"), ("  .Ogg ", ".ogg"), ("", "")],
    )
    def test_normalize_extension(self, raw: str, expected: str) -> None:
        assert normalize_extension(raw) == expected

    def test_extensions_default(self) -> None:
        assert effective_extensions(Config()) == DEFAULT_EXTENSIONS

    def test_extensions_from_config(self) -> None:
        config = Config(extensions=["MP3", "flac", ".mp3"])

        assert effective_extensions(config) == (".mp3", ".flac")

    def test_extensions_cli_wins(self) -> None:
        config = Config(extensions=["flac"])

        assert effective_extensions(config, ["ogg"]) == (".ogg",)

    def test_single_string_extension(self) -> None:
        config = Config(extensions="flac")  # type: ignore[arg-type]

        assert effective_extensions(config) == (".flac",)

    def test_pattern_precedence(self) -> None:
        assert effective_pattern(Config()) == DEFAULT_PATTERN
        assert effective_pattern(Config(pattern="{title}")) == "{title}"
        assert effective_pattern(Config(pattern="{title}"), "{album}") == "{album}"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, DISCOVERY_PREVIEW_LIMIT), (5, 5), (0, 0), (-3, 0), ("ten", DISCOVERY_PREVIEW_LIMIT)],
    )
    def test_preview_limit(self, value: object, expected: int) -> None:
        config = Config(preview_limit=value)  # type: ignore[arg-type]

        assert effective_preview_limit(config) == expected
