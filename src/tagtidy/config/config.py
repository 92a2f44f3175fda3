"""Configuration management for tagtidy."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from tagtidy.config.paths import default_config_path
from tagtidy.platform.logging import logger
from tagtidy.shared.errors import ConfigError


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; file logging is enabled when this is set or log_to_file is true
    log_file: Path | None = _path_field()
    log_to_file: bool = False

    # Default naming template when --pattern is not given
    pattern: str | None = None

    # Audio extensions to scan for
    extensions: list[str] | None = None

    # Number of discovered files listed before the plan
    preview_limit: int | None = None

    # External decoder probe
    use_ffprobe: bool = True
    ffprobe_path: str | None = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file. Falls back to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when no file exists.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed.
        """
        config_file = default_config_path(path)
        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        try:
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
        except (TypeError, AttributeError) as e:
            raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

        logger.debug("Configuration loaded from %s", config_file)
        return instance


__all__ = ["Config"]
