"""Config and log file locations.

- Config: ``--config`` if given, then ``TAGTIDY_CONFIG``, then
  ``<repo_root>/config/config.toml``.
- Logs: ``<repo_root>/logs/tagtidy.log``; only written when enabled in config.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


ENV_CONFIG_PATH: Final[str] = "TAGTIDY_CONFIG"


def _detect_repo_root() -> Path:
    """Return the nearest parent of this package holding ``pyproject.toml`` or ``.git``.

    Falls back to the current working directory for installed copies.
    """
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").is_file() or (candidate / ".git").exists():
            return candidate
    return Path.cwd()


def default_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Resolve the TOML config file.

    Args:
        explicit_path: Value of ``--config``; wins when given.
        env: Environment to read ``TAGTIDY_CONFIG`` from; ``os.environ`` when omitted.
    """
    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    from_env = (env if env is not None else os.environ).get(ENV_CONFIG_PATH, "").strip()
    if from_env:
        return Path(from_env).expanduser().resolve()

    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (_detect_repo_root() / "logs" / "tagtidy.log").resolve()


__all__ = [
    "ENV_CONFIG_PATH",
    "default_config_path",
    "default_log_file",
]
