"""Runner settings: which shell and task runner hookx spawns.

Settings come from an optional ``.hookx.yaml`` next to the hook
configuration, validated against the packaged ``runner_settings`` schema.
``HOOKX_SHELL``, ``HOOKX_TASK_RUNNER`` and ``HOOKX_LOG_LEVEL`` override the
file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]

from hookx.constants import DEFAULT_LOG_LEVEL, DEFAULT_SHELL, DEFAULT_TASK_RUNNER, SETTINGS_FILENAME
from hookx.errors import SettingsError
from hookx.schemas.validator import validate_data

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

ENV_OVERRIDES: dict[str, str] = {
    "shell": "HOOKX_SHELL",
    "task_runner": "HOOKX_TASK_RUNNER",
    "log_level": "HOOKX_LOG_LEVEL",
}


@dataclass(frozen=True)
class RunnerSettings:
    """Executables and log level used for one invocation."""

    shell: str = DEFAULT_SHELL
    task_runner: str = DEFAULT_TASK_RUNNER
    log_level: str = DEFAULT_LOG_LEVEL


def settings_path(directory: Path) -> Path:
    return directory / SETTINGS_FILENAME


def load_settings(directory: Path, environ: Mapping[str, str] | None = None) -> RunnerSettings:
    """Load runner settings for ``directory``; defaults when no file exists."""
    env = os.environ if environ is None else environ
    raw = _read_settings_file(settings_path(directory))

    for key, env_name in ENV_OVERRIDES.items():
        override = env.get(env_name, "").strip()
        if override:
            raw[key] = override.upper() if key == "log_level" else override

    errors = validate_data(raw, "runner_settings")
    if errors:
        raise SettingsError(
            "invalid runner settings:\n" + "\n".join(f"  - {msg}" for msg in errors)
        )
    return RunnerSettings(**raw)


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SettingsError(f"{path.name} parse error: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SettingsError(f"failed to read {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SettingsError(f"{path.name} parse error: expected mapping at top level")
    return raw
