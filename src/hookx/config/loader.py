"""Discover and load hook configuration files.

Search order inside a directory is ``deno.json``, ``deno.jsonc``, then
``package.json``; the first file that exists wins. The chosen file's
top-level ``hooks`` object maps Git hook names to task specifications, and
its native task table (``tasks`` for Deno, ``scripts`` for Node) is captured
so hook specs can reference tasks by name.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from hookx.config.jsonc import strip_json_comments
from hookx.config.types import ConfigSource, HookConfig
from hookx.constants import CONFIG_SEARCH_ORDER, DEFAULT_TASK_RUNNER, GIT_HOOKS, PACKAGE_JSON
from hookx.errors import (
    ConfigIoError,
    ConfigJsonError,
    ConfigNotFoundError,
    InvalidHookError,
    TaskSpecParseError,
    UnknownHookError,
)
from hookx.spec import TaskSpec

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def find_config_source(directory: Path) -> ConfigSource:
    """Return the highest-priority configuration file present in ``directory``."""
    for file_name in CONFIG_SEARCH_ORDER:
        candidate = directory / file_name
        if candidate.exists():
            kind = "package" if file_name == PACKAGE_JSON else "deno"
            logger.debug("using %s config at %s", kind, candidate)
            return ConfigSource(kind=kind, path=candidate)
    raise ConfigNotFoundError(directory)


def discover_config(directory: Path) -> HookConfig:
    """Discover and load the configuration for ``directory``."""
    return load_config(find_config_source(directory))


def load_config(source: ConfigSource) -> HookConfig:
    if source.is_deno:
        return load_deno_config(source.path)
    return load_package_config(source.path)


def load_deno_config(path: Path) -> HookConfig:
    """Load a ``deno.json``/``deno.jsonc`` file, comments allowed."""
    document = _read_json(path, strip_comments=True)
    hooks = parse_hooks(document.get("hooks"))

    deno_tasks: dict[str, str] = {}
    tasks = document.get("tasks")
    if isinstance(tasks, dict):
        for name, value in tasks.items():
            if isinstance(value, str):
                deno_tasks[name] = value
            elif isinstance(value, dict):
                # Rendered for display as "deno task <dep>"; the task_runner
                # setting applies only to tasks hookx spawns itself.
                deno_tasks[name] = _render_deno_task(value)

    logger.debug("loaded %d hooks and %d tasks from %s", len(hooks), len(deno_tasks), path)
    return HookConfig(
        source=ConfigSource(kind="deno", path=path),
        hooks=hooks,
        deno_tasks=deno_tasks,
    )


def load_package_config(path: Path) -> HookConfig:
    """Load a ``package.json`` file."""
    document = _read_json(path, strip_comments=False)
    hooks = parse_hooks(document.get("hooks"))

    node_scripts: dict[str, str] = {}
    scripts = document.get("scripts")
    if isinstance(scripts, dict):
        node_scripts = {name: cmd for name, cmd in scripts.items() if isinstance(cmd, str)}

    package_manager = document.get("packageManager")
    if not isinstance(package_manager, str):
        package_manager = None

    logger.debug("loaded %d hooks and %d scripts from %s", len(hooks), len(node_scripts), path)
    return HookConfig(
        source=ConfigSource(kind="package", path=path),
        hooks=hooks,
        node_scripts=node_scripts,
        package_manager=package_manager,
    )


def parse_hooks(raw: Any) -> dict[str, TaskSpec]:
    """Validate hook names and parse every hook value into a task spec."""
    hooks: dict[str, TaskSpec] = {}
    if not isinstance(raw, dict):
        return hooks
    for hook_name, value in raw.items():
        ensure_valid_hook_name(hook_name)
        try:
            hooks[hook_name] = TaskSpec.from_json(value)
        except TaskSpecParseError as exc:
            raise InvalidHookError(hook_name, exc) from exc
    return hooks


def ensure_valid_hook_name(hook: str) -> None:
    if hook not in GIT_HOOKS:
        raise UnknownHookError(hook)


def read_config_text(source: ConfigSource) -> str:
    """Read a configuration file, with comments removed for Deno sources."""
    try:
        content = source.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIoError(source.path, exc) from exc
    return strip_json_comments(content) if source.is_deno else content


def _read_json(path: Path, *, strip_comments: bool) -> dict[str, Any]:
    source = ConfigSource(kind="deno" if strip_comments else "package", path=path)
    content = read_config_text(source)
    try:
        document = json.loads(content.strip())
    except json.JSONDecodeError as exc:
        raise ConfigJsonError(path, exc) from exc
    # Fields are only read from a top-level object; anything else has none.
    return document if isinstance(document, dict) else {}


def _render_deno_task(value: dict[str, Any]) -> str:
    parts: list[str] = []
    dependencies = value.get("dependencies")
    if isinstance(dependencies, list):
        parts.extend(f"{DEFAULT_TASK_RUNNER} task {dep}" for dep in dependencies if isinstance(dep, str))
    command = value.get("command")
    if isinstance(command, str):
        parts.append(command)
    return " && ".join(parts)
