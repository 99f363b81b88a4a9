"""Hook editing and captured runs for interactive front ends.

:class:`HookManager` is what a dashboard drives: it edits hook definitions
through :func:`hookx.config.mutate_hooks`, re-discovers the configuration
after each edit, runs hooks with captured output, and keeps a bounded
activity log for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Literal

from hookx.config import HookConfig, discover_config, ensure_valid_hook_name, mutate_hooks
from hookx.errors import HookxError, TaskNotFoundError
from hookx.runner import OutputChunk, TaskRunner
from hookx.settings import RunnerSettings, load_settings
from hookx.spec import TaskSpec, merge_specs, remove_task_from_spec

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

LOG_LIMIT = 2000

LogLevel = Literal["info", "success", "error", "stdout", "stderr"]


@dataclass(frozen=True)
class LogEntry:
    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class HookRunReport:
    """Outcome of one captured hook run."""

    hook: str
    ok: bool
    output: tuple[OutputChunk, ...]
    error: str | None = None


class HookManager:
    """Edit and run the hooks configured for one project directory."""

    def __init__(self, cwd: Path, *, settings: RunnerSettings | None = None) -> None:
        self.cwd = cwd
        self.settings = settings
        self.logs: list[LogEntry] = []

    def config(self) -> HookConfig:
        return discover_config(self.cwd)

    def push_log(self, level: LogLevel, message: str) -> None:
        self.logs.append(LogEntry(level, message))
        if len(self.logs) > LOG_LIMIT:
            del self.logs[: len(self.logs) - LOG_LIMIT]

    def append_output(self, chunks: list[OutputChunk]) -> None:
        for chunk in chunks:
            self.push_log(chunk.stream, chunk.text)

    # -- edits ---------------------------------------------------------------

    def add_hook(self, hook: str, spec: TaskSpec, *, replace: bool = False) -> TaskSpec:
        """Add ``spec`` to ``hook``, appending to any existing definition."""
        ensure_valid_hook_name(hook)
        cfg = self.config()
        merged = merge_specs(cfg.hooks.get(hook), spec, replace)
        self._store(cfg, hook, merged)
        self.push_log("success", f"Added hook '{hook}'.")
        return merged

    def update_hook(self, hook: str, spec: TaskSpec) -> TaskSpec:
        """Replace the definition of ``hook`` with ``spec``."""
        ensure_valid_hook_name(hook)
        cfg = self.config()
        self._store(cfg, hook, spec)
        self.push_log("success", f"Updated hook '{hook}'.")
        return spec

    def remove_hook(self, hook: str) -> None:
        cfg = self.config()
        if hook not in cfg.hooks:
            raise TaskNotFoundError(hook)

        def _drop(hooks: dict[str, Any]) -> None:
            hooks.pop(hook, None)

        mutate_hooks(cfg.source, _drop)
        self.push_log("success", f"Removed hook '{hook}'.")

    def remove_task(self, hook: str, target: TaskSpec) -> TaskSpec | None:
        """Remove entries equal to ``target`` from ``hook``.

        The hook is dropped entirely when nothing remains.
        """
        cfg = self.config()
        current = cfg.hooks.get(hook)
        if current is None:
            raise TaskNotFoundError(hook)
        remaining = remove_task_from_spec(current, target)
        if remaining is None:
            self.remove_hook(hook)
            return None
        self._store(cfg, hook, remaining)
        self.push_log("success", f"Removed {target} from hook '{hook}'.")
        return remaining

    def _store(self, cfg: HookConfig, hook: str, spec: TaskSpec) -> None:
        def _assign(hooks: dict[str, Any]) -> None:
            hooks[hook] = spec.to_json()

        mutate_hooks(cfg.source, _assign)
        logger.debug("stored hook %s = %s", hook, spec)

    # -- runs ----------------------------------------------------------------

    def run_hook(self, hook: str, extra_args: list[str] | None = None) -> HookRunReport:
        """Run ``hook`` with captured output and record the result in the log."""
        cfg = self.config()
        if hook not in cfg.hooks:
            self.push_log("error", f"Hook '{hook}' not found.")
            raise TaskNotFoundError(hook)

        settings = self.settings or load_settings(self.cwd)
        runner = TaskRunner.with_capture(cfg, settings=settings)
        self.push_log("info", f"Running hook '{hook}'...")
        error: str | None = None
        try:
            runner.run_hook(hook, extra_args or [])
        except HookxError as exc:
            error = str(exc)
        output = runner.take_output()
        self.append_output(output)

        if error is None:
            self.push_log("success", f"Hook '{hook}' finished.")
        else:
            self.push_log("error", error)
        return HookRunReport(hook=hook, ok=error is None, output=tuple(output), error=error)
