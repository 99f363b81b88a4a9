"""Resolve task specifications and execute them as external processes.

Execution is synchronous and strictly ordered: each child is waited on
before the next step starts, and the first failure aborts the current
branch. Named references are resolved against the Deno task table, then the
Node script table, then other hooks, and finally run as literal shell
commands.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hookx.constants import DEFAULT_PACKAGE_MANAGER, PACKAGE_MANAGERS
from hookx.errors import (
    CircularDependencyError,
    CommandFailure,
    RunnerIoError,
    TaskNotFoundError,
)
from hookx.runner.sinks import CaptureSink, InheritSink
from hookx.settings import RunnerSettings
from hookx.spec import DetailedSpec, SequenceSpec, SingleSpec

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hookx.config import HookConfig
    from hookx.runner.sinks import OutputChunk, OutputSink
    from hookx.spec import TaskSpec

logger = logging.getLogger(__name__)


def compose_shell_command(command: str, extra_args: Sequence[str]) -> str:
    """Append forwarded arguments to a shell command string.

    Arguments containing whitespace are wrapped in single quotes with double
    quotes backslash-escaped; other arguments are appended as-is. This is not
    injection-safe quoting.
    """
    parts = [command]
    for arg in extra_args:
        if any(ch.isspace() for ch in arg):
            escaped = arg.replace('"', '\\"')
            parts.append(f"'{escaped}'")
        else:
            parts.append(arg)
    return " ".join(parts)


def extract_package_manager_command(package_manager: str | None) -> str:
    """Map a ``packageManager`` value such as ``pnpm@9.1.4`` to an executable."""
    if not package_manager:
        return DEFAULT_PACKAGE_MANAGER
    name = package_manager.split("@", 1)[0].strip().lower()
    return name if name in PACKAGE_MANAGERS else DEFAULT_PACKAGE_MANAGER


class TaskRunner:
    """Executes task specs against one configuration snapshot.

    The visiting set guards against cycles: a name is marked on entry to
    :meth:`run_single` and unmarked on every exit, so a name may recur in
    sibling branches but never along its own ancestry.
    """

    def __init__(
        self,
        config: HookConfig,
        *,
        sink: OutputSink | None = None,
        settings: RunnerSettings | None = None,
    ) -> None:
        self.config = config
        self.sink: OutputSink = sink if sink is not None else InheritSink()
        self.settings = settings or RunnerSettings()
        self._visiting: set[str] = set()

    @classmethod
    def with_capture(cls, config: HookConfig, *, settings: RunnerSettings | None = None) -> TaskRunner:
        return cls(config, sink=CaptureSink(), settings=settings)

    @property
    def visiting(self) -> frozenset[str]:
        return frozenset(self._visiting)

    def take_output(self) -> list[OutputChunk]:
        """Drain captured output; empty when output goes to the terminal."""
        if isinstance(self.sink, CaptureSink):
            return self.sink.take_output()
        return []

    # -- entry points --------------------------------------------------------

    def run_hook(self, hook: str, extra_args: Sequence[str] = ()) -> None:
        """Run the spec configured for ``hook``."""
        spec = self.config.hooks.get(hook)
        if spec is None:
            raise TaskNotFoundError(hook)
        logger.debug("running hook %s", hook)
        self.run_spec(spec, hook, extra_args)

    def run_task(self, name: str) -> None:
        """Run a task or script by name; it must exist in a task table."""
        if name not in self.config.deno_tasks and name not in self.config.node_scripts:
            raise TaskNotFoundError(name)
        self.run_named_task(name)

    # -- resolution ----------------------------------------------------------

    def run_spec(self, spec: TaskSpec, hook: str, extra_args: Sequence[str] = ()) -> None:
        """Execute ``spec``; ``extra_args`` are the arguments Git passed the hook."""
        if isinstance(spec, SingleSpec):
            self.run_single(spec.command, extra_args)
        elif isinstance(spec, DetailedSpec):
            for dep in spec.dependencies:
                self.run_named_task(dep)
            if spec.command is not None:
                self.exec_raw_command(spec.command, extra_args)
        elif isinstance(spec, SequenceSpec):
            for item in spec.items:
                self.run_spec(item, hook, extra_args)
        else:
            raise TypeError(f"unsupported task spec for hook {hook}: {spec!r}")

    def run_single(self, name: str, extra_args: Sequence[str] = ()) -> None:
        """Resolve ``name`` to a task, script, hook, or shell command and run it."""
        if name in self._visiting:
            raise CircularDependencyError(name)
        self._visiting.add(name)
        try:
            if name in self.config.deno_tasks:
                logger.debug("%s resolved to deno task", name)
                self.exec_deno_task(name, extra_args)
            elif name in self.config.node_scripts:
                logger.debug("%s resolved to package script", name)
                self.exec_node_script(name, extra_args)
            elif name in self.config.hooks:
                logger.debug("%s resolved to hook", name)
                self.run_spec(self.config.hooks[name], name, extra_args)
            else:
                logger.debug("%s resolved to shell command", name)
                self.exec_raw_command(name, extra_args)
        finally:
            self._visiting.discard(name)

    def run_named_task(self, name: str) -> None:
        """Run a dependency by name; hook arguments are not forwarded."""
        self.run_single(name, ())

    # -- dispatch ------------------------------------------------------------

    def exec_raw_command(self, command: str, extra_args: Sequence[str] = ()) -> None:
        full_command = compose_shell_command(command, extra_args)
        self._spawn([self.settings.shell, "-c", full_command], display=full_command)

    def exec_deno_task(self, name: str, extra_args: Sequence[str] = ()) -> None:
        runner = self.settings.task_runner
        self._spawn([runner, "task", name, *extra_args], display=f"{runner} task {name}")

    def exec_node_script(self, name: str, extra_args: Sequence[str] = ()) -> None:
        manager = extract_package_manager_command(self.config.package_manager)
        argv = [manager, "run", name]
        if extra_args:
            argv += ["--", *extra_args]
        self._spawn(argv, display=f"{manager} run {name}")

    def _spawn(self, argv: list[str], *, display: str) -> None:
        try:
            status = self.sink.run(argv, cwd=self.config.source.path.parent)
        except OSError as exc:
            raise RunnerIoError(display, exc) from exc
        if status != 0:
            raise CommandFailure(display, status)
