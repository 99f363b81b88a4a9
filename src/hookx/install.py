"""Install Git hook wrapper scripts that delegate to ``hookx run``."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from hookx.config import discover_config, ensure_valid_hook_name
from hookx.errors import HooksDirError, RunnerIoError

logger = logging.getLogger(__name__)

WRAPPER_TEMPLATE = '#!/bin/sh\n# installed by hookx\nexec hookx run {hook} -- "$@"\n'


@dataclass
class InstallReport:
    hooks_dir: Path
    created: list[str] = field(default_factory=list)
    overwritten: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def render_wrapper(hook: str) -> str:
    return WRAPPER_TEMPLATE.format(hook=hook)


def resolve_hooks_dir(repo: Path) -> Path:
    """Ask Git where hooks live (honours ``core.hooksPath`` and worktrees)."""
    argv = ["git", "rev-parse", "--git-path", "hooks"]
    try:
        completed = subprocess.run(argv, cwd=repo, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise RunnerIoError(" ".join(argv), exc) from exc
    if completed.returncode != 0:
        raise HooksDirError(repo, completed.stderr.strip())
    hooks_dir = Path(completed.stdout.strip())
    if not hooks_dir.is_absolute():
        hooks_dir = repo / hooks_dir
    return hooks_dir.resolve()


def install_hooks(
    repo: Path,
    *,
    hooks: list[str] | None = None,
    force: bool = False,
) -> InstallReport:
    """Write a wrapper script for each configured hook (or each hook in ``hooks``).

    Existing scripts are left alone unless ``force`` is set.
    """
    if hooks:
        for hook in hooks:
            ensure_valid_hook_name(hook)
        selected = sorted(set(hooks))
    else:
        selected = sorted(discover_config(repo).hooks)

    hooks_dir = resolve_hooks_dir(repo)
    hooks_dir.mkdir(parents=True, exist_ok=True)
    report = InstallReport(hooks_dir=hooks_dir)

    for hook in selected:
        target = hooks_dir / hook
        existed = target.exists()
        if existed and not force:
            report.skipped.append(hook)
            continue
        target.write_text(render_wrapper(hook), encoding="utf-8")
        target.chmod(0o755)
        (report.overwritten if existed else report.created).append(hook)
        logger.debug("installed %s", target)

    return report
