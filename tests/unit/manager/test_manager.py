from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from hookx.errors import TaskNotFoundError, UnknownHookError
from hookx.manager import LOG_LIMIT, HookManager
from hookx.runner import OutputChunk
from hookx.settings import RunnerSettings
from hookx.spec import DetailedSpec, SequenceSpec, SingleSpec


def _hooks(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))["hooks"]


@pytest.fixture
def package(write_config) -> Path:
    return write_config(
        "package.json",
        {"name": "demo", "hooks": {"pre-commit": "lint"}, "scripts": {"lint": "eslint ."}},
    )


@pytest.fixture
def manager(tmp_path: Path, package: Path) -> HookManager:
    _ = package
    return HookManager(tmp_path, settings=RunnerSettings())


def test_add_hook_appends_to_existing(manager: HookManager, package: Path) -> None:
    merged = manager.add_hook("pre-commit", SequenceSpec((SingleSpec("fmt"), SingleSpec("test"))))

    assert merged == SequenceSpec((SingleSpec("lint"), SingleSpec("fmt"), SingleSpec("test")))
    assert _hooks(package) == {"pre-commit": ["lint", "fmt", "test"]}
    assert manager.config().hooks["pre-commit"] == merged


def test_add_hook_with_replace(manager: HookManager, package: Path) -> None:
    manager.add_hook("pre-commit", SingleSpec("fmt"), replace=True)

    assert _hooks(package) == {"pre-commit": "fmt"}


def test_add_new_hook_is_stored_as_given(manager: HookManager, package: Path) -> None:
    manager.add_hook("pre-push", DetailedSpec(command="cargo test", dependencies=("lint",)))

    assert _hooks(package) == {
        "pre-commit": "lint",
        "pre-push": {"command": "cargo test", "dependencies": ["lint"]},
    }
    assert manager.logs[-1].level == "success"


def test_add_hook_rejects_unknown_name(manager: HookManager, package: Path) -> None:
    before = package.read_text(encoding="utf-8")

    with pytest.raises(UnknownHookError):
        manager.add_hook("pre-comit", SingleSpec("fmt"))

    assert package.read_text(encoding="utf-8") == before


def test_update_hook_replaces_definition(manager: HookManager, package: Path) -> None:
    manager.update_hook("pre-commit", SingleSpec("fmt"))

    assert _hooks(package) == {"pre-commit": "fmt"}


def test_remove_hook(manager: HookManager, package: Path) -> None:
    manager.remove_hook("pre-commit")

    document = json.loads(package.read_text(encoding="utf-8"))
    assert document["hooks"] == {}
    assert document["scripts"] == {"lint": "eslint ."}


def test_remove_missing_hook(manager: HookManager) -> None:
    with pytest.raises(TaskNotFoundError):
        manager.remove_hook("pre-push")


def test_remove_task_keeps_remaining_entries(manager: HookManager, package: Path) -> None:
    manager.add_hook("pre-commit", SequenceSpec((SingleSpec("fmt"), SingleSpec("lint"))))

    remaining = manager.remove_task("pre-commit", SingleSpec("lint"))

    assert remaining == SingleSpec("fmt")
    assert _hooks(package) == {"pre-commit": "fmt"}


def test_remove_last_task_drops_hook(manager: HookManager, package: Path) -> None:
    assert manager.remove_task("pre-commit", SingleSpec("lint")) is None
    assert _hooks(package) == {}


def test_remove_task_from_missing_hook(manager: HookManager) -> None:
    with pytest.raises(TaskNotFoundError):
        manager.remove_task("pre-push", SingleSpec("lint"))


def test_push_log_is_bounded(manager: HookManager) -> None:
    for index in range(LOG_LIMIT + 5):
        manager.push_log("info", f"line {index}")

    assert len(manager.logs) == LOG_LIMIT
    assert manager.logs[0].message == "line 5"
    assert manager.logs[-1].message == f"line {LOG_LIMIT + 4}"


def test_append_output_logs_by_stream(manager: HookManager) -> None:
    manager.append_output([OutputChunk("stdout", "out"), OutputChunk("stderr", "err")])

    assert [(entry.level, entry.message) for entry in manager.logs] == [("stdout", "out"), ("stderr", "err")]


def test_run_missing_hook(manager: HookManager) -> None:
    with pytest.raises(TaskNotFoundError):
        manager.run_hook("pre-push")

    assert manager.logs[-1].level == "error"


@pytest.mark.skipif(shutil.which("sh") is None, reason="sh not available")
def test_run_hook_reports_success(tmp_path: Path, write_config) -> None:
    write_config("package.json", {"hooks": {"pre-commit": "echo hello"}})
    manager = HookManager(tmp_path, settings=RunnerSettings())

    report = manager.run_hook("pre-commit")

    assert report.ok
    assert report.error is None
    assert report.output == (OutputChunk("stdout", "hello\n"),)
    assert ("stdout", "hello\n") in [(entry.level, entry.message) for entry in manager.logs]
    assert manager.logs[-1].level == "success"


@pytest.mark.skipif(shutil.which("sh") is None, reason="sh not available")
def test_run_hook_reports_failure(tmp_path: Path, write_config) -> None:
    write_config("package.json", {"hooks": {"pre-commit": ["echo before", "exit 2", "echo after"]}})
    manager = HookManager(tmp_path, settings=RunnerSettings())

    report = manager.run_hook("pre-commit")

    assert not report.ok
    assert report.error == "command 'exit 2' failed with status 2"
    assert report.output == (OutputChunk("stdout", "before\n"),)
    assert manager.logs[-1].level == "error"
