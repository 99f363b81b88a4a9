"""Pytest configuration and fixtures for hookx tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


class RecordingSink:
    """Process sink stand-in: records argv and returns scripted exit codes."""

    def __init__(self, statuses: dict[tuple[str, ...], int] | None = None) -> None:
        self.statuses = statuses or {}
        self.calls: list[tuple[str, ...]] = []

    def run(self, argv, *, cwd: Path | None = None) -> int:
        _ = cwd
        key = tuple(argv)
        self.calls.append(key)
        return self.statuses.get(key, 0)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a JSON config file into ``tmp_path`` and return its path."""

    def _write(name: str, data: dict[str, Any] | str) -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def pytest_sessionfinish(session, exitstatus):
    """Fail the run if --cov was requested but no data was collected."""
    cov_enabled = any("--cov" in str(arg) for arg in session.config.args)
    if not cov_enabled:
        return
    if not list(Path.cwd().glob(".coverage*")):
        pytest.exit(
            "Coverage was enabled but no data was collected. "
            "Check that tests import from 'hookx' (the package) not 'src/hookx'.",
            returncode=1,
        )
