"""Process sinks: where spawned commands send their output.

:class:`InheritSink` lets children write straight to the controlling
terminal. :class:`CaptureSink` collects each child's complete stdout and
stderr as ordered :class:`OutputChunk` entries so interactive callers can
render them after the run.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)

Stream = Literal["stdout", "stderr"]


@dataclass(frozen=True)
class OutputChunk:
    """Output of one stream of one finished process."""

    stream: Stream
    text: str


class OutputSink(Protocol):
    """Runs a command to completion and returns its exit status.

    Raises:
        OSError: If the process cannot be spawned
    """

    def run(self, argv: Sequence[str], *, cwd: Path | None = None) -> int: ...


class InheritSink:
    """Spawn with the caller's stdin, stdout and stderr."""

    def run(self, argv: Sequence[str], *, cwd: Path | None = None) -> int:
        logger.debug("spawn %s", list(argv))
        completed = subprocess.run(list(argv), cwd=cwd, check=False)
        return completed.returncode


class CaptureSink:
    """Spawn with captured output, buffered per finished process."""

    def __init__(self) -> None:
        self._chunks: list[OutputChunk] = []

    def run(self, argv: Sequence[str], *, cwd: Path | None = None) -> int:
        logger.debug("spawn (captured) %s", list(argv))
        completed = subprocess.run(
            list(argv),
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
        if completed.stdout:
            self._chunks.append(OutputChunk("stdout", completed.stdout))
        if completed.stderr:
            self._chunks.append(OutputChunk("stderr", completed.stderr))
        return completed.returncode

    @property
    def chunks(self) -> tuple[OutputChunk, ...]:
        return tuple(self._chunks)

    def take_output(self) -> list[OutputChunk]:
        """Return buffered chunks and clear the buffer."""
        chunks, self._chunks = self._chunks, []
        return chunks
