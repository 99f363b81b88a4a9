"""Resolution and execution of task specifications."""

from hookx.runner.engine import TaskRunner, compose_shell_command, extract_package_manager_command
from hookx.runner.sinks import CaptureSink, InheritSink, OutputChunk, OutputSink

__all__ = [
    "CaptureSink",
    "InheritSink",
    "OutputChunk",
    "OutputSink",
    "TaskRunner",
    "compose_shell_command",
    "extract_package_manager_command",
]
