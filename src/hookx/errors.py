"""Error types raised by the hookx core.

Every error derives from :class:`HookxError` so the CLI can report any
failure with a single handler. Nothing in the core retries or recovers;
errors propagate to the immediate caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hookx.constants import GIT_HOOKS

if TYPE_CHECKING:
    from pathlib import Path


class HookxError(RuntimeError):
    """Base class for all hookx failures."""


# -- task spec parsing -------------------------------------------------------


class TaskSpecParseError(HookxError, ValueError):
    """A JSON value could not be parsed into a task specification."""


class InvalidTypeError(TaskSpecParseError):
    """The JSON value was of a type not supported for tasks."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"expected string, object or array but found {type_name}")
        self.type_name = type_name


class MissingCommandAndDepsError(TaskSpecParseError):
    """A task object specified neither a command nor any dependencies."""

    def __init__(self) -> None:
        super().__init__(
            "object must specify either a 'command' or at least one 'dependencies' entry"
        )


class InvalidDependencyTypeError(TaskSpecParseError):
    """A dependency entry was not a string."""

    def __init__(self) -> None:
        super().__init__("dependencies must be strings")


# -- configuration -----------------------------------------------------------


class ConfigError(HookxError):
    """The hook configuration could not be located or loaded."""


class ConfigNotFoundError(ConfigError):
    def __init__(self, directory: Path) -> None:
        super().__init__(
            "no supported configuration file (deno.json, deno.jsonc, package.json) "
            f"found in {directory}"
        )
        self.directory = directory


class ConfigIoError(ConfigError):
    """The file could not be read or is not valid UTF-8."""

    def __init__(self, path: Path, cause: OSError | UnicodeDecodeError) -> None:
        super().__init__(f"failed to read config file {path}: {cause}")
        self.path = path
        self.cause = cause


class ConfigJsonError(ConfigError):
    def __init__(self, path: Path, cause: ValueError) -> None:
        super().__init__(f"failed to parse JSON from {path}: {cause}")
        self.path = path
        self.cause = cause


class InvalidHookError(ConfigError):
    """A hook value failed task spec parsing."""

    def __init__(self, hook: str, cause: TaskSpecParseError) -> None:
        super().__init__(f"invalid hook definition for '{hook}': {cause}")
        self.hook = hook
        self.cause = cause


class UnknownHookError(ConfigError):
    """A hook name outside the Git hook contract was used."""

    def __init__(self, hook: str) -> None:
        super().__init__(
            f"unknown Git hook name '{hook}'. Supported hooks are: {', '.join(GIT_HOOKS)}"
        )
        self.hook = hook


# -- execution ---------------------------------------------------------------


class RunnerError(HookxError):
    """Failure while resolving, executing, or editing hooks."""


class CommandFailure(RunnerError):
    """A spawned command exited with a non-zero status."""

    def __init__(self, command: str, status: int) -> None:
        super().__init__(f"command '{command}' failed with status {status}")
        self.command = command
        self.status = status


class TaskNotFoundError(RunnerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"task '{name}' not found in configuration")
        self.name = name


class CircularDependencyError(RunnerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"circular dependency detected for task '{name}'")
        self.name = name


class RunnerIoError(RunnerError):
    """A process could not be spawned or a file could not be accessed."""

    def __init__(self, target: str, cause: OSError) -> None:
        super().__init__(f"I/O error for '{target}': {cause}")
        self.target = target
        self.cause = cause


class InvalidTaskSpecError(RunnerError):
    """Spec text supplied by a user did not form a valid task spec."""

    def __init__(self, cause: TaskSpecParseError) -> None:
        super().__init__(f"invalid task specification: {cause}")
        self.cause = cause


class SpecJsonError(RunnerError):
    """Spec text looked like JSON but did not parse."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(f"invalid JSON in task specification: {cause}")
        self.cause = cause


class SerializeError(RunnerError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"failed to serialize configuration: {cause}")
        self.cause = cause


class InvalidConfigShapeError(RunnerError):
    """The configuration document is not a JSON object."""

    def __init__(self, path: str) -> None:
        super().__init__(f"configuration file {path} must contain a JSON object")
        self.path = path


class HooksDirError(RunnerError):
    """Git could not report the hooks directory for a repository."""

    def __init__(self, repo: Path, detail: str) -> None:
        super().__init__(f"unable to resolve git hooks directory from {repo}: {detail}")
        self.repo = repo
        self.detail = detail


# -- runner settings ---------------------------------------------------------


class SettingsError(HookxError, ValueError):
    """The runner settings file is malformed or fails schema validation."""
