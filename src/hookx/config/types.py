"""Configuration snapshot types."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hookx.spec import TaskSpec

SourceKind = Literal["deno", "package"]


@dataclass(frozen=True)
class ConfigSource:
    """Which file a configuration was loaded from and how to read it.

    ``deno`` sources are JSONC-style (comments allowed) and carry a ``tasks``
    table; ``package`` sources are plain JSON with a ``scripts`` table.
    """

    kind: SourceKind
    path: Path

    @property
    def is_deno(self) -> bool:
        return self.kind == "deno"

    @property
    def file_name(self) -> str:
        return self.path.name or ("deno.json" if self.is_deno else "package.json")

    def __str__(self) -> str:
        return str(self.path)


def _frozen(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class HookConfig:
    """Immutable snapshot of one configuration file, built fresh per command."""

    source: ConfigSource
    hooks: Mapping[str, TaskSpec] = field(default_factory=dict)
    node_scripts: Mapping[str, str] = field(default_factory=dict)
    deno_tasks: Mapping[str, str] = field(default_factory=dict)
    package_manager: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hooks", _frozen(self.hooks))
        object.__setattr__(self, "node_scripts", _frozen(self.node_scripts))
        object.__setattr__(self, "deno_tasks", _frozen(self.deno_tasks))

    def task_names(self) -> list[str]:
        """Names from both task tables, deno tasks first, each group sorted."""
        return sorted(self.deno_tasks) + sorted(self.node_scripts)

    def task_command(self, name: str) -> str | None:
        if name in self.node_scripts:
            return self.node_scripts[name]
        return self.deno_tasks.get(name)
