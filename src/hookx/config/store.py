"""Read-modify-write access to the ``hooks`` section of a config file.

Edits never touch a :class:`~hookx.config.types.HookConfig` snapshot. The raw
document is reloaded from disk, the caller edits its ``hooks`` object in
place, and the whole document is written back. Every other top-level field
is carried over untouched because it is the same parsed document.

There is no locking: two overlapping edits can lose one of them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from hookx.config.loader import read_config_text
from hookx.errors import ConfigJsonError, InvalidConfigShapeError, RunnerIoError, SerializeError

if TYPE_CHECKING:
    from hookx.config.types import ConfigSource

logger = logging.getLogger(__name__)

HooksMutator = Callable[[dict[str, Any]], None]


def load_config_value(source: ConfigSource) -> Any:
    """Load the raw JSON document behind ``source``."""
    content = read_config_text(source)
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigJsonError(source.path, exc) from exc


def write_config_value(source: ConfigSource, value: Any) -> None:
    """Write ``value`` as pretty-printed JSON with a trailing newline.

    The document is serialized before the file is opened, so a serialization
    failure leaves the previous content in place.
    """
    try:
        content = json.dumps(value, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise SerializeError(exc) from exc
    try:
        source.path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RunnerIoError(str(source.path), exc) from exc
    logger.debug("rewrote %s", source.path)


def sort_hooks(hooks: dict[str, Any]) -> None:
    """Re-order ``hooks`` keys alphabetically, in place."""
    entries = sorted(hooks.items())
    hooks.clear()
    hooks.update(entries)


def with_hooks_map(value: Any, source: ConfigSource, mutator: HooksMutator) -> None:
    """Apply ``mutator`` to the ``hooks`` object of a raw document.

    A missing or non-object ``hooks`` entry is replaced with an empty object
    first. Keys are sorted after the mutator runs.
    """
    if not isinstance(value, dict):
        raise InvalidConfigShapeError(str(source))
    hooks = value.get("hooks")
    if not isinstance(hooks, dict):
        hooks = {}
        value["hooks"] = hooks
    mutator(hooks)
    sort_hooks(hooks)


def mutate_hooks(source: ConfigSource, mutator: HooksMutator) -> None:
    """Reload ``source`` from disk, edit its hooks, and persist the result."""
    value = load_config_value(source)
    with_hooks_map(value, source, mutator)
    write_config_value(source, value)
