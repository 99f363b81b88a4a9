"""Configuration discovery, loading, and hook persistence."""

from hookx.config.jsonc import strip_json_comments
from hookx.config.loader import (
    discover_config,
    ensure_valid_hook_name,
    find_config_source,
    load_config,
)
from hookx.config.store import load_config_value, mutate_hooks, write_config_value
from hookx.config.types import ConfigSource, HookConfig

__all__ = [
    "ConfigSource",
    "HookConfig",
    "discover_config",
    "ensure_valid_hook_name",
    "find_config_source",
    "load_config",
    "load_config_value",
    "mutate_hooks",
    "strip_json_comments",
    "write_config_value",
]
