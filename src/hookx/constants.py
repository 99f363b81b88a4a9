"""Shared constants for hookx."""

from __future__ import annotations

# Hook names from https://git-scm.com/docs/githooks
GIT_HOOKS: tuple[str, ...] = (
    "pre-applypatch",
    "pre-auto-gc",
    "pre-checkout",
    "pre-commit",
    "pre-merge-commit",
    "pre-push",
    "pre-rebase",
    "pre-receive",
    "prepare-commit-msg",
    "applypatch-msg",
    "commit-msg",
    "post-applypatch",
    "post-checkout",
    "post-commit",
    "post-merge",
    "post-receive",
    "post-rewrite",
    "post-update",
    "push-to-checkout",
    "fsmonitor-watchman",
    "sendemail-validate",
    "update",
)

DENO_JSON = "deno.json"
DENO_JSONC = "deno.jsonc"
PACKAGE_JSON = "package.json"

# Discovery order; the first existing file wins.
CONFIG_SEARCH_ORDER: tuple[str, ...] = (DENO_JSON, DENO_JSONC, PACKAGE_JSON)

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "yarn", "pnpm", "bun")
DEFAULT_PACKAGE_MANAGER = "npm"

DEFAULT_SHELL = "sh"
DEFAULT_TASK_RUNNER = "deno"
DEFAULT_LOG_LEVEL = "WARNING"

SETTINGS_FILENAME = ".hookx.yaml"
