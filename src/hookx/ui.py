from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hookx.config import HookConfig
    from hookx.runner import OutputChunk

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Route hookx loggers to stderr through rich."""
    root = logging.getLogger("hookx")
    root.handlers.clear()
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    root.addHandler(handler)
    root.setLevel(level.upper())
    root.propagate = False


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_hooks(cfg: HookConfig, *, verbose: bool = False) -> None:
    path = cfg.source.path
    if not cfg.hooks:
        err_console.print(f"No hooks are defined in '{escape(str(path))}'.")
        return

    count = len(cfg.hooks)
    suffix = "" if count == 1 else "s"
    console.print(f"[bold green]Discovered {count} hook{suffix} in[/bold green] [bold blue]{escape(str(path))}[/bold blue]:")
    console.print()
    for hook in sorted(cfg.hooks):
        line = Text("- ")
        line.append(hook, style="bold cyan")
        line.append(f" ({cfg.source.file_name})", style="italic bright_black")
        console.print(line)
        if verbose:
            console.print(f"  {escape(str(cfg.hooks[hook]))}")
    console.print()


def print_tasks(cfg: HookConfig) -> None:
    kind = "task" if cfg.source.is_deno else "script"
    path = cfg.source.path
    names = cfg.task_names()
    if not names:
        err_console.print(f"No {kind}s found in '{escape(str(path))}'.")
        return

    suffix = "" if len(names) == 1 else "s"
    console.print(f"Discovered {len(names)} {kind}{suffix} in '{escape(str(path))}':")
    for name in names:
        line = Text("- ")
        line.append(name, style="bold cyan")
        line.append(f" ({cfg.source.file_name})", style="italic bright_black")
        console.print(line)
        command = (cfg.task_command(name) or "<unknown>").replace("\n", " ")
        console.print(Text(f"  {command}"))


def print_output(chunks: Iterable[OutputChunk]) -> None:
    """Replay captured process output after a run."""
    for chunk in chunks:
        target = console if chunk.stream == "stdout" else err_console
        target.print(Text(chunk.text.rstrip("\n")))
