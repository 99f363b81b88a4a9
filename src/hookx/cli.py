"""hookx command line interface."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from hookx import __version__
from hookx.config import discover_config
from hookx.errors import HookxError
from hookx.install import install_hooks
from hookx.manager import HookManager
from hookx.runner import TaskRunner
from hookx.settings import RunnerSettings, load_settings
from hookx.spec import parse_spec_input, parse_specs_inputs
from hookx.ui import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_hooks,
    print_output,
    print_tasks,
)

cli = typer.Typer(
    name="hookx",
    help="Run Git hooks declared in deno.json, deno.jsonc or package.json.",
    no_args_is_help=True,
)


def _version_option_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _settings() -> RunnerSettings:
    try:
        return load_settings(Path.cwd())
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc


@cli.callback()
def _cli_callback(
    verbose: bool = typer.Option(False, "--verbose", help="Log resolution steps to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show hookx version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
) -> None:
    _ = version
    configure_logging("DEBUG" if verbose else _settings().log_level)


@cli.command("list")
def list_hooks(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show each hook's task spec."),
) -> None:
    """List configured Git hooks."""
    try:
        cfg = discover_config(Path.cwd())
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    print_hooks(cfg, verbose=verbose)


@cli.command()
def run(
    hook: str = typer.Argument(..., help="Name of the Git hook to run."),
    args: list[str] | None = typer.Argument(None, help="Arguments Git passed to the hook (after --)."),
    capture: bool = typer.Option(False, "--capture", help="Buffer command output and print it after the run."),
) -> None:
    """Run the tasks configured for HOOK."""
    try:
        cfg = discover_config(Path.cwd())
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc

    if hook not in cfg.hooks:
        err_console.print(f"Hook '{hook}' is not defined in {cfg.source.file_name}.")
        return

    settings = _settings()
    runner = TaskRunner.with_capture(cfg, settings=settings) if capture else TaskRunner(cfg, settings=settings)
    try:
        runner.run_hook(hook, args or [])
    except HookxError as exc:
        print_output(runner.take_output())
        print_error(str(exc))
        raise typer.Exit(1) from exc
    print_output(runner.take_output())


@cli.command()
def tasks(
    run_task: str | None = typer.Option(None, "--run", "-r", help="Run the named task instead of listing."),
) -> None:
    """List tasks and scripts from the configuration, or run one."""
    try:
        cfg = discover_config(Path.cwd())
        if run_task is None:
            print_tasks(cfg)
            return
        TaskRunner(cfg, settings=_settings()).run_task(run_task)
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc


@cli.command()
def add(
    hook: str = typer.Argument(..., help="Git hook name."),
    specs: list[str] = typer.Argument(..., help="Task name, shell command, or JSON task spec."),
    replace: bool = typer.Option(False, "--replace", help="Replace the existing definition instead of appending."),
) -> None:
    """Add tasks to a hook definition."""
    try:
        spec = HookManager(Path.cwd()).add_hook(hook, parse_specs_inputs(specs), replace=replace)
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    console.print(f"[green]Added hook '{hook}':[/green] {escape(str(spec))}", highlight=False)


@cli.command()
def update(
    hook: str = typer.Argument(..., help="Git hook name."),
    specs: list[str] = typer.Argument(..., help="New task spec. See `add` for formats."),
) -> None:
    """Replace a hook definition."""
    try:
        spec = HookManager(Path.cwd()).update_hook(hook, parse_specs_inputs(specs))
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    console.print(f"[green]Updated hook '{hook}':[/green] {escape(str(spec))}", highlight=False)


@cli.command()
def remove(
    hook: str = typer.Argument(..., help="Git hook name."),
    task: str | None = typer.Option(None, "--task", help="Remove only entries matching this spec."),
) -> None:
    """Remove a hook definition, or matching entries from it."""
    manager = HookManager(Path.cwd())
    try:
        if task is None:
            manager.remove_hook(hook)
            console.print(f"[green]Removed hook '{hook}'.[/green]")
            return
        remaining = manager.remove_task(hook, parse_spec_input(task))
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc
    if remaining is None:
        console.print(f"[green]Removed hook '{hook}'.[/green]")
    else:
        console.print(f"[green]Updated hook '{hook}':[/green] {escape(str(remaining))}", highlight=False)


@cli.command()
def install(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing hook scripts."),
    hook: list[str] | None = typer.Option(None, "--hook", help="Install only this hook (repeatable)."),
) -> None:
    """Install wrapper scripts into the Git hooks directory."""
    try:
        report = install_hooks(Path.cwd(), hooks=hook, force=force)
    except HookxError as exc:
        print_error(str(exc))
        raise typer.Exit(1) from exc

    for name in report.created:
        console.print(f"[green]installed[/green] {name}")
    for name in report.overwritten:
        console.print(f"[yellow]overwrote[/yellow] {name}")
    for name in report.skipped:
        console.print(f"[dim]skipped[/dim] {name} (exists; use --force)")
    if not (report.created or report.overwritten or report.skipped):
        err_console.print("No hooks to install.")
