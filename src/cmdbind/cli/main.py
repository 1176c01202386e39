"""CLI entry point for cmdbind.

Invoked as::

    cmdbind [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m cmdbind.cli.main

Commands
--------
run         Dispatch one command of a strategy object
commands    List the commands a strategy object declares
help        Show help for all commands or for one command
version     Show version information

The strategy is given with ``--strategy`` (or ``CMDBIND_STRATEGY``) as
``package.module`` or ``package.module:attribute``.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from cmdbind.registry.registry import CommandRegistry

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

strategy_option = click.option(
    "--strategy",
    "-s",
    "strategy_path",
    required=True,
    envvar="CMDBIND_STRATEGY",
    show_envvar=True,
    help="Strategy object as package.module[:attribute]",
)


def _load_registry_or_exit(strategy_path: str) -> "CommandRegistry":
    """Import a strategy and build its registry, exiting on error."""
    from cmdbind.core.errors import DuplicateCommandError
    from cmdbind.registry import CommandRegistry, StrategyLoadError, load_strategy

    try:
        strategy = load_strategy(strategy_path)
    except StrategyLoadError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    try:
        return CommandRegistry.from_strategy(strategy)
    except DuplicateCommandError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _parse_option_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``key=value`` pairs into an options map."""
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected key=value, got {pair!r}", param_hint="'-o' / '--option'"
            )
        options[key] = value
    return options


def _read_options_file(path: str) -> dict[str, str]:
    """Load a YAML mapping of option values, stringifying scalars."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise click.BadParameter(f"invalid YAML: {exc}", param_hint="'--options-file'") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise click.BadParameter(
            "expected a mapping of option keys to values", param_hint="'--options-file'"
        )
    return {str(key): "" if value is None else str(value) for key, value in data.items()}


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="cmdbind")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="CMDBIND_LOG_LEVEL",
    show_default=True,
    help="Logging level for cmdbind diagnostics",
)
def cli(log_level: str) -> None:
    """Declare command handlers, bind textual options, dispatch safely."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from cmdbind import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]cmdbind[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# commands command
# ---------------------------------------------------------------------------


@cli.command(name="commands")
@strategy_option
def commands_command(strategy_path: str) -> None:
    """List the commands declared by a strategy object."""
    registry = _load_registry_or_exit(strategy_path)

    if not len(registry):
        console.print(f"[yellow]No commands declared by[/yellow] {strategy_path}")
        return

    table = Table(title=f"Commands: {strategy_path}")
    table.add_column("Name", style="bold")
    table.add_column("Usage")
    table.add_column("Help")
    for descriptor in registry:
        table.add_row(descriptor.name, descriptor.usage, descriptor.help)
    console.print(table)
    console.print(f"\n[bold]{len(registry)}[/bold] command(s)")


# ---------------------------------------------------------------------------
# help command
# ---------------------------------------------------------------------------


@cli.command(name="help")
@strategy_option
@click.argument("name", required=False)
def help_command(strategy_path: str, name: str | None) -> None:
    """Show help for all commands, or for command NAME."""
    from cmdbind.core.errors import CommandNotBoundError
    from cmdbind.formatter import render_command_help, render_help

    registry = _load_registry_or_exit(strategy_path)

    if name is None:
        console.print(render_help(registry), markup=False, highlight=False)
        return

    try:
        descriptor = registry.resolve(name)
    except CommandNotBoundError as exc:
        err_console.print(str(exc), markup=False)
        sys.exit(1)
    console.print(render_command_help(descriptor), markup=False, highlight=False)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@strategy_option
@click.argument("name")
@click.option(
    "--option",
    "-o",
    "option_pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Option value for the command (repeatable)",
)
@click.option(
    "--options-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML mapping of option values; -o pairs take precedence",
)
def run_command(
    strategy_path: str,
    name: str,
    option_pairs: tuple[str, ...],
    options_file: str | None,
) -> None:
    """Dispatch command NAME of a strategy object.

    Examples:

    \b
        cmdbind run -s myapp.commands:Commands echo -o msg=hello
        cmdbind run -s myapp.commands repeat --options-file opts.yaml
    """
    from cmdbind.dispatch import ConsoleMessenger, Dispatcher

    options = _read_options_file(options_file) if options_file else {}
    options.update(_parse_option_pairs(option_pairs))

    registry = _load_registry_or_exit(strategy_path)
    dispatcher = Dispatcher(registry, ConsoleMessenger(err_console))

    result = dispatcher.dispatch(name, options)
    dispatcher.report(result)

    if not result.ok:
        sys.exit(1)
    if result.value is not None:
        console.print(str(result.value), markup=False, highlight=False)


if __name__ == "__main__":
    cli()
