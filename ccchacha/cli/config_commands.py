"""CLI commands for configuration inspection."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ccchacha.config import ConfigManager
from ccchacha.exceptions import ConfigurationError

console = Console()


def _manager(ctx: click.Context) -> ConfigManager:
    obj = ctx.find_root().obj or {}
    manager = obj.get("config_manager")
    if manager is None:
        manager = ConfigManager(obj.get("config_file"))
    return manager


@click.group("config")
def config() -> None:
    """Inspect configuration."""


@config.command("show")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["toml", "json", "table"]),
    default="table",
    show_default=True,
)
@click.pass_context
def config_show(ctx: click.Context, fmt: str) -> None:
    """Show the effective configuration."""
    manager = _manager(ctx)
    if fmt != "table":
        try:
            click.echo(manager.export(fmt))
        except ConfigurationError as e:
            console.print(f"[red]Error exporting configuration: {escape(str(e))}[/red]")
            raise click.Abort from e
        return

    data = manager.config.model_dump(mode="json")
    table = Table(title="ccChaCha Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for section, values in data.items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", "-" if value is None else str(value))
    console.print(table)


@config.command("path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Show which configuration file is in use."""
    manager = _manager(ctx)
    if manager.config_file is None:
        click.echo("No configuration file found (using defaults)")
    else:
        click.echo(str(manager.config_file))
