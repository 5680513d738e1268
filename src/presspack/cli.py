"""Command-line interface for PressPack."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from presspack.config import ConfigError, Settings, set_settings
from presspack.packages.manager import PackageManager

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
@click.option("--plugins-dir", type=click.Path(), help="Plugins directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    plugins_dir: str | None,
    verbose: bool,
) -> None:
    """PressPack - WordPress plugins as Composer packages."""
    _configure_logging(verbose)

    try:
        settings = Settings.from_file(config) if config else Settings.from_env()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    if plugins_dir:
        settings = dataclasses.replace(settings, plugins_dir=plugins_dir)
    set_settings(settings)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = settings
    ctx.obj["manager"] = PackageManager(settings=settings)


@cli.command("list")
@click.pass_context
def list_plugins(ctx: click.Context) -> None:
    """List installed plugins."""
    manager: PackageManager = ctx.obj["manager"]
    plugins = manager.all()

    if not plugins:
        console.print(f"[yellow]No plugins found in {manager.plugins_dir}[/yellow]")
        return

    table = Table(title="Installed Plugins")
    table.add_column("Slug", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Version", style="green")
    table.add_column("Basename", style="dim")

    for plugin in plugins:
        table.add_row(
            plugin.get_slug(),
            plugin.get_name(),
            plugin.get_version(),
            plugin.get_basename(),
        )

    console.print(table)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the package record as JSON")
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, as_json: bool, name: str) -> None:
    """Show details for a plugin, by basename or slug."""
    manager: PackageManager = ctx.obj["manager"]
    plugin = manager.find(name)

    if plugin is None:
        console.print(f"[red]Plugin not found:[/red] {escape(name)}")
        suggestions = manager.suggest(name)
        if suggestions:
            console.print("Did you mean:")
            for slug, _score in suggestions:
                console.print(f"  - {slug}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(plugin.to_dict(ctx.obj["settings"].vendor), indent=2))
        return

    console.print(Panel.fit(f"{plugin.get_name() or plugin.get_slug()}"))

    table = Table()
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Slug", plugin.get_slug())
    table.add_row("Basename", plugin.get_basename())
    table.add_row("Type", plugin.get_type())
    table.add_row("Version", plugin.get_version())
    table.add_row("Author", plugin.get_author())
    table.add_row("Author URI", plugin.get_author_uri())
    table.add_row("Homepage", plugin.get_homepage())
    table.add_row("Description", plugin.get_description())
    table.add_row("Requires WP", plugin.get_requires_wp())
    table.add_row("Requires PHP", plugin.get_requires_php())
    table.add_row("Network Only", "Yes" if plugin.is_network_only() else "No")
    table.add_row("Path", plugin.get_path())
    table.add_row("Installed", "Yes" if plugin.is_installed() else "No")

    console.print(table)


@cli.command()
@click.option("--output", "-o", type=click.Path(), help="Output file path")
@click.pass_context
def packages(ctx: click.Context, output: str | None) -> None:
    """Print a Composer-style packages document for all plugins."""
    manager: PackageManager = ctx.obj["manager"]
    content = json.dumps(manager.to_dict(), indent=2)

    if output:
        Path(output).write_text(content + "\n")
        console.print(f"[green]Saved to:[/green] {output}")
    else:
        click.echo(content)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
