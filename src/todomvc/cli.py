"""CLI interface for todomvc."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from todomvc import __version__
from todomvc.config import CONFIG_FILE, AppConfig

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todomvc")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None) -> None:
    """todomvc - server-rendered task list.

    \b
    Usage:
      todomvc init           # Write a default config
      todomvc serve          # Start the web server
      todomvc config         # Show the effective config
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    try:
        ctx.obj["config"] = AppConfig.load(config_path)
    except (ValidationError, json.JSONDecodeError) as e:
        console.print(f"[red]Invalid config:[/red] {config_path or CONFIG_FILE}")
        console.print(str(e), markup=False)
        ctx.exit(1)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("serve")
@click.option("--host", default=None, help="Interface to bind to")
@click.option("--port", "-p", type=int, default=None, help="Port to listen on")
@click.option("--debug", is_flag=True, help="Enable Flask debug mode")
@click.pass_context
def serve_command(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    debug: bool,
) -> None:
    """Start the web server."""
    from todomvc.app import create_app
    from todomvc.logging_setup import setup_logging

    config: AppConfig = ctx.obj["config"]

    if host is not None:
        config.server.host = host
    if port is not None:
        config.server.port = port
    if debug:
        config.server.debug = True

    setup_logging(config.logging)

    app = create_app(config)

    console.print(
        Panel.fit(
            f"[bold]{config.title}[/bold] listening on "
            f"[cyan]http://{config.server.host}:{config.server.port}[/cyan]",
            border_style="green",
        )
    )

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=config.server.threaded,
    )


@main.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config")
@click.pass_context
def init_command(ctx: click.Context, force: bool) -> None:
    """Write the default configuration file."""
    path: Path = ctx.obj["config_path"] or CONFIG_FILE

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {path}")
        console.print("Use [bold]--force[/bold] to overwrite.")
        return

    AppConfig().save(path)
    console.print(f"[green]Wrote config:[/green] {path}")


@main.command("config")
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config: AppConfig = ctx.obj["config"]

    table = Table(title="todomvc config", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("title", config.title)
    table.add_row("server.host", config.server.host)
    table.add_row("server.port", str(config.server.port))
    table.add_row("server.debug", str(config.server.debug))
    table.add_row("server.threaded", str(config.server.threaded))
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.file", config.logging.file or "-")

    console.print(table)
