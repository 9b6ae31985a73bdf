#!/usr/bin/env python3
"""
Main CLI entry point for winzoom
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.table import Table

from winzoom import __version__
from winzoom.config.settings import (
    ZoomConfig,
    get_config_path,
    load_config,
    save_example_config,
)
from winzoom.utils.error_handling import handle_cli_error
from winzoom.utils.logging import set_verbose
from winzoom.utils.output import console

app = typer.Typer(help="Zoom the focused window and restore the layout afterwards.")
config_app = typer.Typer(help="Inspect and create the winzoom config file.")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    winzoom - temporarily maximize the focused window

    [bold]Examples:[/bold]

    Try it in a demo app:
        [cyan]winzoom demo[/cyan]

    Try the window-hiding strategy:
        [cyan]winzoom demo --hide[/cyan]
    """
    set_verbose(verbose)


def _resolve_config(config_path: Optional[Path]) -> ZoomConfig:
    return load_config(config_path) if config_path else load_config()


@app.command()
@handle_cli_error("starting demo")
def demo(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file to use instead of the default"
    ),
    hide: bool = typer.Option(
        False, "--hide", help="Hide sibling windows instead of opening a zoom tab"
    ),
):
    """Run a three-pane demo app with zoom wired up."""
    from winzoom.ui.demo_app import run_demo

    config = _resolve_config(config_path)
    if hide:
        config.use_tab_zoom = False
    run_demo(config)


@config_app.command("show")
@handle_cli_error("loading config")
def config_show(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file to read instead of the default"
    ),
    as_yaml: bool = typer.Option(False, "--yaml", help="Print the merged config as YAML"),
):
    """Show the effective configuration."""
    path = config_path or get_config_path()
    config = _resolve_config(config_path)
    if as_yaml:
        typer.echo(yaml.safe_dump(config.to_dict(), sort_keys=False), nl=False)
        return

    table = Table(title=f"winzoom config ({path})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("toggle key", config.toggle_key or "[dim]unbound[/dim]")
    table.add_row("border", config.border.value)
    table.add_row("strategy", "tab relocation" if config.use_tab_zoom else "sibling hiding")
    console.print(table)


@config_app.command("init")
@handle_cli_error("creating config")
def config_init(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Where to write the example config"
    ),
):
    """Write an example config file if none exists."""
    path = config_path or get_config_path()
    if save_example_config(path):
        console.print(f"[green]Created {path}[/green]")
    else:
        console.print(f"[yellow]{path} already exists or could not be written[/yellow]")


@app.command()
def version():
    """Show winzoom version"""
    typer.echo(f"winzoom version {__version__}")


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
