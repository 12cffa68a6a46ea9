"""CLI: convo config show|set|reset"""

import json

import click
from rich.console import Console

console = Console()

SETTINGS = ("indent", "distribution_type")


def _load_config() -> dict:
    from convo_intents.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from convo_intents.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """CLI defaults."""


@config.command("show")
def config_show():
    """Show saved defaults."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]No defaults saved.[/yellow]")
        return
    click.echo(json.dumps(cfg, indent=2))


@config.command("set")
@click.argument("key", type=click.Choice(SETTINGS))
@click.argument("value", type=int)
def config_set(key: str, value: int):
    """Save a default (indent, distribution_type)."""
    cfg = _load_config()
    _save_config({**cfg, key: value})
    console.print(f"[green]{key} = {value}[/green]")


@config.command("reset")
def config_reset():
    """Clear saved defaults."""
    _save_config({})
    console.print("[green]Defaults cleared.[/green]")
