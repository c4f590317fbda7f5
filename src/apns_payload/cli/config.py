"""CLI: apns-payload config show|set-max-bytes|reset"""

import json

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from apns_payload.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from apns_payload.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Saved CLI settings."""


@config.command("show")
def config_show():
    """Show saved settings."""
    click.echo(json.dumps(_load_config(), indent=2))


@config.command("set-max-bytes")
@click.argument("max_bytes", type=click.IntRange(min=1))
def config_set_max_bytes(max_bytes: int):
    """Save the default byte budget used by `build`."""
    _save_config({**_load_config(), "max_bytes": max_bytes})
    console.print(f"[green]Default budget set to {max_bytes} bytes.[/green]")


@config.command("reset")
def config_reset():
    """Clear saved settings."""
    _save_config({})
    console.print("[green]Settings cleared.[/green]")
