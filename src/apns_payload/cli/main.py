"""
apns-payload CLI — `apns-payload` command.

Commands:
  apns-payload build [FILE]         Marshal a payload JSON file (or stdin)
  apns-payload config show          Print saved settings
  apns-payload config set-max-bytes Save the default byte budget
  apns-payload config reset         Clear saved settings
"""

import json
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install apns-payload[cli]")

from apns_payload import __version__
from apns_payload._logging import configure_logging

console = Console()
err_console = Console(stderr=True)
DEFAULT_CONFIG_FILE = Path.home() / ".apns_payload" / "config.json"


def _config_file() -> Path:
    override = os.environ.get("APNS_PAYLOAD_CONFIG")
    return Path(override) if override else DEFAULT_CONFIG_FILE


def _load_config() -> dict:
    try:
        return json.loads(_config_file().read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    path = _config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2))


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """apns-payload CLI — build size-bounded push notification payloads."""
    configure_logging("DEBUG" if verbose else None)


# Register subcommands from separate modules
from apns_payload.cli.build import build_cmd
from apns_payload.cli.config import config

main.add_command(build_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
