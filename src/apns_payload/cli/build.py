"""CLI: apns-payload build"""

import json
from typing import Optional, TextIO

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from apns_payload.encoding import encode_envelope
from apns_payload.envelope import assemble
from apns_payload.errors import PayloadError
from apns_payload.marshal import DEFAULT_MAX_PAYLOAD_SIZE, build_aps, marshal
from apns_payload.models.payload import Payload

err_console = Console(stderr=True)


def _load_config() -> dict:
    from apns_payload.cli.main import _load_config
    return _load_config()


def _saved_max_bytes() -> int:
    value = _load_config().get("max_bytes", DEFAULT_MAX_PAYLOAD_SIZE)
    try:
        return click.IntRange(min=1).convert(value, None, None)
    except click.BadParameter as e:
        err_console.print(f"[red]Invalid max_bytes in config:[/red] {escape(e.format_message())}")
        raise SystemExit(1)


@click.command("build")
@click.argument("payload_file", type=click.File("r"), default="-")
@click.option("--max-bytes", type=click.IntRange(min=1), default=None,
              help=f"Byte budget (default: saved config, else {DEFAULT_MAX_PAYLOAD_SIZE})")
@click.option("--json-output", "--json", is_flag=True, help="Print size details as JSON")
def build_cmd(payload_file: TextIO, max_bytes: Optional[int], json_output: bool):
    """Marshal a payload JSON document and print the APNs body."""
    budget = max_bytes or _saved_max_bytes()

    try:
        payload = Payload.model_validate_json(payload_file.read())
    except ValidationError as e:
        err_console.print(f"[red]Invalid payload:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        data = marshal(payload, budget)
    except PayloadError as e:
        err_console.print(f"[red]{e.code}:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not json_output:
        click.echo(data)
        return

    full_size = len(encode_envelope(assemble(build_aps(payload), payload.custom_fields)))
    click.echo(json.dumps({
        "size": len(data),
        "max_bytes": budget,
        "truncated": full_size > budget,
        "payload": json.loads(data),
    }, indent=2, ensure_ascii=False))
