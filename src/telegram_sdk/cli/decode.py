"""CLI: tgbot decode FILE — check a saved payload against the models, offline."""

import json

import click
from rich.console import Console

from telegram_sdk.errors import DecodeError
from telegram_sdk.models.base import decode, encode
from telegram_sdk.models.message import MaybeInaccessibleMessage, Message
from telegram_sdk.models.update import Update

console = Console()

TARGETS = {
    "update": Update,
    "message": Message,
    "maybe-message": MaybeInaccessibleMessage,
}


@click.command("decode")
@click.argument("file", type=click.File("r"))
@click.option("--as", "target", type=click.Choice(sorted(TARGETS)), default="update", show_default=True)
@click.option("--raw", is_flag=True, help="Accept a full {ok, result} envelope and decode its result")
def decode_cmd(file, target: str, raw: bool):
    """Decode FILE (use - for stdin) and print it back in wire form."""
    try:
        tree = json.load(file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="FILE")
    if raw and isinstance(tree, dict) and "ok" in tree:
        tree = tree.get("result")

    tp = TARGETS[target]
    items = tree if isinstance(tree, list) else [tree]
    try:
        values = [decode(tp, item) for item in items]
    except DecodeError as e:
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        raise SystemExit(1)

    out = [encode(v, tp) for v in values]
    click.echo(json.dumps(out if isinstance(tree, list) else out[0], indent=2, ensure_ascii=False))
