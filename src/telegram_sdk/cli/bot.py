"""CLI: tgbot me | tgbot updates"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from telegram_sdk.errors import TelegramError
from telegram_sdk.models.base import encode
from telegram_sdk.models.update import Update

console = Console()

UPDATE_KINDS = ("message", "edited_message", "channel_post", "edited_channel_post")


def _get_client():
    from telegram_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from telegram_sdk.cli.main import _run
    return _run(coro)


def _kind(update: Update) -> str:
    for kind in UPDATE_KINDS:
        if getattr(update, kind) is not None:
            return kind
    return "other"


def _fail(e: TelegramError) -> None:
    console.print(f"[red]{e.code}: {e}[/red]")
    raise SystemExit(1)


@click.command("me")
@click.option("--json-output", "--json", is_flag=True)
def me_cmd(json_output: bool):
    """Show the bot's own account."""

    async def _me():
        async with _get_client() as bot:
            return await bot.get_me()

    try:
        me = _run(_me())
    except TelegramError as e:
        _fail(e)
        return

    if json_output:
        click.echo(json.dumps(me.encode(), indent=2, ensure_ascii=False))
        return
    table = Table(title=me.full_name, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", str(me.id))
    table.add_row("Username", f"@{me.username}" if me.username else "")
    table.add_row("Can join groups", str(bool(me.can_join_groups)))
    table.add_row("Reads all group messages", str(bool(me.can_read_all_group_messages)))
    table.add_row("Inline queries", str(bool(me.supports_inline_queries)))
    console.print(table)


@click.command("updates")
@click.option("--offset", default=None, type=int, help="First update ID to return")
@click.option("--limit", default=None, type=click.IntRange(1, 100))
@click.option("--timeout", default=None, type=click.IntRange(0), help="Long polling timeout in seconds")
@click.option("--json-output", "--json", is_flag=True)
def updates_cmd(offset: Optional[int], limit: Optional[int], timeout: Optional[int], json_output: bool):
    """Fetch pending updates."""

    async def _updates():
        async with _get_client() as bot:
            return await bot.get_updates(offset=offset, limit=limit, timeout=timeout)

    try:
        updates = _run(_updates())
    except TelegramError as e:
        _fail(e)
        return

    if json_output:
        click.echo(json.dumps([u.encode() for u in updates], indent=2, ensure_ascii=False))
        return
    if not updates:
        console.print("[dim]No pending updates.[/dim]")
        return
    table = Table(title=f"Updates ({len(updates)})")
    table.add_column("ID", style="bold")
    table.add_column("Kind")
    table.add_column("Chat")
    table.add_column("From")
    table.add_column("Text")
    for u in updates:
        msg = u.effective_message
        if msg is None:
            table.add_row(str(u.id), _kind(u), "", "", "")
            continue
        chat = msg.chat.title or msg.chat.username or str(msg.chat.id)
        sender = msg.from_.full_name if msg.from_ else ""
        table.add_row(str(u.id), _kind(u), chat, sender, (msg.text or msg.caption or "")[:60])
    console.print(table)
    console.print(f"[dim]Next offset: {updates[-1].next_offset}[/dim]")
