"""CLI: tgbot commands set"""

from typing import Optional

import click
from rich.console import Console

from telegram_sdk.errors import TelegramError
from telegram_sdk.models.base import decode
from telegram_sdk.models.bot_command import BotCommand, BotCommandScope, SetMyCommandsParams

console = Console()

SCOPES = (
    "default",
    "all_private_chats",
    "all_group_chats",
    "all_chat_administrators",
    "chat",
    "chat_administrators",
    "chat_member",
)


def _get_client():
    from telegram_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from telegram_sdk.cli.main import _run
    return _run(coro)


def _parse_command(ctx, param, values: tuple[str, ...]) -> tuple[BotCommand, ...]:
    parsed = []
    for value in values:
        name, sep, description = value.partition("=")
        name = name.strip().lstrip("/")
        if not sep or not name or not description.strip():
            raise click.BadParameter(f"expected COMMAND=DESCRIPTION, got {value!r}")
        parsed.append(BotCommand(command=name, description=description.strip()))
    return tuple(parsed)


def build_params(
    commands: tuple[BotCommand, ...],
    scope: Optional[str] = None,
    chat_id: Optional[int] = None,
    user_id: Optional[int] = None,
    language: Optional[str] = None,
) -> SetMyCommandsParams:
    """Assemble a setMyCommands request; a scope missing its IDs raises MissingField."""
    scope_value = None
    if scope is not None:
        tree = {"type": scope}
        if chat_id is not None:
            tree["chat_id"] = chat_id
        if user_id is not None:
            tree["user_id"] = user_id
        scope_value = decode(BotCommandScope, tree)
    return SetMyCommandsParams(commands=commands, scope=scope_value, language_code=language)


@click.group()
def commands():
    """Bot command list management."""


@commands.command("set")
@click.argument("entries", nargs=-1, required=True, callback=_parse_command, metavar="COMMAND=DESCRIPTION...")
@click.option("--scope", type=click.Choice(SCOPES), default=None)
@click.option("--chat-id", type=int, default=None, help="Required by the chat* scopes")
@click.option("--user-id", type=int, default=None, help="Required by the chat_member scope")
@click.option("--language", default=None, help="Two-letter ISO 639-1 language code")
def commands_set(entries, scope, chat_id, user_id, language):
    """Replace the bot's command list."""
    try:
        params = build_params(entries, scope=scope, chat_id=chat_id, user_id=user_id, language=language)
    except TelegramError as e:
        raise click.UsageError(f"--scope {scope}: {e}")

    async def _set():
        async with _get_client() as bot:
            await bot.set_my_commands(params)

    try:
        _run(_set())
    except TelegramError as e:
        console.print(f"[red]{e.code}: {e}[/red]")
        raise SystemExit(1)
    console.print(f"[green]Set {len(entries)} command(s).[/green]")
