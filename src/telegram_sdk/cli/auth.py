"""CLI: tgbot auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from telegram_sdk.client import AsyncTelegramBot
from telegram_sdk.errors import TelegramError
from telegram_sdk.settings import Settings

console = Console()


def _load_config() -> dict:
    from telegram_sdk.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from telegram_sdk.cli.main import _save_config
    _save_config(cfg)


def _run(coro):
    from telegram_sdk.cli.main import _run
    return _run(coro)


def _mask(token: str) -> str:
    bot_id, _, secret = token.partition(":")
    return f"{bot_id}:{'*' * min(len(secret), 8)}" if secret else "*" * 8


@click.group()
def auth():
    """Bot token management."""


@auth.command("login")
@click.option("--api-url", default=None, help="Bot API server URL")
@click.option("--token", default=None, help="Bot token from @BotFather (prompted if omitted)")
def auth_login(api_url: Optional[str], token: Optional[str]):
    """Check a bot token with getMe and save it."""

    async def _login():
        cfg = _load_config()
        url = api_url or cfg.get("api_url", Settings().api_url)
        secret = token or click.prompt("Bot token", hide_input=True)

        async with AsyncTelegramBot(secret, base_url=url) as bot:
            with console.status("Checking token..."):
                me = await bot.get_me()
        console.print(f"[green]Logged in as @{me.username or me.first_name} (ID: {me.id})[/green]")

        _save_config({**cfg, "token": secret, "api_url": url, "username": me.username, "bot_id": int(me.id)})
        console.print("[dim]Token saved to ~/.telegram-sdk/config.json[/dim]")

    try:
        _run(_login())
    except TelegramError as e:
        console.print(f"[red]Login failed: {e}[/red]")
        raise SystemExit(1)


@auth.command("status")
def auth_status():
    """Show which token is in use."""
    settings = Settings()
    cfg = _load_config()
    if settings.token():
        console.print(f"[green]Using TELEGRAM_BOT_TOKEN[/green] ({_mask(settings.token())})")
    elif cfg.get("token"):
        console.print(
            f"[green]Logged in[/green] as @{cfg.get('username') or 'unknown'} "
            f"(ID: {cfg.get('bot_id')}, token {_mask(cfg['token'])})"
        )
    else:
        console.print("[yellow]Not logged in. Run `tgbot auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear the saved token."""
    _save_config({})
    console.print("[green]Logged out.[/green]")
