"""
Telegram SDK CLI — `tgbot` command.

Commands:
  tgbot auth login|status|logout   Save, show or clear the bot token
  tgbot me                         Show the bot's own account (getMe)
  tgbot updates                    Fetch pending updates (getUpdates)
  tgbot commands set ...           Replace the command list (setMyCommands)
  tgbot decode FILE                Decode a saved JSON payload offline
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install telegram-sdk[cli]")

from pydantic import ValidationError

from telegram_sdk.client import AsyncTelegramBot
from telegram_sdk.log import configure_logging
from telegram_sdk.settings import Settings

console = Console()
CONFIG_FILE = Path.home() / ".telegram-sdk" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))
    CONFIG_FILE.chmod(0o600)


def _resolve_token(settings: Settings, cfg: dict) -> Optional[str]:
    """The environment wins over the saved config."""
    return settings.token() or cfg.get("token")


def _get_client() -> AsyncTelegramBot:
    settings = Settings()
    cfg = _load_config()
    token = _resolve_token(settings, cfg)
    if not token:
        console.print("[red]No bot token. Set TELEGRAM_BOT_TOKEN or run `tgbot auth login` first.[/red]")
        raise SystemExit(1)
    api_url = settings.api_url
    if "api_url" not in settings.model_fields_set:
        api_url = cfg.get("api_url", api_url)
    return AsyncTelegramBot(token, base_url=api_url, timeout=settings.timeout)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP traffic (token redacted)")
def main(verbose: bool):
    """Telegram SDK CLI — talk to the Bot API from the terminal."""
    try:
        level = logging.DEBUG if verbose else Settings().log_level
    except ValidationError as e:
        for err in e.errors():
            console.print(f"[red]Invalid configuration: {err['msg']}[/red]")
        raise SystemExit(1)
    configure_logging(level)


# Register subcommands from separate modules
from telegram_sdk.cli.auth import auth
from telegram_sdk.cli.bot import me_cmd, updates_cmd
from telegram_sdk.cli.commands import commands
from telegram_sdk.cli.decode import decode_cmd

main.add_command(auth)
main.add_command(me_cmd)
main.add_command(updates_cmd)
main.add_command(commands)
main.add_command(decode_cmd)


if __name__ == "__main__":
    main()
