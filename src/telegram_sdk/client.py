"""
TelegramBot / AsyncTelegramBot — Bot API clients.

- getMe: https://core.telegram.org/bots/api#getme
- getUpdates: https://core.telegram.org/bots/api#getupdates
- setMyCommands: https://core.telegram.org/bots/api#setmycommands
"""

import asyncio
import logging
from typing import Any, Optional, Sequence

import httpx

from telegram_sdk.models.base import encode
from telegram_sdk.models.bot_command import SetMyCommandsParams
from telegram_sdk.models.update import Update
from telegram_sdk.models.user import User
from telegram_sdk.settings import Settings, get_settings
from telegram_sdk.transport.envelope import read_result
from telegram_sdk.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HttpClient

logger = logging.getLogger(__name__)


class AsyncTelegramBot:
    """Async Bot API client (primary)."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self.http = HttpClient(token, base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "AsyncTelegramBot":
        settings = settings or get_settings()
        token = settings.token()
        if not token:
            raise ValueError("TELEGRAM_BOT_TOKEN is not set")
        return cls(token, base_url=settings.api_url, timeout=settings.timeout, **kwargs)

    async def get_me(self) -> User:
        """The bot's own account."""
        raw = await self.http.call("getMe")
        return read_result(raw, User)

    async def get_updates(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        timeout: Optional[int] = None,
        allowed_updates: Optional[Sequence[str]] = None,
    ) -> list[Update]:
        """Pending updates, oldest first.

        Without arguments this is a plain GET, exactly as Telegram's own
        examples call it. ``timeout`` enables long polling; the HTTP timeout
        is extended to cover it.
        """
        body: dict[str, Any] = {}
        if offset is not None:
            body["offset"] = offset
        if limit is not None:
            body["limit"] = limit
        if timeout is not None:
            body["timeout"] = timeout
        if allowed_updates is not None:
            body["allowed_updates"] = list(allowed_updates)
        http_timeout = self._timeout + timeout if timeout else None
        raw = await self.http.call("getUpdates", body or None, timeout=http_timeout)
        updates = read_result(raw, list[Update])
        logger.debug("getUpdates returned %d update(s)", len(updates))
        return updates

    async def set_my_commands(self, params: SetMyCommandsParams) -> None:
        """Replace the bot's command list for the given scope and language."""
        raw = await self.http.call("setMyCommands", encode(params))
        read_result(raw, bool, is_success=lambda r: r.result is True)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncTelegramBot":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class TelegramBot:
    """Sync wrapper around AsyncTelegramBot. Runs the event loop internally."""

    def __init__(self, token: str, **kwargs: Any):
        self._async = AsyncTelegramBot(token, **kwargs)
        self._loop = asyncio.new_event_loop()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "TelegramBot":
        settings = settings or get_settings()
        token = settings.token()
        if not token:
            raise ValueError("TELEGRAM_BOT_TOKEN is not set")
        return cls(token, base_url=settings.api_url, timeout=settings.timeout, **kwargs)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    def get_me(self) -> User:
        return self._run(self._async.get_me())

    def get_updates(self, **kwargs: Any) -> list[Update]:
        return self._run(self._async.get_updates(**kwargs))

    def set_my_commands(self, params: SetMyCommandsParams) -> None:
        self._run(self._async.set_my_commands(params))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "TelegramBot":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
