"""
HTTP transport for the Bot API — https://core.telegram.org/bots/api#making-requests

Requests go to ``<base_url>/bot<token>/<method>``. The token is part of every
URL, so anything logged here passes through ``redact`` first.
"""

import logging
from typing import Any, Optional

import httpx

from telegram_sdk.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT = 30.0
REDACTED = "<token>"


class HttpClient:
    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not token:
            raise ValueError("A bot token is required")
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/bot{token}/",
            headers={"User-Agent": "telegram-sdk/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def redact(self, text: str) -> str:
        return text.replace(self._token, REDACTED)

    async def call(
        self,
        method: str,
        body: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        """Call ``method`` and return the decoded JSON envelope.

        Without a body the call is a GET; with one it is a JSON POST. HTTP error
        statuses are not raised here: Telegram reports failures inside the
        envelope, which the caller unwraps. ``timeout`` overrides the client
        timeout for this call only.
        """
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        try:
            if body is None:
                logger.debug("GET %s", method)
                resp = await self._client.get(method, **extra)
            else:
                logger.debug("POST %s %s", method, body)
                resp = await self._client.post(method, json=body, **extra)
        except httpx.HTTPError as e:
            reason = self.redact(str(e)) or type(e).__name__
            logger.warning("%s failed: %s", method, reason)
            raise TransportError(f"{method}: {reason}") from e

        logger.debug("%s -> HTTP %d: %s", method, resp.status_code, self.redact(resp.text[:500]))
        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("%s answered HTTP %d with a non-JSON body", method, resp.status_code)
            raise TransportError(
                f"{method}: HTTP {resp.status_code} with a non-JSON body: {self.redact(resp.text[:200])}"
            ) from e
        if not isinstance(data, dict):
            raise TransportError(f"{method}: expected a JSON object, got {type(data).__name__}")
        if resp.status_code >= 400:
            logger.warning("%s answered HTTP %d: %s", method, resp.status_code, data.get("description"))
        return data

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
