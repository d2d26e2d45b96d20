"""Trello REST API communication over HTTPS (httpx)."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from trello_mcp.validation.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT, Credentials

logger = logging.getLogger(__name__)


class TrelloError(Exception):
    """Base class for failures talking to the Trello API."""


class TrelloAPIError(TrelloError):
    """Raised when Trello answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Trello API error: {status_code} {reason} - {body}")


class MalformedResponseError(TrelloError):
    """Raised when a 2xx response body is not valid JSON."""


class TrelloTransportError(TrelloError):
    """Raised when the request never got an HTTP response."""


class TrelloClient:
    """
    Authenticated Trello client.

    The API key and token are appended to every URL as query parameters;
    they are never sent in headers or the body. One logical request in,
    one parsed result or one error out: no retries, no caching.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._credentials = credentials
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TrelloClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ── Requests ──────────────────────────────────────────────────────────

    def _add_auth(self, url: str) -> str:
        separator = "&" if "?" in url else "?"
        auth = urlencode({"key": self._credentials.api_key, "token": self._credentials.token})
        return f"{url}{separator}{auth}"

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send one request to ``endpoint`` (relative to the API base) and return parsed JSON."""
        url = self._add_auth(f"{self.base_url}{endpoint}")
        merged_headers = {"Content-Type": "application/json", **(headers or {})}
        content = json.dumps(data).encode("utf-8") if data is not None else None

        logger.debug("%s %s", method, endpoint)
        try:
            response = await self._http.request(method, url, headers=merged_headers, content=content)
        except httpx.HTTPError as exc:
            raise TrelloTransportError(f"Trello request failed: {method} {endpoint}: {exc}") from exc

        if not response.is_success:
            raise TrelloAPIError(response.status_code, response.reason_phrase, response.text)

        text = response.text
        if not text:
            return {"success": True}

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                f"Malformed JSON from Trello for {method} {endpoint}: {exc}"
            ) from exc

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self.request("POST", endpoint, data=data)

    async def put(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self.request("PUT", endpoint, data=data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)
