"""Outbound HTTP — a single request/response round trip over httpx.

The exchanger never retries and never interprets status codes; it only
turns httpx failures into :class:`TransportError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from socialgate.config import HttpConfig
from socialgate.core.errors import MalformedResponse, TransportError

logger = logging.getLogger("socialgate.http")


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status, headers and raw body of one HTTP response."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            MalformedResponse: If the body is empty or not valid JSON.
        """
        if not self.body.strip():
            raise MalformedResponse("Empty response body, expected JSON")
        try:
            return json.loads(self.body)
        except (ValueError, RecursionError) as e:
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e


class HttpExchanger:
    """Sends one HTTP request per call.

    Args:
        config: Timeout and User-Agent settings.
        client: Shared ``httpx.AsyncClient`` to reuse (its pool must outlive
            the exchanger). When omitted, each call opens and closes its own
            client.
        _transport: httpx transport for tests (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: HttpConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpConfig()
        self._client = client
        self._transport = _transport

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Perform the request and return the response triple.

        Raises:
            TransportError: On connection failure, timeout, or protocol error.
        """
        request_headers = {"User-Agent": self._config.user_agent}
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, headers=request_headers, data=data, params=params,
                    timeout=self._config.timeout,
                )
            else:
                kwargs: dict = {"timeout": self._config.timeout}
                if self._transport is not None:
                    kwargs["transport"] = self._transport
                async with httpx.AsyncClient(**kwargs) as client:
                    response = await client.request(
                        method, url, headers=request_headers, data=data, params=params,
                    )
        except httpx.TimeoutException as e:
            raise TransportError(f"Timed out calling {url}: {e}", url=url) from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP request to {url} failed: {e}", url=url) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return HttpResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
