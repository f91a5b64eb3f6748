"""Test fixtures for socialgate.

All tests are network-free — provider endpoints are served by an httpx
MockTransport that routes on the request path and records every call.
"""

from collections.abc import Callable

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]

AVATAR = "https://google.com/img/avatar.gif"
GOOGLE_TOKEN = "GoogleToken"


class FakeProvider:
    """Routes requests by path to handlers and keeps a log of what was sent."""

    def __init__(self, routes: dict[str, Handler]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"error": "not found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def calls(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


def json_route(payload, status_code: int = 200) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)
    return handler


def google_error_payload() -> dict:
    """Google's error body for a project without the API enabled."""
    return {
        "error": {
            "errors": [
                {
                    "domain": "usageLimits",
                    "reason": "accessNotConfigured",
                    "extendedHelp": "https://developers.google.com",
                },
            ],
        },
        "code": 400,
        "message": "Access Not Configured.",
    }


@pytest.fixture
def google_token_route() -> Handler:
    return json_route({"access_token": GOOGLE_TOKEN, "expires_in": 1, "token_type": "Bearer"})


@pytest.fixture
def google_profile() -> dict:
    return {"displayName": "octocat", "id": "1", "image": {"url": AVATAR}}
