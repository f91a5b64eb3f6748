"""FastAPI login router — factory that creates authorize/callback endpoints per provider."""

import inspect
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import RedirectResponse

from socialgate.core.errors import LoginError
from socialgate.core.schemas import Identity
from socialgate.events import HookRegistry, LoginFailed, LoginSucceeded
from socialgate.providers.base import OAuthProvider

OnLogin = Callable[[Identity, Request], Any]


def login_error_detail(e: LoginError) -> dict:
    """Build HTTPException detail dict from a LoginError."""
    detail = {"error": e.code, "message": e.message}
    if e.extra:
        detail.update({k: v for k, v in e.extra.items() if v is not None})
    return detail


def create_login_router(
    providers: list[OAuthProvider],
    *,
    hooks: HookRegistry | None = None,
    on_login: OnLogin | None = None,
    timeout: float | None = None,
) -> APIRouter:
    """Create a FastAPI router with OAuth authorize/callback endpoints for each provider.

    Registers:
        GET /oauth/{provider_name}/authorize
        GET /oauth/{provider_name}/callback

    The callback returns whatever ``on_login(identity, request)`` returns
    (sync or async), or the Identity itself when no callback is given.
    Storing the identity in a session is left to ``on_login``.
    """
    router = APIRouter(tags=["oauth"])
    provider_map: dict[str, OAuthProvider] = {p.name: p for p in providers}

    def _get_provider(provider_name: str) -> OAuthProvider:
        provider = provider_map.get(provider_name)
        if provider is None:
            raise HTTPException(
                status_code=404,
                detail={"error": "unknown_provider", "message": f"Provider '{provider_name}' is not configured"},
            )
        return provider

    async def _fire_login_failed(provider_name: str, reason: str, message: str) -> None:
        if hooks is not None:
            await hooks.emit("login_failed", LoginFailed(
                provider=provider_name, reason=reason, message=message,
            ))

    @router.get("/oauth/{provider_name}/authorize")
    async def oauth_authorize(provider_name: str, state: str | None = None):
        """Initiate OAuth flow — redirect to provider's consent screen."""
        provider = _get_provider(provider_name)
        return RedirectResponse(url=provider.exit(state=state), status_code=302)

    @router.get("/oauth/{provider_name}/callback")
    async def oauth_callback(
        provider_name: str,
        request: Request,
        error: str | None = None,
        error_description: str | None = None,
    ):
        """OAuth callback — exchanges the code and returns the login result."""
        provider = _get_provider(provider_name)

        if error:
            message = error_description or error
            await _fire_login_failed(provider_name, "oauth_provider_error", message)
            raise HTTPException(
                status_code=400,
                detail={"error": "oauth_provider_error", "message": message, "reason": error},
            )

        try:
            identity = await provider.enter(request, timeout=timeout)
        except LoginError as e:
            await _fire_login_failed(provider_name, e.code, e.message)
            raise HTTPException(status_code=e.status_code, detail=login_error_detail(e))

        if hooks is not None:
            await hooks.emit("login", LoginSucceeded(provider=provider_name, urn=identity.urn))

        if on_login is None:
            return identity
        result = on_login(identity, request)
        if inspect.isawaitable(result):
            result = await result
        return result

    return router
