"""OAuth provider base class — the login flow shared by every provider.

A concrete provider only declares its endpoints, where the access token goes
on the profile request, and the field table that turns its profile JSON into
an :class:`Identity`.
"""

from __future__ import annotations

import abc
import asyncio
import logging
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from socialgate.config import HttpConfig, ProviderCredentials
from socialgate.core.errors import MissingCode, TransportError
from socialgate.core.http import HttpExchanger
from socialgate.core.mapper import IdentityMapper
from socialgate.core.profile import ProfileFetcher, TokenPlacement
from socialgate.core.schemas import Identity
from socialgate.core.token import TokenExchanger

logger = logging.getLogger("socialgate.providers")


def extract_code(request: Any) -> str:
    """Pull the ``code`` query parameter out of an inbound request.

    Accepts a Starlette/FastAPI ``Request`` (anything with ``query_params``),
    a plain mapping of query parameters, or a raw URL / query string.

    Raises:
        MissingCode: If there is no non-empty ``code`` parameter.
    """
    if isinstance(request, str):
        query = urllib.parse.urlsplit(request).query if "?" in request else request
        params: Mapping[str, Any] = urllib.parse.parse_qs(query)
    elif hasattr(request, "query_params"):
        # Checked before Mapping: a Starlette Request is itself a Mapping over the ASGI scope
        params = request.query_params
    elif isinstance(request, Mapping):
        params = request
    else:
        raise TypeError(f"Cannot read query parameters from {type(request).__name__}")

    code = params.get("code")
    if isinstance(code, (list, tuple)):
        code = code[0] if code else None
    if not code:
        raise MissingCode()
    return str(code)


@dataclass(frozen=True)
class OAuthProvider(abc.ABC):
    """Abstract base for all OAuth providers.

    Subclasses must implement:
        name            — provider identifier, used as the URN namespace
        authorize_url   — provider's authorization endpoint
        token_url       — provider's token exchange endpoint
        profile_url     — provider's user profile endpoint
        mapper          — field table for the profile document

    Providers hold no mutable state: one instance serves any number of
    concurrent logins.
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    extra_scopes: tuple[str, ...] = ()
    http_config: HttpConfig = field(default_factory=HttpConfig)
    http_client: httpx.AsyncClient | None = field(default=None, repr=False, compare=False)
    _transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False, compare=False)

    REQUIRED_SCOPES: ClassVar[tuple[str, ...]] = ()
    TOKEN_PLACEMENT: ClassVar[TokenPlacement] = TokenPlacement.QUERY
    TOKEN_KEY: ClassVar[str] = "access_token"
    ERROR_KEY: ClassVar[str] = "error"
    PROFILE_PARAMS: ClassVar[Mapping[str, str]] = {}

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @property
    @abc.abstractmethod
    def authorize_url(self) -> str: ...

    @property
    @abc.abstractmethod
    def token_url(self) -> str: ...

    @property
    @abc.abstractmethod
    def profile_url(self) -> str: ...

    @property
    @abc.abstractmethod
    def mapper(self) -> IdentityMapper: ...

    @property
    def token_placement(self) -> TokenPlacement:
        return self.TOKEN_PLACEMENT

    @property
    def profile_params(self) -> Mapping[str, str]:
        return self.PROFILE_PARAMS

    @property
    def credentials(self) -> ProviderCredentials:
        return ProviderCredentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            token_endpoint=self.token_url,
            redirect_uri=self.redirect_uri,
        )

    @property
    def base_scopes(self) -> tuple[str, ...]:
        return self.REQUIRED_SCOPES

    @property
    def scopes(self) -> tuple[str, ...]:
        """Combined base + extra scopes (deduplicated, order-preserving)."""
        seen: set[str] = set()
        result: list[str] = []
        for s in self.base_scopes + self.extra_scopes:
            if s not in seen:
                seen.add(s)
                result.append(s)
        return tuple(result)

    def get_authorization_url(self, *, state: str | None = None) -> str:
        """Build the full authorization URL with query params."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
        }
        if self.scopes:
            params["scope"] = " ".join(self.scopes)
        if state:
            params["state"] = state
        return f"{self.authorize_url}?{urllib.parse.urlencode(params)}"

    def exit(self, identity: Identity | None = None, *, state: str | None = None) -> str:
        """Redirect target that starts a login at the provider.

        ``identity`` is accepted so every provider has the same enter/exit
        shape; the authorization URL does not depend on it.
        """
        return self.get_authorization_url(state=state)

    def _http(self) -> HttpExchanger:
        return HttpExchanger(
            self.http_config, client=self.http_client, _transport=self._transport,
        )

    async def enter(self, request: Any, *, timeout: float | None = None) -> Identity:
        """Complete the login: code -> access token -> profile -> Identity.

        Args:
            request: Inbound callback request carrying ``code`` (see
                :func:`extract_code` for accepted shapes).
            timeout: Deadline in seconds for both round trips combined.

        Raises:
            MissingCode: No code in the request; nothing was sent.
            TransportError: Network failure or ``timeout`` elapsed.
            ProviderRejected: Non-2xx status from either endpoint.
            MalformedResponse: Unparseable body or missing required field.
            ProviderError: The provider answered with an error object.
        """
        code = extract_code(request)
        try:
            async with asyncio.timeout(timeout):
                identity = await self._login(code)
        except TimeoutError as e:
            logger.warning("%s login did not finish within %ss", self.name, timeout)
            raise TransportError(
                f"{self.name} login timed out after {timeout}s",
            ) from e
        logger.debug("%s login succeeded for %s", self.name, identity.urn)
        return identity

    async def _login(self, code: str) -> Identity:
        http = self._http()
        exchanger = TokenExchanger(http, token_key=self.TOKEN_KEY, error_key=self.ERROR_KEY)
        token = await exchanger.exchange(code, self.credentials)
        fetcher = ProfileFetcher(
            http,
            placement=self.token_placement,
            extra_params=self.profile_params,
            error_key=self.ERROR_KEY,
        )
        document = await fetcher.fetch(token, self.profile_url)
        return self.mapper.map(document, self.name)
