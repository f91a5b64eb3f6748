"""Google OAuth 2.0 provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from socialgate.core.mapper import IdentityMapper, display_fields
from socialgate.core.profile import TokenPlacement
from socialgate.providers.base import OAuthProvider

_MAPPER = IdentityMapper(id_path="id", fields=display_fields("displayName", "image.url"))


@dataclass(frozen=True)
class GoogleProvider(OAuthProvider):
    """Google OAuth provider.

    Reads the profile from the ``people/me`` resource, sending the token as
    the ``access_token`` query parameter. ``auth_base`` and ``api_base``
    point the provider at other hosts (proxies, test servers).
    """

    auth_base: str = "https://accounts.google.com"
    api_base: str = "https://www.googleapis.com"

    REQUIRED_SCOPES: ClassVar[tuple[str, ...]] = ("profile",)
    TOKEN_PLACEMENT: ClassVar[TokenPlacement] = TokenPlacement.QUERY

    @property
    def name(self) -> str:
        return "google"

    @property
    def authorize_url(self) -> str:
        return f"{self.auth_base.rstrip('/')}/o/oauth2/auth"

    @property
    def token_url(self) -> str:
        return f"{self.auth_base.rstrip('/')}/o/oauth2/token"

    @property
    def profile_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/plus/v1/people/me"

    @property
    def mapper(self) -> IdentityMapper:
        return _MAPPER
