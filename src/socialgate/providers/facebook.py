"""Facebook OAuth 2.0 provider."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from socialgate.core.mapper import IdentityMapper, display_fields
from socialgate.core.profile import TokenPlacement
from socialgate.providers.base import OAuthProvider

_MAPPER = IdentityMapper(id_path="id", fields=display_fields("name", "picture.data.url"))


@dataclass(frozen=True)
class FacebookProvider(OAuthProvider):
    """Facebook OAuth provider (Graph API)."""

    web_base: str = "https://www.facebook.com"
    graph_base: str = "https://graph.facebook.com"

    REQUIRED_SCOPES: ClassVar[tuple[str, ...]] = ("public_profile",)
    TOKEN_PLACEMENT: ClassVar[TokenPlacement] = TokenPlacement.QUERY
    PROFILE_PARAMS: ClassVar[Mapping[str, str]] = {"fields": "id,name,picture"}

    @property
    def name(self) -> str:
        return "facebook"

    @property
    def authorize_url(self) -> str:
        return f"{self.web_base.rstrip('/')}/dialog/oauth"

    @property
    def token_url(self) -> str:
        return f"{self.graph_base.rstrip('/')}/oauth/access_token"

    @property
    def profile_url(self) -> str:
        return f"{self.graph_base.rstrip('/')}/me"

    @property
    def mapper(self) -> IdentityMapper:
        return _MAPPER
