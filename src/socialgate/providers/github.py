"""GitHub OAuth 2.0 provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from socialgate.core.mapper import FieldRule, IdentityMapper, display_fields
from socialgate.core.profile import TokenPlacement
from socialgate.providers.base import OAuthProvider

_MAPPER = IdentityMapper(
    id_path="id",
    fields=display_fields("login", "avatar_url", FieldRule("email", "email")),
)


@dataclass(frozen=True)
class GitHubProvider(OAuthProvider):
    """GitHub OAuth provider.

    GitHub wants the token as a bearer header and the profile's numeric
    ``id`` becomes the URN. Required scope: read:user.
    """

    web_base: str = "https://github.com"
    api_base: str = "https://api.github.com"

    REQUIRED_SCOPES: ClassVar[tuple[str, ...]] = ("read:user",)
    TOKEN_PLACEMENT: ClassVar[TokenPlacement] = TokenPlacement.HEADER

    @property
    def name(self) -> str:
        return "github"

    @property
    def authorize_url(self) -> str:
        return f"{self.web_base.rstrip('/')}/login/oauth/authorize"

    @property
    def token_url(self) -> str:
        return f"{self.web_base.rstrip('/')}/login/oauth/access_token"

    @property
    def profile_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/user"

    @property
    def mapper(self) -> IdentityMapper:
        return _MAPPER
