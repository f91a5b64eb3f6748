"""Generic OAuth 2.0 provider — bring-your-own-provider support."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx

from socialgate.config import HttpConfig
from socialgate.core.document import Path
from socialgate.core.mapper import FieldRule, IdentityMapper, display_fields
from socialgate.core.profile import TokenPlacement
from socialgate.providers.base import OAuthProvider


@dataclass(frozen=True)
class GenericOAuthProvider(OAuthProvider):
    """Generic OAuth 2.0 provider — supply your own endpoints and field table.

    Without ``fields`` the common table is used: ``name`` from ``name_path``
    (defaulting to ``"unknown"``) and ``picture`` from ``picture_path``.

    Example::

        provider = GenericOAuthProvider(
            "gitlab",
            client_id="...",
            client_secret="...",
            redirect_uri="https://app.example.com/oauth/gitlab/callback",
            authorize_url="https://gitlab.com/oauth/authorize",
            token_url="https://gitlab.com/oauth/token",
            profile_url="https://gitlab.com/api/v4/user",
            placement=TokenPlacement.HEADER,
            picture_path="avatar_url",
            scopes=("read_user",),
        )
    """

    # Declared with defaults to satisfy dataclass field ordering; set via
    # __init__ with object.__setattr__ because the dataclass is frozen.
    _name: str = field(default="", repr=False, compare=False)
    _authorize_url: str = field(default="", repr=False, compare=False)
    _token_url: str = field(default="", repr=False, compare=False)
    _profile_url: str = field(default="", compare=False)
    _mapper: IdentityMapper = field(default_factory=IdentityMapper, repr=False, compare=False)
    placement: TokenPlacement = field(default=TokenPlacement.HEADER, compare=False)
    extra_params: Mapping[str, str] = field(default_factory=dict, compare=False)
    scopes_list: tuple[str, ...] = field(default=(), compare=False)

    def __init__(
        self,
        name: str,
        *,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        authorize_url: str,
        token_url: str,
        profile_url: str,
        placement: TokenPlacement = TokenPlacement.HEADER,
        profile_params: Mapping[str, str] | None = None,
        id_path: Path = "id",
        name_path: Path = "name",
        picture_path: Path = "picture",
        fields: tuple[FieldRule, ...] | list[FieldRule] | None = None,
        scopes: tuple[str, ...] | list[str] = (),
        extra_scopes: tuple[str, ...] | list[str] = (),
        http_config: HttpConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not name or ":" in name:
            raise ValueError(f"Provider name must be non-empty and contain no ':', got {name!r}")
        table = tuple(fields) if fields is not None else display_fields(name_path, picture_path)

        object.__setattr__(self, "client_id", client_id)
        object.__setattr__(self, "client_secret", client_secret)
        object.__setattr__(self, "redirect_uri", redirect_uri)
        object.__setattr__(self, "extra_scopes", tuple(extra_scopes))
        object.__setattr__(self, "http_config", http_config or HttpConfig())
        object.__setattr__(self, "http_client", http_client)
        object.__setattr__(self, "_transport", _transport)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_authorize_url", authorize_url)
        object.__setattr__(self, "_token_url", token_url)
        object.__setattr__(self, "_profile_url", profile_url)
        object.__setattr__(self, "_mapper", IdentityMapper(id_path=id_path, fields=table))
        object.__setattr__(self, "placement", placement)
        object.__setattr__(self, "extra_params", MappingProxyType(dict(profile_params or {})))
        object.__setattr__(self, "scopes_list", tuple(scopes))

    @property
    def name(self) -> str:
        return self._name

    @property
    def authorize_url(self) -> str:
        return self._authorize_url

    @property
    def token_url(self) -> str:
        return self._token_url

    @property
    def profile_url(self) -> str:
        return self._profile_url

    @property
    def mapper(self) -> IdentityMapper:
        return self._mapper

    @property
    def token_placement(self) -> TokenPlacement:
        return self.placement

    @property
    def profile_params(self) -> Mapping[str, str]:
        return self.extra_params

    @property
    def base_scopes(self) -> tuple[str, ...]:
        return self.scopes_list
