"""socialgate — OAuth2 authorization-code login with normalized identities."""

__version__ = "0.1.0"

from socialgate.config import HttpConfig, ProviderCredentials
from socialgate.core.document import ProfileDocument
from socialgate.core.errors import (
    LoginError,
    MalformedResponse,
    MissingCode,
    ProviderError,
    ProviderRejected,
    TransportError,
)
from socialgate.core.mapper import FieldRule, IdentityMapper
from socialgate.core.profile import TokenPlacement
from socialgate.core.schemas import Identity
from socialgate.events import HookRegistry, LoginFailed, LoginSucceeded
from socialgate.providers.base import OAuthProvider
from socialgate.providers.facebook import FacebookProvider
from socialgate.providers.generic import GenericOAuthProvider
from socialgate.providers.github import GitHubProvider
from socialgate.providers.google import GoogleProvider

__all__ = [
    "FacebookProvider",
    "FieldRule",
    "GenericOAuthProvider",
    "GitHubProvider",
    "GoogleProvider",
    "HookRegistry",
    "HttpConfig",
    "Identity",
    "IdentityMapper",
    "LoginError",
    "LoginFailed",
    "LoginSucceeded",
    "MalformedResponse",
    "MissingCode",
    "OAuthProvider",
    "ProfileDocument",
    "ProviderCredentials",
    "ProviderError",
    "ProviderRejected",
    "TokenPlacement",
    "TransportError",
]
