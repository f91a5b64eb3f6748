"""Framework-agnostic login core: HTTP exchange, token exchange, profile fetch, mapping."""

from socialgate.core.document import ProfileDocument
from socialgate.core.errors import (
    LoginError,
    MalformedResponse,
    MissingCode,
    ProviderError,
    ProviderRejected,
    TransportError,
)
from socialgate.core.http import HttpExchanger, HttpResponse
from socialgate.core.mapper import FieldRule, IdentityMapper
from socialgate.core.profile import ProfileFetcher, TokenPlacement
from socialgate.core.schemas import Identity
from socialgate.core.token import TokenExchanger

__all__ = [
    "FieldRule",
    "HttpExchanger",
    "HttpResponse",
    "Identity",
    "IdentityMapper",
    "LoginError",
    "MalformedResponse",
    "MissingCode",
    "ProfileDocument",
    "ProfileFetcher",
    "ProviderError",
    "ProviderRejected",
    "TokenExchanger",
    "TokenPlacement",
    "TransportError",
]
