"""socialgate OAuth providers."""

from socialgate.providers.base import OAuthProvider, extract_code
from socialgate.providers.facebook import FacebookProvider
from socialgate.providers.generic import GenericOAuthProvider
from socialgate.providers.github import GitHubProvider
from socialgate.providers.google import GoogleProvider

__all__ = [
    "OAuthProvider",
    "FacebookProvider",
    "GenericOAuthProvider",
    "GitHubProvider",
    "GoogleProvider",
    "extract_code",
]
