"""Profile fetch — authenticated GET against the provider's resource API.

Providers are free to answer HTTP 200 with an error object instead of a
profile, e.g. Google's::

    {"error": {"errors": [{"domain": "usageLimits", "reason": "accessNotConfigured"}]},
     "code": 400, "message": "Access Not Configured."}

so every parsed document goes through :func:`raise_for_error_payload` before
anyone reads profile fields from it.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import Any

from socialgate.core.document import ProfileDocument
from socialgate.core.errors import MalformedResponse, ProviderError, ProviderRejected
from socialgate.core.http import HttpExchanger

logger = logging.getLogger("socialgate.profile")


class TokenPlacement(enum.Enum):
    """Where the access token goes on the profile request."""

    QUERY = "query"
    HEADER = "header"


def _first_nested_error(error: Mapping[str, Any]) -> Mapping[str, Any] | None:
    nested = error.get("errors")
    if isinstance(nested, (list, tuple)) and nested and isinstance(nested[0], Mapping):
        return nested[0]
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def raise_for_error_payload(payload: Mapping[str, Any], *, error_key: str = "error") -> None:
    """Raise :class:`ProviderError` if ``payload`` is a provider error object.

    The error indicator is a present, non-empty top-level ``error_key``. Its
    value may be a string (RFC 6749 style, with ``error_description``) or an
    object (Google/Facebook style, with ``message`` and nested ``errors``).
    """
    error = payload.get(error_key)
    if error is None or error == "" or error == {} or error is False:
        return

    message: str | None = None
    reason: str | None = None
    provider_code: int | None = None

    if isinstance(error, Mapping):
        nested = _first_nested_error(error)
        message = error.get("message") or payload.get("message") or payload.get("error_description")
        if not message and nested is not None:
            message = nested.get("message")
        if nested is not None and nested.get("reason"):
            reason = str(nested["reason"])
        else:
            reason = error.get("status") or error.get("type")
        provider_code = _as_int(error.get("code"))
    else:
        message = payload.get("error_description") or payload.get("message") or str(error)
        reason = str(error)

    if provider_code is None:
        provider_code = _as_int(payload.get("code"))

    raise ProviderError(
        str(message) if message else "Provider returned an error response",
        reason=str(reason) if reason else None,
        provider_code=provider_code,
    )


class ProfileFetcher:
    """Fetches and validates the authenticated user's profile document.

    Args:
        http: Exchanger used for the round trip.
        placement: Send the token as ``?access_token=`` or as a bearer header.
        extra_params: Static query parameters added to every profile request.
        error_key: Top-level key whose presence marks an error payload.
    """

    def __init__(
        self,
        http: HttpExchanger,
        *,
        placement: TokenPlacement = TokenPlacement.QUERY,
        extra_params: Mapping[str, str] | None = None,
        error_key: str = "error",
    ) -> None:
        self._http = http
        self._placement = placement
        self._extra_params = dict(extra_params or {})
        self._error_key = error_key

    async def fetch(self, token: str, profile_endpoint: str) -> ProfileDocument:
        """GET the profile with ``token`` attached.

        Raises:
            TransportError: Network failure.
            ProviderRejected: Non-2xx status.
            MalformedResponse: Body is not a JSON object.
            ProviderError: Body is a provider error object.
        """
        params = dict(self._extra_params)
        headers = {"Accept": "application/json"}
        if self._placement is TokenPlacement.QUERY:
            params["access_token"] = token
        else:
            headers["Authorization"] = f"Bearer {token}"

        response = await self._http.send(
            "GET", profile_endpoint, headers=headers, params=params or None,
        )
        if not response.ok:
            logger.warning(
                "Profile endpoint %s answered HTTP %d", profile_endpoint, response.status,
            )
            raise ProviderRejected(
                f"Profile endpoint returned HTTP {response.status}",
                status=response.status,
                body=response.body,
            )

        payload = response.json()
        if not isinstance(payload, dict):
            raise MalformedResponse("Profile response is not a JSON object")

        try:
            raise_for_error_payload(payload, error_key=self._error_key)
        except ProviderError as e:
            logger.warning(
                "Profile endpoint %s returned an error payload: %s (reason=%s)",
                profile_endpoint, e.message, e.reason,
            )
            raise

        return ProfileDocument(payload)
