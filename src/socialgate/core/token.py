"""Authorization code -> access token exchange at the provider's token endpoint."""

from __future__ import annotations

import logging

from socialgate.config import ProviderCredentials
from socialgate.core.errors import MalformedResponse, ProviderRejected
from socialgate.core.http import HttpExchanger
from socialgate.core.profile import raise_for_error_payload

logger = logging.getLogger("socialgate.token")


class TokenExchanger:
    """Performs the ``grant_type=authorization_code`` POST.

    Args:
        http: Exchanger used for the round trip.
        token_key: JSON key holding the access token in the response.
        error_key: Top-level key whose presence marks an error payload.
    """

    def __init__(
        self,
        http: HttpExchanger,
        *,
        token_key: str = "access_token",
        error_key: str = "error",
    ) -> None:
        self._http = http
        self._token_key = token_key
        self._error_key = error_key

    async def exchange(self, code: str, credentials: ProviderCredentials) -> str:
        """Exchange ``code`` for an opaque access token.

        Extra response fields (``expires_in``, ``token_type``, ``refresh_token``)
        are ignored.

        Raises:
            TransportError: Network failure.
            ProviderRejected: Non-2xx status from the token endpoint.
            MalformedResponse: Body is not a JSON object or lacks the token key.
        """
        data = {
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "redirect_uri": credentials.redirect_uri,
            "grant_type": "authorization_code",
            "code": code,
        }
        response = await self._http.send(
            "POST",
            credentials.token_endpoint,
            headers={"Accept": "application/json"},
            data=data,
        )
        if not response.ok:
            logger.warning(
                "Token endpoint %s rejected code exchange with HTTP %d",
                credentials.token_endpoint,
                response.status,
            )
            raise ProviderRejected(
                f"Token endpoint returned HTTP {response.status}",
                status=response.status,
                body=response.body,
            )

        payload = response.json()
        if not isinstance(payload, dict):
            raise MalformedResponse("Token response is not a JSON object")

        token = payload.get(self._token_key)
        if token is None or token == "":
            # RFC 6749 section 5.2 error object, sometimes sent with HTTP 200
            raise_for_error_payload(payload, error_key=self._error_key)
        if token is None or token == "" or isinstance(token, (dict, list, bool)):
            logger.warning(
                "Token response from %s has no usable '%s'",
                credentials.token_endpoint,
                self._token_key,
            )
            raise MalformedResponse(
                f"No '{self._token_key}' in token response",
                field=self._token_key,
            )
        return str(token)
