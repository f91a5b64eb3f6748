"""Login errors — one exception class per way an OAuth login can fail.

Every error carries a stable machine ``code`` and a suggested HTTP
``status_code`` so that integration adapters can translate it without
inspecting the class.
"""

from __future__ import annotations

_BODY_PREVIEW_LIMIT = 512


class LoginError(Exception):
    """Base login error with an error code and HTTP status."""

    code = "oauth_login_failed"
    status_code = 400

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        **extra,
    ):
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra
        super().__init__(message)


class MissingCode(LoginError):
    """The inbound request has no authorization code."""

    code = "oauth_missing_code"
    status_code = 400

    def __init__(self, message: str = "Missing authorization code in request"):
        super().__init__(message)


class TransportError(LoginError):
    """Connection failure, timeout, or broken HTTP framing."""

    code = "oauth_transport_error"
    status_code = 502

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message, url=url)
        self.url = url


class ProviderRejected(LoginError):
    """The token or profile endpoint answered with a non-success status."""

    code = "oauth_provider_rejected"
    status_code = 502

    def __init__(self, message: str, *, status: int, body: bytes = b""):
        preview = body[:_BODY_PREVIEW_LIMIT].decode("utf-8", errors="replace")
        super().__init__(message, status=status, body=preview)
        self.status = status
        self.body = body


class MalformedResponse(LoginError):
    """The response is not JSON, or a required field is absent."""

    code = "oauth_malformed_response"
    status_code = 502

    def __init__(self, message: str, *, field: str | None = None):
        if field is None:
            super().__init__(message)
        else:
            super().__init__(message, field=field)
        self.field = field


class ProviderError(LoginError):
    """The provider returned a well-formed error object instead of a profile."""

    code = "oauth_provider_error"
    status_code = 400

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        provider_code: int | None = None,
    ):
        super().__init__(message, reason=reason, provider_code=provider_code)
        self.reason = reason
        self.provider_code = provider_code
