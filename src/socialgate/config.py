"""socialgate configuration — dataclasses for provider credentials and HTTP settings."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProviderCredentials:
    """Client registration at one OAuth provider.

    Immutable and safe to share between concurrent logins.
    """

    client_id: str
    client_secret: str
    token_endpoint: str
    redirect_uri: str

    def __repr__(self) -> str:
        return (
            f"ProviderCredentials(client_id={self.client_id!r}, client_secret='***', "
            f"token_endpoint={self.token_endpoint!r}, redirect_uri={self.redirect_uri!r})"
        )


@dataclass(frozen=True, slots=True)
class HttpConfig:
    """Outbound HTTP settings shared by the token and profile round trips.

    Example:
        HttpConfig()                     # 10 second timeout per request
        HttpConfig(timeout=3.0)          # Tighter per-request timeout
    """

    timeout: float = 10.0
    user_agent: str = "socialgate"

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"HTTP timeout must be positive, got {self.timeout!r}")
