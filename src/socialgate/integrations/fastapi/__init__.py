"""FastAPI integration for socialgate."""

from socialgate.integrations.fastapi.router import create_login_router, login_error_detail

__all__ = ["create_login_router", "login_error_detail"]
