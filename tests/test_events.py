"""Tests for the login event hook registry."""

import logging

import pytest

from socialgate.events import HookRegistry, LoginFailed, LoginSucceeded

pytestmark = pytest.mark.asyncio


class TestHookRegistry:
    async def test_unknown_event_rejected(self):
        registry = HookRegistry()
        with pytest.raises(ValueError, match="Unknown event 'signup'"):
            registry.register("signup", lambda event: None)

    async def test_async_and_sync_hooks(self):
        registry = HookRegistry()
        received: list[tuple[str, str]] = []

        @registry.on("login")
        async def async_hook(event: LoginSucceeded) -> None:
            received.append(("async", event.urn))

        def sync_hook(event: LoginSucceeded) -> None:
            received.append(("sync", event.urn))

        registry.register("login", sync_hook)

        await registry.emit("login", LoginSucceeded(provider="google", urn="urn:google:1"))

        assert received == [("async", "urn:google:1"), ("sync", "urn:google:1")]

    async def test_hook_errors_are_logged_not_raised(self, caplog):
        registry = HookRegistry()
        after: list[str] = []

        async def broken(event):
            raise RuntimeError("boom")

        registry.register("login_failed", broken)
        registry.register("login_failed", lambda event: after.append(event.reason))

        with caplog.at_level(logging.ERROR, logger="socialgate.events"):
            await registry.emit("login_failed", LoginFailed(
                provider="google", reason="oauth_provider_error", message="nope",
            ))

        assert "Hook error in 'login_failed'" in caplog.text
        assert after == ["oauth_provider_error"]

    async def test_no_hooks(self):
        registry = HookRegistry()
        assert registry.get_hooks("login") == []
        await registry.emit("login", LoginSucceeded(provider="google", urn="urn:google:1"))

    async def test_events_are_timestamped(self):
        event = LoginFailed(provider="github", reason="oauth_missing_code")
        assert event.timestamp.tzinfo is not None
