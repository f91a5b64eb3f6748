"""socialgate event system — typed login events and a fail-open hook registry.

Register hooks to react to logins (audit logs, metrics, syncing external
systems). Hook errors are logged and never break the login flow.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Callable

logger = logging.getLogger("socialgate.events")


@dataclass(frozen=True, slots=True)
class Event:
    """Base event — all events carry a timestamp."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True, slots=True)
class LoginSucceeded(Event):
    """Fired when a provider login produced an Identity."""
    provider: str = ""
    urn: str = ""


@dataclass(frozen=True, slots=True)
class LoginFailed(Event):
    """Fired when a provider login failed at any step."""
    provider: str = ""
    reason: str = ""
    message: str = ""


EVENT_MAP: dict[str, type[Event]] = {
    "login": LoginSucceeded,
    "login_failed": LoginFailed,
}

HookCallback = Callable[..., Any]


class HookRegistry:
    """Registry for event hook callbacks. Supports multiple listeners per event."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[HookCallback]] = {}

    def register(self, event_name: str, callback: HookCallback) -> None:
        """Register a callback for an event name."""
        if event_name not in EVENT_MAP:
            raise ValueError(
                f"Unknown event '{event_name}'. "
                f"Valid events: {', '.join(sorted(EVENT_MAP))}"
            )
        self._hooks.setdefault(event_name, []).append(callback)

    def on(self, event_name: str) -> Callable[[HookCallback], HookCallback]:
        """Decorator form of :meth:`register`."""
        def decorator(callback: HookCallback) -> HookCallback:
            self.register(event_name, callback)
            return callback
        return decorator

    def get_hooks(self, event_name: str) -> list[HookCallback]:
        """Get all registered callbacks for an event name."""
        return self._hooks.get(event_name, [])

    async def emit(self, event_name: str, event: Event) -> None:
        """Fire all registered callbacks for an event. Fail-open: errors are logged."""
        for callback in self.get_hooks(event_name):
            try:
                if inspect.iscoroutinefunction(callback):
                    await callback(event)
                else:
                    loop = asyncio.get_running_loop()
                    await loop.run_in_executor(None, callback, event)
            except Exception:
                logger.exception(
                    "Hook error in '%s' handler %s.%s",
                    event_name,
                    callback.__module__,
                    callback.__qualname__,
                )
