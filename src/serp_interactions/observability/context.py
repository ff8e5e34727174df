"""Context propagation for log correlation across async boundaries."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


# Carries the vote request id from the click into its completion task
request_context: ContextVar[dict | None] = ContextVar("request_context", default=None)


def generate_request_id() -> str:
    """Generate a 32-char hex request ID."""
    return uuid4().hex


def get_request_context() -> dict:
    """Get the current request context, empty when none is set."""
    return request_context.get() or {}


def set_request_context(request_id: str, **extra: object) -> None:
    """Set request context for the current async context."""
    request_context.set({"request_id": request_id, **extra})


def clear_request_context() -> None:
    request_context.set(None)
