"""ASGI type aliases and scope helpers used by the middleware."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from crumb.http.headers import Headers

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


def scope_headers(scope: Scope) -> Headers:
    """Wrap the scope's raw header pairs without decoding them."""
    return Headers(tuple((bytes(name), bytes(value)) for name, value in scope.get("headers", ())))
