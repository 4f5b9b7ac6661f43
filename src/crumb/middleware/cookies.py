"""Cookie middleware — parse ``Cookie`` on the way in, emit ``Set-Cookie`` on the way out.

Wraps any ASGI application.  For each HTTP request it stores a
``CookieMap`` and an empty ``SetCookieStore`` in ``scope["state"]``::

    async def app(scope, receive, send):
        cookies = scope["state"]["cookies"]
        scope["state"]["set_cookies"].set("seen", "1", CookieAttributes().with_path("/"))
        ...

    app = CookieMiddleware(app)

Entries added to the store are sent as separate ``set-cookie`` headers
when the response starts.  A missing or malformed ``Cookie`` header is
answered with the configured rejection and the app is not called.
"""

import logging

from crumb._internal.asgi import ASGIApp, Message, Receive, Scope, Send, scope_headers
from crumb.config import CookieConfig
from crumb.errors import CookieRejection
from crumb.extraction import extract_cookies
from crumb.http.set_cookie import SetCookieStore
from crumb.server.sender import send_error, with_set_cookies

logger = logging.getLogger("crumb.server")


class CookieMiddleware:
    """ASGI adapter for ``extract_cookies``.

    Usage::

        from crumb.middleware import CookieMiddleware

        app = CookieMiddleware(app)

    Or with custom config::

        app = CookieMiddleware(app, CookieConfig(require_cookie_header=False))
    """

    __slots__ = ("app", "config")

    def __init__(self, app: ASGIApp, config: CookieConfig | None = None) -> None:
        self.app = app
        self.config = config or CookieConfig()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            cookies = extract_cookies(scope_headers(scope), self.config)
        except CookieRejection as exc:
            logger.debug(
                "%d %s %s — %s", exc.status, scope.get("method", ""), scope.get("path", ""), exc.detail
            )
            await send_error(exc, send)
            return

        store = SetCookieStore()
        state = scope.setdefault("state", {})
        state[self.config.scope_key] = cookies
        state[self.config.set_cookie_key] = store

        async def send_with_cookies(message: Message) -> None:
            await send(with_set_cookies(message, store))

        await self.app(scope, receive, send_with_cookies)
