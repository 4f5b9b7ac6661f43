"""Middleware — ASGI adapters over the cookie parsers.

Built-in middleware:
    CookieMiddleware -- Parse Cookie into scope state, emit queued Set-Cookie lines
"""

from crumb.middleware.cookies import CookieMiddleware

__all__ = [
    "CookieMiddleware",
]
