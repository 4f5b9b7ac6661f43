"""ASGI response sending for the cookie middleware.

Turns a ``HTTPError`` into a plain-text ASGI response and folds a
``SetCookieStore`` into outgoing ``http.response.start`` headers.
"""

import logging

from crumb._internal.asgi import Message, Send
from crumb.errors import HTTPError
from crumb.http.set_cookie import SetCookieStore

logger = logging.getLogger("crumb.server")


async def send_error(exc: HTTPError, send: Send) -> None:
    """Send *exc* as a complete ``text/plain`` response."""
    body = exc.detail.encode("utf-8")
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", b"text/plain; charset=utf-8"),
    ]
    for name, value in exc.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": exc.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )


def with_set_cookies(message: Message, store: SetCookieStore) -> Message:
    """Append one ``set-cookie`` header per entry of *store* to a start message.

    Other message types are returned unchanged.
    """
    if message["type"] != "http.response.start" or store.is_empty():
        return message
    headers = list(message.get("headers", ()))
    headers.extend(store.raw_headers())
    logger.debug("Attaching %d Set-Cookie header(s)", len(store))
    return {**message, "headers": headers}
