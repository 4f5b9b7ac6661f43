"""Tests for crumb.server.sender — rejection responses and Set-Cookie attachment."""

import pytest

from crumb.errors import CookieRejection, HTTPError
from crumb.http.attributes import CookieAttributes
from crumb.http.set_cookie import SetCookieStore
from crumb.server.sender import send_error, with_set_cookies


class TestSendError:
    @pytest.mark.anyio
    async def test_rejection_is_plain_text_500(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_error(CookieRejection(), send)

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 500
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/plain; charset=utf-8"
        assert headers[b"content-length"] == b"15"

        assert messages[1]["type"] == "http.response.body"
        assert messages[1]["body"] == b"CookieRejection"

    @pytest.mark.anyio
    async def test_extra_headers_lowercased(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_error(HTTPError(status=400, detail="no", headers=(("X-Reason", "cookie"),)), send)

        assert (b"x-reason", b"cookie") in messages[0]["headers"]
        assert messages[0]["status"] == 400


class TestWithSetCookies:
    def test_appends_one_header_per_entry(self) -> None:
        store = SetCookieStore().set("b", "2").set("a", "1", CookieAttributes(http_only=True))
        message = {"type": "http.response.start", "status": 200, "headers": [(b"content-type", b"text/plain")]}

        result = with_set_cookies(message, store)

        assert result["headers"] == [
            (b"content-type", b"text/plain"),
            (b"set-cookie", b"a=1;HttpOnly"),
            (b"set-cookie", b"b=2"),
        ]
        assert message["headers"] == [(b"content-type", b"text/plain")]

    def test_body_message_untouched(self) -> None:
        message = {"type": "http.response.body", "body": b"ok"}
        assert with_set_cookies(message, SetCookieStore().set("a", "1")) is message

    def test_empty_store_untouched(self) -> None:
        message = {"type": "http.response.start", "status": 200, "headers": []}
        assert with_set_cookies(message, SetCookieStore()) is message
