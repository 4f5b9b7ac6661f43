"""Tests for crumb.http.headers — header name constants and the Headers collection."""

import pytest

from crumb.http.headers import COOKIE, SET_COOKIE, Headers, RepeatedHeaders


class TestHeaderNames:
    def test_constants(self) -> None:
        assert COOKIE == "Cookie"
        assert SET_COOKIE == "Set-Cookie"


class TestHeaders:
    def test_lookup_ignores_case(self) -> None:
        h = Headers.from_pairs([("Cookie", "a=1")])

        assert h["cookie"] == "a=1"
        assert h["COOKIE"] == "a=1"
        assert "CoOkIe" in h

    def test_first_value_wins_for_getitem(self) -> None:
        h = Headers.from_pairs([("Cookie", "a=1"), ("cookie", "b=2")])

        assert h["Cookie"] == "a=1"
        assert h.get("Cookie") == "a=1"

    def test_get_list_in_wire_order(self) -> None:
        h = Headers.from_pairs([("Set-Cookie", "a=1"), ("Accept", "*/*"), ("set-cookie", "b=2")])

        assert h.get_list(SET_COOKIE) == ["a=1", "b=2"]
        assert h.get_list("x-missing") == []

    def test_get_list_returns_copy(self) -> None:
        h = Headers.from_pairs([("Set-Cookie", "a=1")])
        h.get_list(SET_COOKIE).append("b=2")

        assert h.get_list(SET_COOKIE) == ["a=1"]

    def test_missing(self) -> None:
        h = Headers()

        with pytest.raises(KeyError):
            h[COOKIE]
        assert h.get(COOKIE) is None
        assert h.get(COOKIE, "fallback") == "fallback"
        assert 42 not in h  # type: ignore[operator]

    def test_keys_unique_and_lowercase(self) -> None:
        h = Headers.from_pairs([("Set-Cookie", "a=1"), ("Accept", "*/*"), ("SET-COOKIE", "b=2")])

        assert list(h) == ["set-cookie", "accept"]
        assert len(h) == 2

    def test_latin1_values(self) -> None:
        h = Headers(((b"cookie", "name=café".encode("latin-1")),))
        assert h[COOKIE] == "name=café"

    def test_raw_kept(self) -> None:
        raw = ((b"Cookie", b"a=1"),)
        assert Headers(raw).raw is raw

    def test_immutable(self) -> None:
        h = Headers()

        with pytest.raises(AttributeError):
            h._raw = ()  # type: ignore[misc]

    def test_satisfies_repeated_headers(self) -> None:
        assert isinstance(Headers(), RepeatedHeaders)

    def test_plain_dict_is_not_repeated_headers(self) -> None:
        assert not isinstance({"Set-Cookie": "a=1"}, RepeatedHeaders)

    def test_repr_shows_every_value(self) -> None:
        h = Headers.from_pairs([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])

        assert "a=1" in repr(h)
        assert "b=2" in repr(h)
