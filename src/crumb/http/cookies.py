"""Request-side cookies: a flat name → value map.

Reads either the ``Cookie`` request header or the name/value part of
``Set-Cookie`` response headers, and writes back a single
``;``-joined ``Cookie`` value.

Both read paths are all-or-nothing: one segment without ``=`` raises
``MalformedHeader`` and no partial map is returned.  Compare
``SetCookieStore.parse``, which skips bad lines.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping

from crumb.errors import MalformedHeader, MissingHeader
from crumb.http.headers import COOKIE, SET_COOKIE, RepeatedHeaders

logger = logging.getLogger("crumb.http")


class CookieMap(MutableMapping[str, str]):
    """Cookie name → value.  Later duplicates overwrite earlier ones."""

    __slots__ = ("_inner",)

    def __init__(self, cookies: Mapping[str, str] | None = None) -> None:
        self._inner: dict[str, str] = dict(cookies) if cookies else {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "CookieMap":
        cookie_map = cls()
        for key, value in pairs:
            cookie_map._inner[key] = value
        return cookie_map

    @classmethod
    def from_headers(cls, header_name: str, headers: Mapping[str, str]) -> "CookieMap":
        """Parse the ``Cookie`` or all ``Set-Cookie`` values of *headers*.

        Raises:
            MissingHeader: *header_name* is ``Cookie`` and it is absent.
            MalformedHeader: a segment has no ``=``.
            ValueError: *header_name* is neither ``Cookie`` nor ``Set-Cookie``.
        """
        name = header_name.lower()
        if name == COOKIE.lower():
            raw = headers.get(COOKIE)
            if raw is None:
                raise MissingHeader(COOKIE)
            return parse_request_cookie(raw)

        if name == SET_COOKIE.lower():
            if isinstance(headers, RepeatedHeaders):
                raws = headers.get_list(SET_COOKIE)
            else:
                raw = headers.get(SET_COOKIE)
                raws = [raw] if raw is not None else []
            return parse_response_cookies(raws)

        msg = f"expected {COOKIE} or {SET_COOKIE}, got {header_name!r}"
        raise ValueError(msg)

    # -- Mapping protocol --

    def __getitem__(self, key: str) -> str:
        return self._inner[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._inner[key] = value

    def __delitem__(self, key: str) -> None:
        del self._inner[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CookieMap):
            return self._inner == other._inner
        if isinstance(other, Mapping):
            return self._inner == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CookieMap({self._inner!r})"

    # -- Cookie API --

    def add(self, key: str, value: str) -> None:
        """Insert or replace *key*."""
        self._inner[key] = value

    def take(self, key: str) -> str | None:
        """Remove *key* and return its value, or ``None`` if absent."""
        return self._inner.pop(key, None)

    def get_pair(self, key1: str, key2: str) -> tuple[str, str] | None:
        """Both values, or ``None`` if either key is missing.

        Handy for token pairs::

            tokens = cookies.get_pair("access_token", "refresh_token")
        """
        first = self._inner.get(key1)
        if first is None:
            return None
        second = self._inner.get(key2)
        if second is None:
            return None
        return first, second

    def is_empty(self) -> bool:
        return not self._inner

    def to_header_value(self) -> str:
        return serialize(self)


def parse_request_cookie(raw: str) -> CookieMap:
    """Parse a ``Cookie`` request header value.

    ``key=value`` segments are separated by ``;``.  Keys are trimmed,
    values are kept verbatim.  An empty or blank header is an empty map.

    Raises:
        MalformedHeader: a segment has no ``=``.
    """
    cookie_map = CookieMap()
    if not raw.strip():
        return cookie_map

    for segment in raw.split(";"):
        key, sep, value = segment.partition("=")
        if not sep:
            logger.debug("Malformed Cookie header, segment %r has no '='", segment)
            raise MalformedHeader(segment)
        cookie_map[key.strip()] = value
    return cookie_map


def parse_response_cookies(raws: Iterable[str]) -> CookieMap:
    """Collect the name/value part of each ``Set-Cookie`` value.

    Attributes after the first ``;`` are discarded.

    Raises:
        MalformedHeader: a value has no ``=`` before its first ``;``.
    """
    cookie_map = CookieMap()
    for raw in raws:
        pair = raw.partition(";")[0]
        key, sep, value = pair.partition("=")
        if not sep:
            logger.debug("Malformed Set-Cookie value %r has no '='", raw)
            raise MalformedHeader(pair)
        cookie_map[key] = value
    return cookie_map


def serialize(cookies: Mapping[str, str]) -> str:
    """``key1=value1;key2=value2`` sorted by key, no space after ``;``."""
    return ";".join(f"{key}={value}" for key, value in sorted(cookies.items()))
