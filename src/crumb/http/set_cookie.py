"""Response-side cookies: parse and format ``Set-Cookie`` header lines.

``SetCookieStore`` maps each cookie name to its value and
``CookieAttributes``.  Parsing is per-entry tolerant: a line without a
usable ``name=value`` pair is dropped and the rest of the batch is kept.
Formatting yields one independent ``Set-Cookie`` line per entry; lines
are never comma-joined.
"""

import logging
from collections.abc import Iterable, Iterator

from crumb.http.attributes import CookieAttributes, is_attribute_token, parse_attributes
from crumb.http.headers import SET_COOKIE, RepeatedHeaders

logger = logging.getLogger("crumb.http")


def format_entry(name: str, value: str, attributes: CookieAttributes) -> str:
    """Serialize one cookie to a ``Set-Cookie`` header value.

    Field order is fixed and no space follows ``;``::

        name=value;Domain=D;Max-Age=M;Path=P;SameSite=S;HttpOnly;Secure
    """
    parts = [f"{name}={value}"]
    if attributes.domain is not None:
        parts.append(f"Domain={attributes.domain}")
    if attributes.max_age is not None:
        parts.append(f"Max-Age={attributes.max_age}")
    if attributes.path is not None:
        parts.append(f"Path={attributes.path}")
    if attributes.same_site is not None:
        parts.append(f"SameSite={attributes.same_site.value}")
    if attributes.http_only:
        parts.append("HttpOnly")
    if attributes.secure:
        parts.append("Secure")
    return ";".join(parts)


class SetCookieStore:
    """Cookies to send (or received) via ``Set-Cookie``, keyed by name.

    Build one by parsing every ``Set-Cookie`` occurrence at once::

        store = SetCookieStore.parse(headers.get_list("set-cookie"))

    or incrementally, chaining ``set``::

        store = SetCookieStore().set("sid", "abc", CookieAttributes().with_http_only(True))

    Iterating yields ``(SET_COOKIE, line)`` pairs sorted by cookie name.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, CookieAttributes]] = {}

    @classmethod
    def parse(cls, raws: Iterable[str]) -> "SetCookieStore":
        """Parse ``Set-Cookie`` header values.  Never raises.

        Only the first name/value token of each line is used; further
        ones are dropped.  A later line for the same name replaces an
        earlier one.

        Every token is trimmed, so spaces around a value are lost.  A
        cookie named like an attribute (``Domain``, ``Path``, ``Max-Age``,
        ``SameSite``) reads as that attribute, and its line is skipped.
        """
        store = cls()
        for raw in raws:
            tokens = [token.strip() for token in raw.split(";")]
            attribute_tokens = [token for token in tokens if is_attribute_token(token)]
            pair_tokens = [token for token in tokens if not is_attribute_token(token)]

            if not pair_tokens or "=" not in pair_tokens[0]:
                logger.debug("Skipping Set-Cookie without name=value: %r", raw)
                continue

            name, _, value = pair_tokens[0].partition("=")
            store._entries[name] = (value, parse_attributes(attribute_tokens))
        return store

    @classmethod
    def from_headers(cls, headers: RepeatedHeaders) -> "SetCookieStore":
        """Parse every ``Set-Cookie`` occurrence in *headers*."""
        return cls.parse(headers.get_list(SET_COOKIE))

    def set(self, name: str, value: str, attributes: CookieAttributes | None = None) -> "SetCookieStore":
        """Insert or replace *name*.  Returns ``self`` for chaining.

        Raises:
            ValueError: The formatted line is not latin-1 encodable, so it
                could not be sent as a header.
        """
        attrs = attributes if attributes is not None else CookieAttributes()
        line = format_entry(name, value, attrs)
        try:
            line.encode("latin-1")
        except UnicodeEncodeError as exc:
            msg = f"Set-Cookie for {name!r} is not latin-1 encodable: {line!r}"
            raise ValueError(msg) from exc
        self._entries[name] = (value, attrs)
        return self

    def remove(self, name: str) -> "SetCookieStore":
        """Drop *name* if present.  Returns ``self`` for chaining."""
        self._entries.pop(name, None)
        return self

    def get(self, name: str) -> str | None:
        """Return the value stored for *name*, or ``None``."""
        entry = self._entries.get(name)
        return entry[0] if entry is not None else None

    def get_attributes(self, name: str) -> CookieAttributes | None:
        """Return the attributes stored for *name*, or ``None``."""
        entry = self._entries.get(name)
        return entry[1] if entry is not None else None

    def take(self, name: str) -> str | None:
        """Remove *name* and return its value, or ``None`` if absent."""
        entry = self._entries.pop(name, None)
        return entry[0] if entry is not None else None

    def is_empty(self) -> bool:
        return not self._entries

    def items(self) -> list[tuple[str, tuple[str, CookieAttributes]]]:
        """``(name, (value, attributes))`` sorted by name."""
        return sorted(self._entries.items())

    def lines(self) -> list[str]:
        """Formatted ``Set-Cookie`` values, one per entry."""
        return [format_entry(name, value, attributes) for name, (value, attributes) in self.items()]

    def raw_headers(self) -> list[tuple[bytes, bytes]]:
        """ASGI-ready ``(b"set-cookie", line)`` pairs."""
        header = SET_COOKIE.lower().encode("latin-1")
        return [(header, line.encode("latin-1")) for line in self.lines()]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for line in self.lines():
            yield SET_COOKIE, line

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetCookieStore):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SetCookieStore({dict(self.items())!r})"
