"""Set-Cookie attribute grammar.

Classifies the ``;``-separated tokens of a ``Set-Cookie`` value into
attribute tokens (``Domain=``, ``Path=``, ``Max-Age=``, ``SameSite=``,
``HttpOnly``, ``Secure``) and name/value tokens, and folds attribute
tokens into a ``CookieAttributes`` record.

Matching is case-insensitive on input. Values are taken from the token
as written, after the first ``=``, so ``Path=/Admin`` keeps its case.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

logger = logging.getLogger("crumb.http")

_ATTRIBUTE_PREFIXES = ("max-age=", "domain=", "path=", "samesite=")
_ATTRIBUTE_FLAGS = ("httponly", "secure")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class SameSite(Enum):
    """Cross-site policy. Written as ``Strict``/``Lax``/``None``."""

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "SameSite | None":
        """Case-insensitive lookup; ``None`` for anything unrecognized."""
        return _SAME_SITE_BY_NAME.get(text.lower())


_SAME_SITE_BY_NAME = {member.value.lower(): member for member in SameSite}


@dataclass(frozen=True, slots=True)
class CookieAttributes:
    """Attributes of one ``Set-Cookie`` entry.

    A field appears on the wire exactly when it is set: booleans when
    true, optionals when not ``None``.  The ``with_*`` methods return a
    new record and can be chained::

        attrs = CookieAttributes().with_path("/").with_http_only(True)
    """

    http_only: bool = False
    secure: bool = False
    max_age: int | None = None  # seconds
    domain: str | None = None
    path: str | None = None
    same_site: SameSite | None = None

    def with_http_only(self, http_only: bool) -> "CookieAttributes":
        return replace(self, http_only=http_only)

    def with_secure(self, secure: bool) -> "CookieAttributes":
        return replace(self, secure=secure)

    def with_max_age(self, max_age: int) -> "CookieAttributes":
        return replace(self, max_age=max_age)

    def with_domain(self, domain: str) -> "CookieAttributes":
        return replace(self, domain=domain)

    def with_path(self, path: str) -> "CookieAttributes":
        return replace(self, path=path)

    def with_same_site(self, same_site: SameSite) -> "CookieAttributes":
        return replace(self, same_site=same_site)


def is_attribute_token(token: str) -> bool:
    """True if *token* configures the cookie rather than naming it.

    ``SameSite=`` counts as an attribute, so a leading ``SameSite=Lax``
    is never mistaken for the cookie's own name/value pair.
    """
    lowered = token.lower()
    return lowered.startswith(_ATTRIBUTE_PREFIXES) or lowered in _ATTRIBUTE_FLAGS


def parse_attributes(tokens: Iterable[str]) -> CookieAttributes:
    """Fold attribute tokens into a ``CookieAttributes``.

    Tokens are expected trimmed.  Unknown tokens are ignored, an
    unparsable ``Max-Age`` becomes ``0``, an empty ``Path`` becomes
    ``/``, and an unknown ``SameSite`` value is dropped.  Later tokens
    win over earlier ones for the same attribute.
    """
    http_only = False
    secure = False
    max_age: int | None = None
    domain: str | None = None
    path: str | None = None
    same_site: SameSite | None = None

    for token in tokens:
        lowered = token.lower()
        value = token.partition("=")[2]
        if lowered.startswith("domain="):
            domain = value
        elif lowered.startswith("max-age="):
            max_age = _parse_max_age(value)
        elif lowered.startswith("path="):
            path = value or "/"
        elif lowered == "httponly":
            http_only = True
        elif lowered == "secure":
            secure = True
        elif lowered.startswith("samesite="):
            parsed = SameSite.parse(value)
            if parsed is None:
                logger.debug("Ignoring unknown SameSite value %r", value)
            else:
                same_site = parsed

    return CookieAttributes(
        http_only=http_only,
        secure=secure,
        max_age=max_age,
        domain=domain,
        path=path,
        same_site=same_site,
    )


def _parse_max_age(value: str) -> int:
    """Parse a signed 64-bit ``Max-Age``; anything else is ``0``."""
    if _INTEGER.fullmatch(value):
        seconds = int(value)
        if _INT64_MIN <= seconds <= _INT64_MAX:
            return seconds
    logger.debug("Unparsable Max-Age %r, using 0", value)
    return 0
