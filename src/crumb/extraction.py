"""Cookie extraction from a request's headers.

The glue between a server framework and the parsers: look the headers
up, parse them, and turn every request-side failure into a single
``CookieRejection`` the framework can render as a response.

- ``extract_cookies``: the ``Cookie`` header (first value only) as a
  ``CookieMap``.  Missing or malformed headers are rejected.
- ``extract_set_cookies``: every ``Set-Cookie`` occurrence as a
  ``SetCookieStore``.  Never rejects.
"""

import logging
from collections.abc import Mapping

from crumb.config import CookieConfig
from crumb.errors import CookieRejection, MalformedHeader, MissingHeader
from crumb.http.cookies import CookieMap
from crumb.http.headers import COOKIE, RepeatedHeaders
from crumb.http.set_cookie import SetCookieStore

logger = logging.getLogger("crumb.server")


def extract_cookies(headers: Mapping[str, str], config: CookieConfig | None = None) -> CookieMap:
    """Parse the request's ``Cookie`` header.

    Args:
        headers: The request headers.  Only the first ``Cookie`` value
            is read, even if the framework exposes several lines.
        config: Rejection status/detail and whether a missing header
            is allowed.  Defaults to ``CookieConfig()``.

    Raises:
        CookieRejection: The header is missing (unless allowed) or malformed.
    """
    cfg = config or CookieConfig()
    try:
        return CookieMap.from_headers(COOKIE, headers)
    except MissingHeader as exc:
        if not cfg.require_cookie_header:
            return CookieMap()
        logger.debug("Rejecting request: %s", exc)
        raise CookieRejection(cfg.rejection_status, cfg.rejection_detail) from exc
    except MalformedHeader as exc:
        logger.debug("Rejecting request: %s", exc)
        raise CookieRejection(cfg.rejection_status, cfg.rejection_detail) from exc


def extract_set_cookies(headers: RepeatedHeaders) -> SetCookieStore:
    """Parse every ``Set-Cookie`` occurrence.  Bad lines are skipped."""
    return SetCookieStore.from_headers(headers)
