"""Adapter configuration.

CookieConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Configuration for cookie extraction. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CookieConfig(scope_key="jar", require_cookie_header=False)
    """

    # Keys in scope["state"] for the parsed CookieMap and the outgoing SetCookieStore
    scope_key: str = "cookies"
    set_cookie_key: str = "set_cookies"

    # A request without a Cookie header is rejected unless this is False
    require_cookie_header: bool = True

    # Rejection response
    rejection_status: int = 500
    rejection_detail: str = "CookieRejection"
