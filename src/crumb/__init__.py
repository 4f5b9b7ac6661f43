"""Crumb — Cookie and Set-Cookie header parsing and formatting.

Reads the ``Cookie`` request header into a flat map, reads ``Set-Cookie``
response headers into a store of values plus attributes, and writes both
back as wire strings.

Basic usage::

    from crumb import CookieAttributes, SameSite, SetCookieStore, parse_request_cookie

    cookies = parse_request_cookie("session=abc; theme=dark")
    cookies.get("theme")  # "dark"

    store = SetCookieStore().set(
        "session",
        "abc",
        CookieAttributes().with_path("/").with_http_only(True).with_same_site(SameSite.LAX),
    )
    for name, line in store:
        ...  # ("Set-Cookie", "session=abc;Path=/;SameSite=Lax;HttpOnly")

ASGI (``CookieMiddleware``)::

    from crumb.middleware import CookieMiddleware
    app = CookieMiddleware(app)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "COOKIE",
    "SET_COOKIE",
    "CookieAttributes",
    "CookieConfig",
    "CookieMap",
    "CookieMiddleware",
    "CookieRejection",
    "CrumbError",
    "HTTPError",
    "Headers",
    "MalformedHeader",
    "MissingHeader",
    "SameSite",
    "SetCookieStore",
    "extract_cookies",
    "extract_set_cookies",
    "format_entry",
    "is_attribute_token",
    "parse_attributes",
    "parse_request_cookie",
    "parse_response_cookies",
    "serialize",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "COOKIE": "crumb.http.headers",
    "SET_COOKIE": "crumb.http.headers",
    "Headers": "crumb.http.headers",
    "CookieAttributes": "crumb.http.attributes",
    "SameSite": "crumb.http.attributes",
    "is_attribute_token": "crumb.http.attributes",
    "parse_attributes": "crumb.http.attributes",
    "SetCookieStore": "crumb.http.set_cookie",
    "format_entry": "crumb.http.set_cookie",
    "CookieMap": "crumb.http.cookies",
    "parse_request_cookie": "crumb.http.cookies",
    "parse_response_cookies": "crumb.http.cookies",
    "serialize": "crumb.http.cookies",
    "CookieConfig": "crumb.config",
    "extract_cookies": "crumb.extraction",
    "extract_set_cookies": "crumb.extraction",
    "CookieMiddleware": "crumb.middleware.cookies",
    "CookieRejection": "crumb.errors",
    "CrumbError": "crumb.errors",
    "HTTPError": "crumb.errors",
    "MalformedHeader": "crumb.errors",
    "MissingHeader": "crumb.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
