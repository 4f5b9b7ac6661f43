"""Crumb exception hierarchy.

Shared by the parsers, the extraction layer, and the ASGI middleware so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class MalformedHeader(CrumbError, ValueError):
    """A ``Cookie`` segment has no ``=``.

    Request-side parsing is all-or-nothing: one bad segment discards the
    whole header, so callers never see a partial map.
    """

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"cookie segment without '=': {segment!r}")


class MissingHeader(CrumbError, LookupError):
    """The request carries no ``Cookie`` header at all."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"missing {header} header")


@dataclass(frozen=True, slots=True)
class HTTPError(CrumbError):
    """An error that maps directly to an HTTP status code.

    Raised by the extraction layer. The ASGI middleware catches these
    and answers with ``status`` and ``detail`` as a plain-text body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class CookieRejection(HTTPError):
    """500 — the ``Cookie`` header is missing or malformed."""

    def __init__(self, status: int = 500, detail: str = "CookieRejection") -> None:
        super().__init__(status=status, detail=detail)
