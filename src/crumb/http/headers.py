"""Header names and an immutable, case-insensitive header collection.

``Headers`` implements ``Mapping[str, str]`` and ``RepeatedHeaders``.
Repeated lines (several ``Set-Cookie``, a duplicated ``Cookie``) stay
distinct and in wire order; ``__getitem__`` only ever sees the first.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol, runtime_checkable

COOKIE = "Cookie"
SET_COOKIE = "Set-Cookie"


@runtime_checkable
class RepeatedHeaders(Protocol):
    """Anything that can list every value of a repeated header line."""

    def get_list(self, key: str) -> list[str]: ...


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers over raw byte pairs.

    Values are decoded as latin-1 once, at construction.  Keys are
    exposed lower-cased.
    """

    __slots__ = ("_index", "_raw")

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Headers":
        """Build from ``(name, value)`` string pairs, keeping duplicates."""
        return cls(tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Headers is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        values = self._index.get(key.lower())
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({self._index!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._index.get(key.lower())
        return values[0] if values else default

    def get_list(self, key: str) -> list[str]:
        """Every value for *key* in wire order (e.g. multiple ``Set-Cookie``)."""
        return list(self._index.get(key.lower(), ()))

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The undecoded byte pairs, as received."""
        return self._raw
