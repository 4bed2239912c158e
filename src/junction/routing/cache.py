"""Bounded path -> Route cache.

The cache is a value, not a container: ``with_entry`` returns a new
cache and the router swaps it in atomically. When an insert would go
over the limit the whole cache is dropped and the new cache holds only
the inserted entry. No per-entry bookkeeping, no LRU.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from junction.routing.route import Route


class MatchCache(Mapping[str, Route]):
    """Immutable mapping from a concrete request path to its Route.

    Only the winning Route is remembered. Path parameters are rebound
    on every hit.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Route] | None = None) -> None:
        self._entries: Mapping[str, Route] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, path: str) -> Route:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MatchCache({len(self)} entries)"

    def with_entry(self, path: str, route: Route, limit: int) -> "MatchCache":
        """Return a new cache that also maps *path* to *route*.

        If the result would hold more than *limit* entries, it holds
        only the new one.
        """
        if self.would_clear(path, limit):
            return MatchCache({path: route})
        entries = dict(self._entries)
        entries[path] = route
        return MatchCache(entries)

    def would_clear(self, path: str, limit: int) -> bool:
        """True if inserting *path* would trigger a full clear."""
        return path not in self._entries and len(self._entries) + 1 > limit
