"""Immutable HTTP request and per-request routing state.

``Request`` is what arrived on the wire. ``RequestState`` is what the
router worked out about it: the path, the parsed query and the path
parameters. A new state is created for every request and handlers
extend it by building a new one, never by mutating a shared object.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from junction._internal.asgi import Scope
from junction.http.query import parse_query_string


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Built once from the ASGI scope. Header names are lower-cased.
    """

    method: str
    path: str
    query_string: str = ""
    headers: tuple[tuple[str, str], ...] = ()
    client: tuple[str, int] | None = None

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key == wanted:
                return value
        return default

    @property
    def url(self) -> str:
        """Path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope.

        A missing or empty ``query_string`` becomes ``""``.
        """
        raw_query = scope.get("query_string") or b""
        if isinstance(raw_query, bytes):
            raw_query = raw_query.decode("latin-1")
        headers = tuple(
            (name.decode("latin-1").lower(), value.decode("latin-1"))
            for name, value in scope.get("headers", ())
        )
        client = scope.get("client")
        return cls(
            method=scope.get("method", "GET"),
            path=scope["path"],
            query_string=raw_query,
            headers=headers,
            client=tuple(client) if client else None,
        )


@dataclass(frozen=True, slots=True)
class RequestState:
    """Routing state for one request.

    Attributes:
        path: The request path that was matched.
        query: Parsed, coerced query parameters (nested dicts for
            bracket keys).
        path_params: Values bound by the route's ``:name`` segments.
        extras: Values added by handlers via ``with_values()``.
    """

    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_request(cls, request: Request) -> RequestState:
        """Initial state: the path and its parsed query string."""
        return cls(path=request.path, query=parse_query_string(request.query_string))

    def with_path_params(self, params: Mapping[str, str]) -> RequestState:
        """Return a new state with *params* merged into ``path_params``."""
        return replace(self, path_params={**self.path_params, **params})

    def with_values(self, **values: Any) -> RequestState:
        """Return a new state carrying extra handler-defined values."""
        return replace(self, extras=MappingProxyType({**self.extras, **values}))

    def get(self, name: str, default: Any = None) -> Any:
        """Look up *name* in path params, then extras, then the query."""
        if name in self.path_params:
            return self.path_params[name]
        if name in self.extras:
            return self.extras[name]
        return self.query.get(name, default)
