"""Route table and matcher.

The route table and its match cache live together in one immutable
``RouterState`` held by an ``AtomicRef``. Registration replaces the
whole state; a cache miss swaps in a new state carrying one more cache
entry. Readers never lock.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from junction._internal.atomic import AtomicRef
from junction._internal.types import LogHook
from junction.config import DEFAULT_CACHE_LIMIT, check_cache_limit
from junction.routing.cache import MatchCache
from junction.routing.route import Route, RouteMatch

logger = logging.getLogger("junction.router")

NOT_FOUND_KEY = "404"


@dataclass(frozen=True, slots=True)
class RouterState:
    """One consistent snapshot of the route table and its cache."""

    routes: Mapping[str, Route] = field(default_factory=lambda: MappingProxyType({}))
    cache: MatchCache = field(default_factory=MatchCache)


class Router:
    """Path-keyed route table with a bounded match cache.

    Usage::

        router = Router(cache_limit=512)
        router.set_routes({"/users/:id": show_user, "404": not_found})
        match = router.match("/users/42")
        match.path_params  # {"id": "42"}

    Thread safety:
        ``match()`` reads the current state without locking. Cache
        writes use compare-and-set; two requests resolving the same new
        path may both write the same entry. A cache write racing a
        ``set_routes()`` is dropped.
    """

    __slots__ = ("_log", "_state", "cache_limit")

    def __init__(
        self,
        cache_limit: int = DEFAULT_CACHE_LIMIT,
        *,
        log: LogHook | None = None,
    ) -> None:
        self.cache_limit = check_cache_limit(cache_limit)
        self._log: LogHook = log or logger.debug
        self._state: AtomicRef[RouterState] = AtomicRef(RouterState())

    # -- Registration --

    def set_routes(self, routes: Mapping[str, Callable[..., Any]]) -> None:
        """Replace the whole route table.

        Every entry is compiled before anything is installed. If one
        fails, ``RegistrationError`` propagates and the current table
        stays as it was. The cache starts empty for the new table.
        """
        compiled = {
            template: Route.compile(template, handler) for template, handler in routes.items()
        }
        self._state.set(RouterState(routes=MappingProxyType(compiled)))
        self._log(f"route table replaced: {len(compiled)} routes")

    @property
    def routes(self) -> Mapping[str, Route]:
        """The current route table, in registration order (read-only)."""
        return self._state.get().routes

    @property
    def not_found_route(self) -> Route | None:
        """The fallback route registered under ``"404"``, if any."""
        return self._state.get().routes.get(NOT_FOUND_KEY)

    # -- Cache --

    @property
    def cache(self) -> MatchCache:
        return self._state.get().cache

    @property
    def cache_size(self) -> int:
        return len(self._state.get().cache)

    def clear_cache(self) -> None:
        """Drop every cached path, keeping the table."""
        while True:
            state = self._state.get()
            if self._state.compare_and_set(state, replace(state, cache=MatchCache())):
                return

    # -- Matching --

    def match(self, path: str) -> RouteMatch | None:
        """Resolve *path* to a route and its path parameters.

        A cached path skips the table scan; its parameters are still
        rebound from the cached route's pattern. Routes are tried in
        registration order and the first full match wins. Returns
        ``None`` when nothing matches.
        """
        state = self._state.get()

        cached = state.cache.get(path)
        if cached is not None:
            params = cached.bind(path)
            if params is not None:
                return RouteMatch(route=cached, path_params=params)

        for template, route in state.routes.items():
            if template == NOT_FOUND_KEY:
                continue
            params = route.bind(path)
            if params is not None:
                self._remember(state, path, route)
                return RouteMatch(route=route, path_params=params)

        return None

    def _remember(self, seen: RouterState, path: str, route: Route) -> None:
        """Add ``path -> route`` to the cache of the current state.

        Gives up if the table was replaced since *seen* was read.
        """
        state = seen
        while True:
            if state.routes is not seen.routes:
                return
            if state.cache.would_clear(path, self.cache_limit):
                self._log(f"match cache full ({len(state.cache)} entries), clearing")
            new = replace(state, cache=state.cache.with_entry(path, route, self.cache_limit))
            if self._state.compare_and_set(state, new):
                return
            state = self._state.get()

    def __repr__(self) -> str:
        state = self._state.get()
        return f"Router({len(state.routes)} routes, {len(state.cache)} cached)"
