"""Route and RouteMatch frozen dataclasses."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from junction.errors import RegistrationError
from junction.routing.template import compile_template


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route.

    Immutable after construction. The route table and the match cache
    hold the same instance; nothing copies it.
    """

    template: str
    pattern: re.Pattern[str]
    param_names: tuple[str, ...]
    handler: Callable[..., Any]

    @classmethod
    def compile(cls, template: str, handler: Callable[..., Any]) -> "Route":
        """Build a Route from a template and a handler.

        Raises ``RegistrationError`` if *handler* is not callable or the
        template has an unnamed or repeated parameter.
        """
        if not callable(handler):
            raise RegistrationError(
                template, f"handler {type(handler).__name__!r} is not callable"
            )
        compiled = compile_template(template)
        return cls(
            template=template,
            pattern=compiled.pattern,
            param_names=compiled.param_names,
            handler=handler,
        )

    def bind(self, path: str) -> dict[str, str] | None:
        """Full-match *path* and return its parameter bindings.

        Returns ``None`` if the pattern does not match the whole path.
        """
        m = self.pattern.fullmatch(path)
        if m is None:
            return None
        return dict(zip(self.param_names, m.groups(), strict=True))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]

    @property
    def handler(self) -> Callable[..., Any]:
        return self.route.handler
