"""Junction exception hierarchy.

Shared across Router, App and the request handler so every module
raises and catches the same types.

A path that matches no route is not an error: ``Router.match()``
returns ``None`` and the handler falls back to the 404 route.
"""

from dataclasses import dataclass


class JunctionError(Exception):
    """Base for all junction-specific errors."""


class ConfigurationError(JunctionError):
    """Raised when app configuration is invalid."""


class RegistrationError(ConfigurationError):
    """Raised when a route table cannot be registered.

    Fatal at registration time. ``Router.set_routes()`` compiles the
    whole table before installing it, so a failure never leaves a
    partially replaced table behind.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid route {template!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(JunctionError):
    """An error that maps directly to an HTTP status code.

    Raised by handlers. The ASGI handler catches these and turns them
    into a response with the same status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818: conventional name in web frameworks
    """404 — raised by a handler that wants the not-found path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
