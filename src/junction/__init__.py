"""Junction — a small ASGI request router.

Maps request paths to handlers through ``:name`` templates, caches
resolved paths, and decodes query strings into typed, nested values.

Basic usage::

    from junction import App

    def show_user(request, state):
        return {"id": state.path_params["id"], "page": state.query.get("page", 1)}

    app = App(routes={"/users/:id": show_user})
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "JunctionError",
    "NotFound",
    "RegistrationError",
    "Request",
    "RequestState",
    "Response",
    "Router",
    "parse_query_string",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import junction`` fast while providing a clean top-level API.
    """
    if name == "App":
        from junction.app import App

        return App

    if name == "AppConfig":
        from junction.config import AppConfig

        return AppConfig

    if name in ("Request", "RequestState"):
        from junction.http import request

        return getattr(request, name)

    if name == "Response":
        from junction.http.response import Response

        return Response

    if name == "Router":
        from junction.routing.router import Router

        return Router

    if name == "parse_query_string":
        from junction.http.query import parse_query_string

        return parse_query_string

    if name in ("ConfigurationError", "HTTPError", "JunctionError", "NotFound", "RegistrationError"):
        from junction import errors

        return getattr(errors, name)

    msg = f"module 'junction' has no attribute {name!r}"
    raise AttributeError(msg)
