"""Junction application class.

Holds the Router and the request hooks, and is the ASGI entry point.
The route table is replaced as a whole on every registration.
"""

from collections.abc import Callable, Mapping
from typing import Any

from junction._internal.asgi import Receive, Scope, Send
from junction._internal.invoke import invoke
from junction._internal.types import Handler, LogHook, RequestHook
from junction.config import AppConfig
from junction.routing.route import RouteMatch
from junction.routing.router import Router
from junction.server.handler import handle_request


class App:
    """The junction application.

    Usage::

        app = App(routes={"/users/:id": show_user})

        @app.route("/health")
        def health(request, state):
            return "ok"

    Routes registered with ``@app.route`` are appended to the current
    table and the full table is installed again, so the router only
    ever sees whole-table replacements.
    """

    __slots__ = (
        "_on_request",
        "_route_handlers",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        routes: Mapping[str, Handler] | None = None,
        *,
        log: LogHook | None = None,
        on_request: RequestHook | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router = Router(self.config.cache_limit, log=log)
        self._on_request = on_request
        self._route_handlers: dict[str, Handler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        if routes is not None:
            self.set_routes(routes)

    # -- Route registration --

    def set_routes(self, routes: Mapping[str, Handler]) -> None:
        """Replace the whole route table.

        Raises ``RegistrationError`` if any handler is not callable;
        the previous table then stays in place.
        """
        self._router.set_routes(routes)
        self._route_handlers = dict(routes)

    def route(self, template: str) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            template: Path template. Use ``:name`` for path parameters,
                or ``"404"`` for the not-found handler.
        """

        def decorator(func: Handler) -> Handler:
            self.set_routes({**self._route_handlers, template: func})
            return func

        return decorator

    @property
    def router(self) -> Router:
        return self._router

    def match(self, path: str) -> RouteMatch | None:
        """Resolve *path* against the current route table."""
        return self._router.match(path)

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a function to run at ASGI lifespan startup."""
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a function to run at ASGI lifespan shutdown."""
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce on the configured host and port."""
        from junction.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            on_request=self._on_request,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await _run_hooks(self._startup_hooks)
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await _run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return


async def _run_hooks(hooks: list[Callable[..., Any]]) -> None:
    for hook in hooks:
        await invoke(hook)
