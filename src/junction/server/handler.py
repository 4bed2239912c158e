"""ASGI handler — translates ASGI scope/messages to junction types.

The only component that touches raw ASGI directly. Converts the scope
to a Request, resolves it through the Router, calls the handler with
``(request, state)`` and sends the Response back through ASGI send().
"""

import logging

from junction._internal.asgi import Receive, Scope, Send
from junction._internal.invoke import invoke
from junction._internal.types import RequestHook
from junction.errors import HTTPError
from junction.http.request import Request, RequestState
from junction.http.response import Response
from junction.routing.router import Router
from junction.server.errors import handle_http_error, handle_internal_error
from junction.server.negotiation import to_response
from junction.server.sender import send_response

logger = logging.getLogger("junction.server")


async def dispatch(request: Request, router: Router, *, debug: bool = False) -> Response:
    """Route one request and produce its Response.

    On a match the handler gets the state with path params merged in.
    Otherwise the ``"404"`` route handles it, or the built-in 404 when
    none is registered.
    """
    state = RequestState.from_request(request)

    try:
        match = router.match(request.path)
        if match is not None:
            state = state.with_path_params(match.path_params)
            result = await invoke(match.handler, request, state)
            return to_response(result)

        logger.debug("404 %s %s", request.method, request.path)
        fallback = router.not_found_route
        if fallback is None:
            return Response.not_found()
        return to_response(await invoke(fallback.handler, request, state))

    except HTTPError as exc:
        return handle_http_error(exc, request)
    except Exception as exc:
        return handle_internal_error(exc, request, debug=debug)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    on_request: RequestHook | None = None,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    response = await dispatch(request, router, debug=debug)

    if on_request is not None:
        try:
            on_request(request, response)
        except Exception:
            logger.exception("on_request hook failed for %s %s", request.method, request.path)

    await send_response(response, send)
