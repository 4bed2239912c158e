"""Error handling for junction requests.

Maps HTTPError exceptions and unexpected handler failures to Response
objects. Unmatched paths are not errors and never reach this module.
"""

import html
import logging
import traceback

from junction.errors import HTTPError
from junction.http.request import Request
from junction.http.response import Response

logger = logging.getLogger("junction.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError raised by a handler to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    resp = Response(body=exc.detail or f"Error {exc.status}").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        trace = "".join(traceback.format_exception(exc))
        body = f"<h1>500 Internal Server Error</h1><pre>{html.escape(trace)}</pre>"
        return Response(body=body, status=500)

    return Response(body="Internal Server Error", status=500)
