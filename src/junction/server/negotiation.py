"""Maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable. The router
never looks at the response; this is the only place its shape matters.
"""

import json as json_module
from typing import Any

from junction.http.response import Response


def to_response(value: Any) -> Response:
    """Convert a handler's return value to a Response.

    Dispatch order:

    1. ``Response``              -> pass through
    2. ``None``                  -> 204, empty body
    3. ``str``                   -> 200, text/html
    4. ``bytes``                 -> 200, application/octet-stream
    5. ``dict`` / ``list``       -> 200, application/json
    6. ``(value, int)``          -> convert value, override status
    7. ``(value, int, dict)``    -> convert value, override status + headers
    """
    match value:
        case Response():
            return value
        case None:
            return Response(status=204)
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return Response(
                body=json_module.dumps(value, default=str),
                content_type="application/json; charset=utf-8",
            )
        case (inner, int() as status):
            return to_response(inner).with_status(status)
        case (inner, int() as status, dict() as headers):
            response = to_response(inner).with_status(status)
            for name, header_value in headers.items():
                response = response.with_header(name, header_value)
            return response
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                f"Return str, bytes, dict, list, None, a (value, status) tuple, or Response."
            )
            raise TypeError(msg)
