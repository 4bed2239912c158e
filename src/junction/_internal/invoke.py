"""Invoke helpers — call sync or async handlers uniformly.

Junction handlers can be ``def`` or ``async def``. Any code that calls
a user-provided handler must handle both cases. This module provides
a single helper so the sync/async check lives in exactly one place.

Usage::

    from junction._internal.invoke import invoke

    result = await invoke(handler, request, state)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine.

    Works with both sync and async callables::

        def show_user(request, state):
            return f"user {state.path_params['id']}"

        async def show_user(request, state):
            user = await load_user(state.path_params["id"])
            return {"name": user.name}
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
